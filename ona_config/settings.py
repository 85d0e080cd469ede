"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

Local development keeps secrets in a gitignored .env file. The Notion
integration secret is NOT configured here: each user supplies it through the
Notion connector, which persists it in the credential store.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # NOTION REST API
    # ========================================================================
    NOTION_API_BASE_URL: str = Field(
        default="https://api.notion.com/v1",
        description="Base URL of the Notion REST API (including version prefix)",
    )
    NOTION_API_VERSION: str = Field(
        default="2022-06-28",
        description="Value sent in the Notion-Version header",
        pattern=r"^\d{4}-\d{2}-\d{2}$",
    )

    # ========================================================================
    # CREDENTIAL STORE (Notion connector)
    # ========================================================================
    CREDENTIAL_STORE_PATH: str = Field(
        default=".ona/credentials.json",
        description="JSON file holding the connector's durable key-value slots",
    )

    # ========================================================================
    # LLM (Anthropic)
    # ========================================================================
    ANTHROPIC_API_KEY: str = Field(default="", description="Anthropic API key for the chat runtime")
    LLM_MODEL: str = Field(default="claude-sonnet-4-5-20250929")
    LLM_MAX_TOKENS: int = Field(default=4096, ge=1)
    CHAT_MAX_STEPS: int = Field(
        default=8, ge=1, le=50, description="Maximum model turns per chat request"
    )

    # ========================================================================
    # API SERVER
    # ========================================================================
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    API_CORS_ORIGINS: str = Field(default="http://localhost:3000")
    API_CORS_ALLOW_CREDENTIALS: bool = Field(default=True)

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    # ========================================================================
    # DEPLOYMENT
    # ========================================================================
    ENVIRONMENT: str = Field(
        default="development", pattern="^(development|staging|production)$"
    )
