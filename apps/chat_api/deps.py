"""
FastAPI Dependency Injection.

Provides dependency injection for:
- Application settings
- Credential storage (the Notion secret slot)
- Tool registry
- LLM client and chat runtime
"""

from typing import Any

from fastapi import Depends, HTTPException, status

from ona_config.settings import Settings
from ona_connector import CredentialStorage, JsonFileStorage
from ona_llm import AnthropicClient, ChatRuntime, LLMAuthError, LLMClient
from ona_tools.adapters.notion import register_notion_tools
from ona_tools.registry import ToolRegistry

# Initialize settings
settings = Settings()


# ============================================================================
# SETTINGS DEPENDENCY
# ============================================================================


def get_settings() -> Settings:
    """
    Dependency: Application settings.

    Returns:
        Settings: Pydantic settings instance
    """
    return settings


def notion_client_options(settings: Settings) -> dict[str, Any]:
    """Client options forwarded to every bound Notion tool."""
    return {
        "base_url": settings.NOTION_API_BASE_URL,
        "version": settings.NOTION_API_VERSION,
    }


# ============================================================================
# CREDENTIAL STORAGE DEPENDENCY
# ============================================================================


_storage: CredentialStorage | None = None


def get_credential_storage() -> CredentialStorage:
    """
    Dependency: Durable storage holding the Notion integration secret.

    Returns:
        CredentialStorage: JSON file storage at CREDENTIAL_STORE_PATH
    """
    global _storage
    if _storage is None:
        _storage = JsonFileStorage(settings.CREDENTIAL_STORE_PATH)
    return _storage


# ============================================================================
# TOOL REGISTRY DEPENDENCY
# ============================================================================


_registry: ToolRegistry | None = None


def get_tool_registry() -> ToolRegistry:
    """
    Dependency: Tool registry with every Notion tool registered.

    Returns:
        ToolRegistry: Shared registry of tool factories
    """
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
        register_notion_tools(_registry)
    return _registry


# ============================================================================
# LLM DEPENDENCIES
# ============================================================================


def get_llm_client(settings: Settings = Depends(get_settings)) -> LLMClient:
    """
    Dependency: Claude client.

    Raises:
        HTTPException: 503 if ANTHROPIC_API_KEY is not configured
    """
    try:
        return AnthropicClient(api_key=settings.ANTHROPIC_API_KEY or None, model=settings.LLM_MODEL)
    except LLMAuthError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


def get_chat_runtime(
    llm: LLMClient = Depends(get_llm_client),
    registry: ToolRegistry = Depends(get_tool_registry),
    storage: CredentialStorage = Depends(get_credential_storage),
    settings: Settings = Depends(get_settings),
) -> ChatRuntime:
    """Dependency: chat runtime wired to the stored Notion secret."""
    return ChatRuntime(
        llm=llm,
        registry=registry,
        storage=storage,
        max_tokens=settings.LLM_MAX_TOKENS,
        tool_options=notion_client_options(settings),
    )
