"""OpenNotionAI LLM Integration.

Claude with native tool use drives the Notion tools.
"""

from .client import (
    ChatMessage,
    LLMAuthError,
    LLMClient,
    LLMError,
    LLMRateLimitError,
    LLMResponse,
)
from .anthropic_client import AnthropicClient
from .chat import ChatResult, ChatRuntime, ToolCallRecord

__all__ = [
    "ChatMessage",
    "LLMAuthError",
    "LLMClient",
    "LLMError",
    "LLMRateLimitError",
    "LLMResponse",
    "AnthropicClient",
    "ChatResult",
    "ChatRuntime",
    "ToolCallRecord",
]
