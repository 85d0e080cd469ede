"""Base LLM client interface.

Defines the contract the chat runtime relies on: one tool-aware model turn.
"""

from abc import ABC, abstractmethod
from typing import Any, Literal

from pydantic import BaseModel, Field


class LLMResponse(BaseModel):
    """One assistant turn, normalized to plain content-block dicts.

    Content blocks are ``{"type": "text", "text": ...}`` or
    ``{"type": "tool_use", "id": ..., "name": ..., "input": {...}}``.
    """

    stop_reason: str | None = None
    content: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(b["text"] for b in self.content if b.get("type") == "text")

    @property
    def tool_calls(self) -> list[dict[str, Any]]:
        return [b for b in self.content if b.get("type") == "tool_use"]


class ChatMessage(BaseModel):
    """A chat message as sent by the UI."""

    role: Literal["user", "assistant"]
    content: str | list[dict[str, Any]]


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    async def create_message(
        self,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        system_prompt: str | None = None,
        max_tokens: int = 4096,
        **kwargs: Any,
    ) -> LLMResponse:
        """Run one model turn.

        Args:
            messages: Conversation so far in Messages API format
            tools: Tool definitions ({name, description, input_schema})
            system_prompt: Optional system instructions
            max_tokens: Maximum tokens to generate
            **kwargs: Additional model-specific parameters

        Returns:
            The assistant turn

        Raises:
            LLMError: If generation fails
        """
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier."""
        pass


class LLMError(Exception):
    """Base exception for LLM client errors."""

    pass


class LLMAuthError(LLMError):
    """Authentication error with LLM provider."""

    pass


class LLMRateLimitError(LLMError):
    """Rate limit exceeded."""

    pass
