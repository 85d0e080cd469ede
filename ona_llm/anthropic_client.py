"""Anthropic Claude client for the chat runtime.

Wraps the Messages API with native tool use; the Notion tools are passed
as tool definitions and Claude decides which to call.
"""

import os
from typing import Any

from anthropic import AsyncAnthropic
from anthropic import APIError, AuthenticationError, RateLimitError

from .client import (
    LLMClient,
    LLMError,
    LLMAuthError,
    LLMRateLimitError,
    LLMResponse,
)


def _block_to_dict(block: Any) -> dict[str, Any] | None:
    """Normalize an SDK content block to a Messages API param dict."""
    if block.type == "text":
        return {"type": "text", "text": block.text}
    if block.type == "tool_use":
        return {"type": "tool_use", "id": block.id, "name": block.name, "input": block.input}
    return None


class AnthropicClient(LLMClient):
    """Claude client with tool calling."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-sonnet-4-5-20250929",
    ):
        """Initialize Anthropic client.

        Args:
            api_key: Anthropic API key (defaults to ANTHROPIC_API_KEY env var)
            model: Model to use
        """
        self.api_key = api_key or os.getenv("ANTHROPIC_API_KEY")
        if not self.api_key:
            raise LLMAuthError("ANTHROPIC_API_KEY not found in environment")

        self.client = AsyncAnthropic(api_key=self.api_key)
        self._model = model

    @property
    def model_name(self) -> str:
        """Return model identifier."""
        return self._model

    async def create_message(
        self,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        system_prompt: str | None = None,
        max_tokens: int = 4096,
        **kwargs: Any,
    ) -> LLMResponse:
        """Run one Claude turn.

        Raises:
            LLMAuthError: Invalid API key
            LLMRateLimitError: Rate limit exceeded
            LLMError: Other API errors
        """
        params: dict[str, Any] = {
            "model": self._model,
            "max_tokens": max_tokens,
            "system": system_prompt or "",
            "messages": messages,
            **kwargs,
        }
        if tools:
            params["tools"] = tools

        try:
            response = await self.client.messages.create(**params)
        except AuthenticationError as e:
            raise LLMAuthError(f"Anthropic authentication failed: {e}")
        except RateLimitError as e:
            raise LLMRateLimitError(f"Anthropic rate limit exceeded: {e}")
        except APIError as e:
            raise LLMError(f"Anthropic API error: {e}")

        content = [d for d in (_block_to_dict(b) for b in response.content) if d is not None]
        return LLMResponse(stop_reason=response.stop_reason, content=content)
