"""
/chat Router - Notion-aware chat endpoint.

Runs the Claude tool loop with the Notion tools bound to the secret stored
for the connector.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from apps.chat_api.deps import get_chat_runtime, get_settings
from ona_config.settings import Settings
from ona_llm import ChatMessage, ChatResult, ChatRuntime, LLMAuthError, LLMError, LLMRateLimitError
from ona_obs.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================


class ChatRequest(BaseModel):
    """Request schema for POST /chat."""

    chat_id: str = Field(..., min_length=1, description="Chat identifier")
    messages: list[ChatMessage] = Field(..., min_length=1, description="Conversation so far")
    max_steps: int | None = Field(
        default=None, ge=1, le=50, description="Maximum model turns (defaults to CHAT_MAX_STEPS)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "chat_id": "chat_123",
                "messages": [{"role": "user", "content": "Find my meeting notes page"}],
            }
        }


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post("/chat", response_model=ChatResult)
async def chat(
    body: ChatRequest,
    runtime: ChatRuntime = Depends(get_chat_runtime),
    settings: Settings = Depends(get_settings),
) -> ChatResult:
    """
    Run one chat turn.

    Raises:
        HTTPException: 429 on LLM rate limit, 502 on other LLM failures
    """
    max_steps = body.max_steps or settings.CHAT_MAX_STEPS
    try:
        return await runtime.run(body.chat_id, body.messages, max_steps=max_steps)
    except LLMRateLimitError as e:
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(e))
    except LLMAuthError as e:
        logger.error("llm_auth_failed", chat_id=body.chat_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except LLMError as e:
        logger.error("llm_request_failed", chat_id=body.chat_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
