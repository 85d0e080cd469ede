"""
Notion Connector Router.

Per-chat connector endpoints behind the "Connect Notion" dropdown:
- GET /chats/{chat_id}/notion: configured state and labels
- PUT /chats/{chat_id}/notion: save (or replace) the integration secret
- DELETE /chats/{chat_id}/notion: disconnect

The stored secret is never returned by any of them.
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from apps.chat_api.deps import get_credential_storage
from ona_connector import CredentialStorage, NotionConnector

router = APIRouter()


class SaveSecretRequest(BaseModel):
    """Request schema for PUT /chats/{chat_id}/notion."""

    secret: str = Field(..., description="Notion internal integration secret")

    @field_validator("secret")
    @classmethod
    def secret_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("secret must not be blank")
        return v


def _connector(chat_id: str, storage: CredentialStorage) -> NotionConnector:
    return NotionConnector(chat_id=chat_id, storage=storage).initialize()


@router.get("/chats/{chat_id}/notion")
def get_connector(
    chat_id: str,
    storage: CredentialStorage = Depends(get_credential_storage),
) -> dict[str, Any]:
    """Return the connector view for a chat."""
    return _connector(chat_id, storage).view()


@router.put("/chats/{chat_id}/notion")
def save_secret(
    chat_id: str,
    body: SaveSecretRequest,
    storage: CredentialStorage = Depends(get_credential_storage),
) -> dict[str, Any]:
    """Save the integration secret (trimmed) and return the updated view."""
    connector = _connector(chat_id, storage)
    connector.set_open(True)
    connector.set_secret_input(body.secret)
    connector.save_secret()
    return connector.view()


@router.delete("/chats/{chat_id}/notion")
def clear_secret(
    chat_id: str,
    storage: CredentialStorage = Depends(get_credential_storage),
) -> dict[str, Any]:
    """Remove the stored secret and return the updated view."""
    connector = _connector(chat_id, storage)
    connector.set_open(True)
    connector.clear_secret()
    return connector.view()
