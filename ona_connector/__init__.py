"""Notion credential connector.

Stores the user's Notion integration secret in a single durable slot and
exposes the connector's configured/unconfigured UI state.
"""

from ona_connector.connector import (
    NOTION_TOKEN_STORAGE_KEY,
    NotionConnector,
    read_token,
)
from ona_connector.storage import CredentialStorage, JsonFileStorage, MemoryStorage

__all__ = [
    "NOTION_TOKEN_STORAGE_KEY",
    "NotionConnector",
    "read_token",
    "CredentialStorage",
    "JsonFileStorage",
    "MemoryStorage",
]
