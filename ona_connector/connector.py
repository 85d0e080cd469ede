"""Notion Connector.

State model behind the "Connect Notion" dropdown: whether a secret is
configured, what the user has typed, and whether the dropdown is open.
The stored secret is write-only from the UI's point of view; it is never
copied back into the input field or into ``view()``.
"""

from typing import Any

from ona_connector.storage import CredentialStorage
from ona_obs.logging import get_logger

logger = get_logger(__name__)

NOTION_TOKEN_STORAGE_KEY = "notionIntegrationSecret"

NOTION_SECRET_HELP_URL = (
    "https://developers.notion.com/docs/create-a-notion-integration#getting-started"
)


def read_token(storage: CredentialStorage) -> str | None:
    """Return the stored Notion integration secret, or None if not connected."""
    return storage.get_item(NOTION_TOKEN_STORAGE_KEY) or None


class NotionConnector:
    """Configured/unconfigured state plus input and open/close UI state."""

    def __init__(self, chat_id: str, storage: CredentialStorage):
        self.chat_id = chat_id
        self.storage = storage
        self.open = False
        self.secret_input_value = ""
        self.is_configured = False

    def initialize(self) -> "NotionConnector":
        """Load configured state from storage.

        A stored token marks the connector configured but is not placed in
        the input field; with no token the input is reset.
        """
        if read_token(self.storage):
            self.is_configured = True
        else:
            self.is_configured = False
            self.secret_input_value = ""
        return self

    # ------------------------------------------------------------------
    # UI state
    # ------------------------------------------------------------------

    def set_open(self, is_open: bool) -> None:
        self.open = is_open

    def toggle(self) -> None:
        self.open = not self.open

    def set_secret_input(self, value: str) -> None:
        self.secret_input_value = value

    @property
    def can_save(self) -> bool:
        return bool(self.secret_input_value.strip())

    @property
    def button_label(self) -> str:
        return "Notion Connected" if self.is_configured else "Connect Notion"

    @property
    def save_button_label(self) -> str:
        return "Update Secret" if self.is_configured else "Save Secret"

    @property
    def status_message(self) -> str:
        if not self.is_configured:
            return "Enter your Notion integration token to connect this chat."
        if self.secret_input_value:
            return "You are about to update the existing configuration."
        return "Notion is configured. Enter a new secret to update."

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def save_secret(self) -> bool:
        """Persist the trimmed input as the integration secret.

        Returns:
            True if a secret was saved, False for blank input
        """
        secret = self.secret_input_value.strip()
        if not secret:
            return False

        self.storage.set_item(NOTION_TOKEN_STORAGE_KEY, secret)
        logger.info("notion_secret_saved", chat_id=self.chat_id)
        self.is_configured = True
        self.open = False
        return True

    def clear_secret(self) -> None:
        """Disconnect: remove the stored secret and reset the input.

        The dropdown stays open so a new secret can be entered right away.
        """
        self.storage.remove_item(NOTION_TOKEN_STORAGE_KEY)
        logger.info("notion_secret_cleared", chat_id=self.chat_id)
        self.secret_input_value = ""
        self.is_configured = False

    def view(self) -> dict[str, Any]:
        """Serializable UI snapshot. Never contains the stored secret."""
        return {
            "chat_id": self.chat_id,
            "is_configured": self.is_configured,
            "open": self.open,
            "button_label": self.button_label,
            "save_button_label": self.save_button_label,
            "can_save": self.can_save,
            "status_message": self.status_message,
            "help_url": NOTION_SECRET_HELP_URL,
        }
