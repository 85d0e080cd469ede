"""Notion Connector Tests."""

from pathlib import Path
from unittest.mock import patch

import pytest

from ona_connector import (
    NOTION_TOKEN_STORAGE_KEY,
    JsonFileStorage,
    MemoryStorage,
    NotionConnector,
    read_token,
)


def test_initialize_unconfigured(storage):
    connector = NotionConnector("chat-1", storage).initialize()

    assert connector.is_configured is False
    assert connector.secret_input_value == ""
    assert connector.button_label == "Connect Notion"
    assert connector.save_button_label == "Save Secret"
    assert connector.status_message == "Enter your Notion integration token to connect this chat."


def test_save_then_reinitialize_is_configured(storage):
    connector = NotionConnector("chat-1", storage).initialize()
    connector.set_open(True)
    connector.set_secret_input("  secret_abc  ")

    assert connector.save_secret() is True
    assert storage.get_item(NOTION_TOKEN_STORAGE_KEY) == "secret_abc"
    assert connector.open is False

    reloaded = NotionConnector("chat-1", storage).initialize()
    assert reloaded.is_configured is True
    assert reloaded.button_label == "Notion Connected"
    assert reloaded.save_button_label == "Update Secret"
    # stored token is never copied into the input field
    assert reloaded.secret_input_value == ""
    assert reloaded.status_message == "Notion is configured. Enter a new secret to update."


def test_blank_input_cannot_be_saved(storage):
    connector = NotionConnector("chat-1", storage).initialize()
    connector.set_secret_input("   ")

    assert connector.can_save is False
    assert connector.save_secret() is False
    assert storage.get_item(NOTION_TOKEN_STORAGE_KEY) is None
    assert connector.is_configured is False


def test_update_status_message_when_typing(storage):
    storage.set_item(NOTION_TOKEN_STORAGE_KEY, "secret_old")
    connector = NotionConnector("chat-1", storage).initialize()
    connector.set_secret_input("secret_new")

    assert connector.can_save is True
    assert connector.status_message == "You are about to update the existing configuration."

    connector.save_secret()
    assert read_token(storage) == "secret_new"


def test_clear_secret(storage):
    storage.set_item(NOTION_TOKEN_STORAGE_KEY, "secret_abc")
    connector = NotionConnector("chat-1", storage).initialize()
    connector.set_open(True)
    connector.set_secret_input("typed")

    connector.clear_secret()

    assert connector.is_configured is False
    assert connector.secret_input_value == ""
    assert connector.open is True
    assert read_token(storage) is None
    assert NotionConnector("chat-1", storage).initialize().is_configured is False


def test_toggle():
    connector = NotionConnector("chat-1", MemoryStorage())
    connector.toggle()
    assert connector.open is True
    connector.toggle()
    assert connector.open is False


def test_view_never_contains_secret(storage):
    storage.set_item(NOTION_TOKEN_STORAGE_KEY, "secret_hidden")
    view = NotionConnector("chat-1", storage).initialize().view()

    assert view["is_configured"] is True
    assert "secret_hidden" not in str(view)
    assert view["help_url"].startswith("https://developers.notion.com/")


def test_read_token_treats_empty_as_missing():
    assert read_token(MemoryStorage({NOTION_TOKEN_STORAGE_KEY: ""})) is None


def test_json_file_storage_survives_new_instance(tmp_path):
    path = tmp_path / "nested" / "credentials.json"
    JsonFileStorage(path).set_item(NOTION_TOKEN_STORAGE_KEY, "secret_abc")

    assert JsonFileStorage(path).get_item(NOTION_TOKEN_STORAGE_KEY) == "secret_abc"

    JsonFileStorage(path).remove_item(NOTION_TOKEN_STORAGE_KEY)
    assert JsonFileStorage(path).get_item(NOTION_TOKEN_STORAGE_KEY) is None


def test_json_file_storage_missing_file(tmp_path):
    storage = JsonFileStorage(tmp_path / "absent.json")

    assert storage.get_item(NOTION_TOKEN_STORAGE_KEY) is None
    storage.remove_item(NOTION_TOKEN_STORAGE_KEY)
    assert not (tmp_path / "absent.json").exists()


def test_json_file_storage_failed_write_keeps_previous_value(tmp_path):
    path = tmp_path / "credentials.json"
    storage = JsonFileStorage(path)
    storage.set_item(NOTION_TOKEN_STORAGE_KEY, "secret_old")

    with patch.object(Path, "replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            storage.set_item(NOTION_TOKEN_STORAGE_KEY, "secret_new")

    assert JsonFileStorage(path).get_item(NOTION_TOKEN_STORAGE_KEY) == "secret_old"


def test_json_file_storage_leaves_no_temp_file(tmp_path):
    path = tmp_path / "credentials.json"
    JsonFileStorage(path).set_item(NOTION_TOKEN_STORAGE_KEY, "secret_abc")

    assert [p.name for p in tmp_path.iterdir()] == ["credentials.json"]
