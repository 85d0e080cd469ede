"""Notion User Tools."""

from ona_tools.base import ToolMetadata
from ona_tools.adapters.notion.schemas import GetSelfInput, GetUserInput, GetUsersInput
from ona_tools.adapters.notion.tools.base import NotionTool


class NotionGetUsersTool(NotionTool):
    """List workspace users, paginated."""

    name = "notion_get_users"
    slug = "get-users"
    description = (
        "List all users in the Notion workspace. Requires a Notion API integration "
        "token to be configured by the user."
    )
    input_model = GetUsersInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.users.read", "notion.read"],
    )

    method = "GET"
    path = "users"
    query_fields = ("start_cursor", "page_size")


class NotionGetUserTool(NotionTool):
    name = "notion_get_user"
    slug = "get-user"
    description = (
        "Retrieve a Notion user by their ID. Requires a Notion API integration token "
        "to be configured by the user."
    )
    input_model = GetUserInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.users.read", "notion.read"],
    )

    method = "GET"
    path = "users/{user_id}"


class NotionGetSelfTool(NotionTool):
    """Retrieve the bot user behind the integration token."""

    name = "notion_get_self"
    slug = "get-self"
    description = (
        "Retrieve the bot user associated with the Notion API integration token. "
        "Requires a Notion API integration token to be configured by the user."
    )
    input_model = GetSelfInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.users.read", "notion.read"],
    )

    method = "GET"
    path = "users/me"
