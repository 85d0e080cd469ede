"""Notion adapter for OpenNotionAI.

Typed tool wrappers over the Notion REST API, one per endpoint:
- Blocks: retrieve, list children, append children, update, delete
- Pages: retrieve, create, update, retrieve property
- Databases: retrieve, create, update, query
- Users: list, retrieve, self
- Comments: list, create
- Search

Usage:
    from ona_tools.adapters.notion import register_notion_tools
    from ona_tools.registry import ToolRegistry

    registry = ToolRegistry()
    register_notion_tools(registry)
    tools = registry.bind(api_key="secret_...")
"""

from .client import NOTION_API_BASE_URL, NOTION_API_VERSION, NotionRESTClient
from .exceptions import (
    NotionAdapterError,
    NotionAPIResponseError,
    NotionAuthError,
    NotionRateLimitError,
    NotionResourceNotFoundError,
    NotionValidationError,
)
from .tools import MISSING_TOKEN_ERROR, NOTION_TOOLS, NotionTool

__all__ = [
    # Client
    "NOTION_API_BASE_URL",
    "NOTION_API_VERSION",
    "NotionRESTClient",
    # Exceptions
    "NotionAdapterError",
    "NotionAPIResponseError",
    "NotionAuthError",
    "NotionRateLimitError",
    "NotionResourceNotFoundError",
    "NotionValidationError",
    # Tools
    "MISSING_TOKEN_ERROR",
    "NOTION_TOOLS",
    "NotionTool",
    "register_notion_tools",
]


def register_notion_tools(registry) -> None:
    """Register all Notion tool factories with the tool registry.

    Args:
        registry: ToolRegistry instance

    Example:
        registry = ToolRegistry()
        register_notion_tools(registry)
        search = registry.create("notion_post_search", api_key="secret_...")
    """
    for tool_cls in NOTION_TOOLS:
        registry.register(tool_cls)
