"""Notion Search Tool.

Search across Notion workspace for pages and databases by title.
"""

from ona_tools.base import ToolMetadata
from ona_tools.adapters.notion.schemas import SearchInput
from ona_tools.adapters.notion.tools.base import NotionTool


class NotionSearchTool(NotionTool):
    """Tool for searching Notion workspace.

    Capabilities:
    - Search for pages and databases by title
    - Filter by object type
    - Sort by last edited time

    Use Cases:
    - "Find all pages about Python"
    - "Search for customer database"
    - "Locate pages modified most recently"
    """

    name = "notion_post_search"
    slug = "post-search"
    description = (
        "Search Notion pages and databases by title. Requires a Notion API "
        "integration token to be configured by the user."
    )
    input_model = SearchInput

    metadata = ToolMetadata(
        idempotent=True,  # Same query → same results
        capabilities=["notion.search", "notion.read"],
    )

    method = "POST"
    path = "search"
    body_fields = ("query", "sort", "filter", "start_cursor", "page_size")
