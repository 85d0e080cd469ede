"""Notion Page Tools.

Retrieve, create and update pages, and read single page properties.
"""

from pydantic import BaseModel

from ona_tools.base import ToolMetadata
from ona_tools.adapters.notion.schemas import (
    PatchPageInput,
    PostPageInput,
    RetrievePageInput,
    RetrievePagePropertyInput,
)
from ona_tools.adapters.notion.tools.base import NotionTool


class NotionRetrievePageTool(NotionTool):
    """Tool for retrieving a page object.

    Capabilities:
    - Retrieve page metadata and properties
    - Restrict the returned properties with ``filter_properties``

    Use Cases:
    - "Get page abc123"
    - "Show me only the Status property of this page"
    """

    name = "notion_retrieve_a_page"
    slug = "retrieve-a-page"
    description = (
        "Retrieves a specific Notion page using its ID. Optionally, can filter which "
        "page properties are returned. Requires a Notion API integration token."
    )
    input_model = RetrievePageInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.pages.read", "notion.read"],
    )

    method = "GET"
    path = "pages/{page_id}"

    def build_query(self, args: BaseModel) -> list[tuple[str, str]]:
        """Notion expects one ``filter_properties`` parameter per property ID."""
        if not args.filter_properties:
            return []
        return [
            ("filter_properties", prop_id.strip())
            for prop_id in args.filter_properties.split(",")
            if prop_id.strip()
        ]


class NotionPostPageTool(NotionTool):
    """Tool for creating a page under a parent page.

    Use Cases:
    - "Create a meeting notes page under Projects"
    - "Add a page with these bullet points"
    """

    name = "notion_post_page"
    slug = "post-page"
    description = (
        "Creates a new page in Notion. Requires a Notion API integration token "
        "to be configured by the user."
    )
    input_model = PostPageInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=False,  # Creates new page each time
        capabilities=["notion.pages.create", "notion.write"],
        risk_level="medium",
    )

    method = "POST"
    path = "pages"
    body_fields = ("parent", "properties", "children", "icon", "cover")


class NotionPatchPageTool(NotionTool):
    """Tool for updating page properties, icon, cover or archive status."""

    name = "notion_patch_page"
    slug = "patch-page"
    description = (
        "Updates properties of a specific Notion page using its ID. Allows modification "
        "of page properties, cover, icon, and archive status. Requires a Notion API "
        "integration token."
    )
    input_model = PatchPageInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=True,
        capabilities=["notion.pages.update", "notion.write"],
        risk_level="medium",
    )

    method = "PATCH"
    path = "pages/{page_id}"
    body_fields = ("properties", "archived", "icon", "cover")


class NotionRetrievePagePropertyTool(NotionTool):
    """Tool for reading one property item of a page.

    Paginated property types (title, rich_text, relation, rollup, people)
    accept ``page_size`` and ``start_cursor``.
    """

    name = "notion_retrieve_a_page_property"
    slug = "retrieve-a-page-property"
    description = (
        "Retrieve a page property item from Notion. Requires a Notion API integration "
        "token to be configured by the user. This is used to get the value of a specific "
        "property for a page, such as a title, rich text, number, select, date, relation "
        "or rollup. For paginated properties like 'title', 'rich_text', 'relation', "
        "'rollup', and 'people', you might need to use page_size and start_cursor."
    )
    input_model = RetrievePagePropertyInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.pages.read", "notion.read"],
    )

    method = "GET"
    path = "pages/{page_id}/properties/{property_id}"
    query_fields = ("page_size", "start_cursor")
