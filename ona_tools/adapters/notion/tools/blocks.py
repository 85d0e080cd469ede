"""Notion Block Tools.

Retrieve, list children of, append children to, update and delete blocks.
"""

from typing import Any

from pydantic import BaseModel

from ona_tools.base import ToolMetadata
from ona_tools.adapters.notion.schemas import (
    DeleteBlockInput,
    GetBlockChildrenInput,
    PatchBlockChildrenInput,
    RetrieveBlockInput,
    UpdateBlockInput,
)
from ona_tools.adapters.notion.tools.base import NotionTool


class NotionRetrieveBlockTool(NotionTool):
    """Retrieve a single block object.

    Use Cases:
    - "What type of block is abc123?"
    - "Does this block have children?"
    """

    name = "notion_retrieve_a_block"
    slug = "retrieve-a-block"
    description = "Retrieves a specific block using its ID. Requires a Notion API integration token."
    input_model = RetrieveBlockInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.blocks.read", "notion.read"],
    )

    method = "GET"
    path = "blocks/{block_id}"


class NotionGetBlockChildrenTool(NotionTool):
    """List the children of a block (a page's content is its children).

    Use Cases:
    - "Read the content of page abc123"
    - "Fetch the next page of blocks with this cursor"
    """

    name = "notion_get_block_children"
    slug = "get-block-children"
    description = (
        "Retrieve the children (nested blocks) of a given block ID. "
        "Requires a Notion API integration token."
    )
    input_model = GetBlockChildrenInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.blocks.read", "notion.read"],
    )

    method = "GET"
    path = "blocks/{block_id}/children"
    query_fields = ("start_cursor", "page_size")


class NotionPatchBlockChildrenTool(NotionTool):
    """Append paragraph or bulleted-list blocks under a block or page."""

    name = "notion_patch_block_children"
    slug = "patch-block-children"
    description = (
        "Appends block children to a specified block_id. "
        "Requires a Notion API integration token."
    )
    input_model = PatchBlockChildrenInput

    metadata = ToolMetadata(
        requires_approval=True,
        capabilities=["notion.blocks.write", "notion.write"],
        risk_level="medium",
    )

    method = "PATCH"
    path = "blocks/{block_id}/children"
    body_fields = ("children", "after")


class NotionUpdateBlockTool(NotionTool):
    """Update one block's content or archive status.

    Exactly one block-type content object may be sent per call; the
    schema enforces that before the request is built.
    """

    name = "notion_update_a_block"
    slug = "update-a-block"
    description = (
        "Updates a specific block's content (e.g., text, checked status) or "
        "archives/un-archives it. Requires a Notion API integration token."
    )
    input_model = UpdateBlockInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=True,
        capabilities=["notion.blocks.write", "notion.write"],
        risk_level="medium",
    )

    method = "PATCH"
    path = "blocks/{block_id}"

    def build_body(self, args: BaseModel) -> dict[str, Any]:
        data = self._dump(args)
        body: dict[str, Any] = {}
        if "archived" in data:
            body["archived"] = data["archived"]
        for field in args.content_updates():
            body[field] = data[field]
        return body


class NotionDeleteBlockTool(NotionTool):
    """Archive a block (Notion's delete)."""

    name = "notion_delete_a_block"
    slug = "delete-a-block"
    description = (
        "Deletes (archives) a specific block using its ID. "
        "Requires a Notion API integration token."
    )
    input_model = DeleteBlockInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=True,
        capabilities=["notion.blocks.delete", "notion.write"],
        risk_level="high",
    )

    method = "DELETE"
    path = "blocks/{block_id}"
