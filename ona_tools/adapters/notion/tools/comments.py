"""Notion Comment Tools."""

from ona_tools.base import ToolMetadata
from ona_tools.adapters.notion.schemas import CreateCommentInput, RetrieveCommentsInput
from ona_tools.adapters.notion.tools.base import NotionTool


class NotionRetrieveCommentsTool(NotionTool):
    """List un-resolved comments on a page or block.

    ``block_id`` is a required query parameter of the comments endpoint,
    not a path segment.
    """

    name = "notion_retrieve_a_comment"
    slug = "retrieve-a-comment"
    description = (
        "Retrieve a list of un-resolved Comment objects from a Notion page or block. "
        "Requires a Notion API integration token to be configured by the user. "
        "Comments are returned in a paginated list."
    )
    input_model = RetrieveCommentsInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.comments.read", "notion.read"],
    )

    method = "GET"
    path = "comments"
    query_fields = ("block_id", "page_size", "start_cursor")


class NotionCreateCommentTool(NotionTool):
    """Start a new discussion thread on a page."""

    name = "notion_create_a_comment"
    slug = "create-a-comment"
    description = (
        "Creates a comment on a Notion page. Requires a Notion API integration token "
        "to be configured by the user. This will create a new discussion thread with "
        "the comment."
    )
    input_model = CreateCommentInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=False,
        capabilities=["notion.comments.create", "notion.write"],
        risk_level="medium",
    )

    method = "POST"
    path = "comments"
    body_fields = ("parent", "rich_text")
