"""Notion Database Tools.

Retrieve, create, update and query databases.
"""

import json
from typing import Any

from pydantic import BaseModel

from ona_obs.logging import get_logger
from ona_tools.base import ToolMetadata
from ona_tools.adapters.notion.exceptions import NotionValidationError
from ona_tools.adapters.notion.schemas import (
    CreateDatabaseInput,
    QueryDatabaseInput,
    RetrieveDatabaseInput,
    UpdateDatabaseInput,
)
from ona_tools.adapters.notion.tools.base import NotionTool

logger = get_logger(__name__)


class NotionRetrieveDatabaseTool(NotionTool):
    """Tool for retrieving a database's title, property schema and metadata."""

    name = "notion_retrieve_a_database"
    slug = "retrieve-a-database"
    description = (
        "Retrieve a Notion database by its ID. Requires a Notion API integration token "
        "to be configured by the user. This returns information about the database, "
        "including its title, properties, and other metadata."
    )
    input_model = RetrieveDatabaseInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.databases.read", "notion.read"],
    )

    method = "GET"
    path = "databases/{database_id}"


class NotionCreateDatabaseTool(NotionTool):
    """Tool for creating a database as a subpage of a parent page.

    The property schema arrives as a JSON string (``propertiesJson``) since
    its shape is open-ended; it is decoded before the request is sent and a
    malformed string is reported without contacting Notion.
    """

    name = "notion_create_a_database"
    slug = "create-a-database"
    description = (
        "Create a new database as a subpage in a specified parent page. Requires a "
        "Notion API integration token to be configured by the user."
    )
    input_model = CreateDatabaseInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=False,
        capabilities=["notion.databases.create", "notion.write"],
        risk_level="medium",
    )

    method = "POST"
    path = "databases"

    def build_body(self, args: BaseModel) -> dict[str, Any]:
        try:
            properties = json.loads(args.properties_json)
        except json.JSONDecodeError as e:
            raise NotionValidationError(
                'Invalid JSON string provided for "propertiesJson".', str(e)
            )

        data = self._dump(args)
        body: dict[str, Any] = {"parent": data["parent"], "properties": properties}
        if args.title:
            body["title"] = data["title"]
        return body


class NotionUpdateDatabaseTool(NotionTool):
    """Tool for updating a database's title, description or property schema."""

    name = "notion_update_a_database"
    slug = "update-a-database"
    description = (
        "Update a Notion database by its ID. Requires a Notion API integration token "
        "to be configured by the user. Allows updating the database's title, "
        "description, and property schema."
    )
    input_model = UpdateDatabaseInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=True,
        capabilities=["notion.databases.update", "notion.write"],
        risk_level="medium",
    )

    method = "PATCH"
    path = "databases/{database_id}"
    body_fields = ("title", "description", "properties")

    def build_body(self, args: BaseModel) -> dict[str, Any]:
        body = super().build_body(args)
        if not body:
            raise NotionValidationError(
                "At least one property (title, description, or properties) must be "
                "provided to update the database."
            )
        return body


class NotionQueryDatabaseTool(NotionTool):
    """Tool for querying database pages with filters and sorting.

    Use Cases:
    - "Show all tasks with Status = In Progress"
    - "List entries sorted by due date"
    """

    name = "notion_post_database_query"
    slug = "post-database-query"
    description = (
        "Query a Notion database. Allows filtering and sorting of database pages. "
        "Requires a Notion API integration token."
    )
    input_model = QueryDatabaseInput

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["notion.databases.query", "notion.read"],
    )

    method = "POST"
    path = "databases/{database_id}/query"
    body_fields = ("filter", "sorts", "start_cursor", "page_size", "archived", "in_trash")

    def build_body(self, args: BaseModel) -> dict[str, Any]:
        if args.filter_properties:
            # Only the page retrieval endpoint understands filter_properties.
            logger.warning(
                "filter_properties_ignored",
                tool=self.name,
                filter_properties=args.filter_properties,
            )
        return super().build_body(args)
