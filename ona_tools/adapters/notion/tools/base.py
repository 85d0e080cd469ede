"""Notion tool base.

Every Notion tool is the same shape: validate arguments, refuse to run
without a credential, send one request, return the decoded body or an error
envelope ``{"error": str, "details": Any}``. Subclasses only declare the
schema, HTTP method, path template and which fields go to the query string
or the body; a few override ``build_query``/``build_body``.
"""

import json
import time
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from ona_obs.logging import get_logger
from ona_obs.metrics import record_tool_execution
from ona_tools.base import ToolDescriptor, ToolMetadata
from ona_tools.adapters.notion.client import NotionRESTClient
from ona_tools.adapters.notion.exceptions import (
    NotionAPIResponseError,
    NotionAuthError,
    NotionRateLimitError,
    NotionValidationError,
)

logger = get_logger(__name__)

MISSING_TOKEN_ERROR = (
    "Notion API integration token is not configured. "
    "Please configure it in the Notion Connector settings."
)


class NotionTool:
    """Base class for Notion REST tools bound to one integration token."""

    name: str
    slug: str
    description: str
    input_model: type[BaseModel]
    metadata: ToolMetadata

    method: str = "GET"
    path: str
    query_fields: tuple[str, ...] = ()
    body_fields: tuple[str, ...] = ()

    def __init__(self, api_key: str | None, **kwargs):
        """Initialize tool.

        Args:
            api_key: Notion integration secret; None when the user has not connected Notion
            **kwargs: Additional client configuration (base_url, version, transport, ...)
        """
        self.api_key = api_key
        self._client_options = kwargs

    def describe(self) -> ToolDescriptor:
        """Return the agent-facing descriptor."""
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.input_model.model_json_schema(),
            metadata=self.metadata,
        )

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------

    def _dump(self, args: BaseModel) -> dict[str, Any]:
        return args.model_dump(mode="json", by_alias=True, exclude_none=True)

    def build_path(self, args: BaseModel) -> str:
        """Fill the path template; each value is escaped into a single path segment."""
        segments = {
            key: quote(str(value), safe="")
            for key, value in self._dump(args).items()
            if isinstance(value, (str, int))
        }
        return self.path.format(**segments)

    def build_query(self, args: BaseModel) -> list[tuple[str, str]]:
        """Query pairs from ``query_fields``; unset fields are omitted."""
        data = self._dump(args)
        return [(field, str(data[field])) for field in self.query_fields if field in data]

    def build_body(self, args: BaseModel) -> dict[str, Any] | None:
        """JSON body from ``body_fields``; unset fields are omitted."""
        if not self.body_fields:
            return None
        data = self._dump(args)
        return {field: data[field] for field in self.body_fields if field in data}

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute(
        self, ctx: dict[str, Any], input_data: dict[str, Any]
    ) -> dict[str, Any]:
        """Execute one Notion request.

        Args:
            ctx: Execution context (chat_id, request_id, ...)
            input_data: Tool arguments matching ``input_model``

        Returns:
            The decoded Notion response, or an error envelope. Never raises.
        """
        started = time.perf_counter()
        result, status = await self._run(ctx, input_data)
        record_tool_execution(self.name, status, time.perf_counter() - started)
        return result

    async def _run(
        self, ctx: dict[str, Any], input_data: dict[str, Any]
    ) -> tuple[dict[str, Any], str]:
        try:
            args = self.input_model.model_validate(input_data)
        except ValidationError as e:
            return {
                "error": f"Invalid arguments for {self.name}.",
                "details": json.loads(e.json(include_url=False)),
            }, "invalid_arguments"

        if not self.api_key:
            return {"error": MISSING_TOKEN_ERROR}, "missing_credential"

        try:
            path = self.build_path(args)
            query = self.build_query(args)
            body = self.build_body(args)
        except NotionValidationError as e:
            envelope: dict[str, Any] = {"error": str(e)}
            if e.details is not None:
                envelope["details"] = e.details
            return envelope, "invalid_arguments"

        client = NotionRESTClient(api_key=self.api_key, **self._client_options)
        try:
            data = await client.request(self.method, path, query=query, body=body)
        except NotionAuthError as e:
            # Bad or revoked secret, or the page is not shared with the integration
            logger.error(
                "notion_auth_failed",
                tool=self.name,
                status=e.status,
                details=e.details,
                chat_id=ctx.get("chat_id"),
            )
            return self._api_error(e), "remote_error"
        except NotionRateLimitError as e:
            logger.warning(
                "notion_rate_limited",
                tool=self.name,
                status=e.status,
                chat_id=ctx.get("chat_id"),
            )
            return self._api_error(e), "remote_error"
        except NotionAPIResponseError as e:
            logger.warning(
                "notion_api_error",
                tool=self.name,
                status=e.status,
                details=e.details,
                chat_id=ctx.get("chat_id"),
            )
            return self._api_error(e), "remote_error"
        except Exception as e:
            logger.error(
                "notion_request_failed",
                tool=self.name,
                error=str(e),
                chat_id=ctx.get("chat_id"),
            )
            return {
                "error": f"Failed to execute Notion {self.slug} due to a network or unexpected error.",
                "details": str(e),
            }, "transport_error"

        return data, "success"

    def _api_error(self, e: NotionAPIResponseError) -> dict[str, Any]:
        """Envelope for a non-success Notion response; the body is passed through as is."""
        return {
            "error": f"Notion API request ({self.slug}) failed with status {e.status}",
            "details": e.details,
        }
