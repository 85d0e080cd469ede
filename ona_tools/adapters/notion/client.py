"""Notion REST client.

One generic request helper shared by every Notion tool: bearer auth,
version header, JSON body, status → exception mapping. Each call opens its
own HTTP connection; there is no retry, backoff, rate limiting or caching.
"""

from typing import Any

import httpx

from .exceptions import (
    NotionAPIResponseError,
    NotionAuthError,
    NotionRateLimitError,
    NotionResourceNotFoundError,
)

NOTION_API_BASE_URL = "https://api.notion.com/v1"
NOTION_API_VERSION = "2022-06-28"


class NotionRESTClient:
    """Thin async client over the Notion REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = NOTION_API_BASE_URL,
        version: str = NOTION_API_VERSION,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Notion client.

        Args:
            api_key: Notion integration secret (bearer token)
            base_url: API base URL, version prefix included
            version: Value of the Notion-Version header
            timeout_seconds: Request timeout; None waits indefinitely
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.version = version
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with authentication."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Notion-Version": self.version,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        """Decode a response body as JSON, falling back to raw text."""
        try:
            return response.json()
        except ValueError:
            return response.text

    def _handle_error(self, response: httpx.Response) -> None:
        """Map Notion API errors to custom exceptions carrying the decoded body."""
        status = response.status_code
        details = self._decode_body(response)

        if status in (401, 403):
            raise NotionAuthError(status, details)
        elif status == 404:
            raise NotionResourceNotFoundError(status, details)
        elif status == 429:
            raise NotionRateLimitError(status, details)
        else:
            raise NotionAPIResponseError(status, details)

    async def request(
        self,
        method: str,
        path: str,
        query: list[tuple[str, str]] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one request against the Notion API.

        Args:
            method: HTTP verb
            path: Path relative to the base URL (e.g. "pages/abc")
            query: Query parameters as pairs; repeated keys are preserved
            body: JSON request body

        Returns:
            Decoded JSON response body

        Raises:
            NotionAPIResponseError: Non-2xx status (subclass by status)
            httpx.HTTPError: Transport failure
        """
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds, transport=self.transport
        ) as client:
            response = await client.request(
                method,
                f"{self.base_url}/{path.lstrip('/')}",
                headers=self._get_headers(),
                params=query or None,
                json=body,
            )

            if not response.is_success:
                self._handle_error(response)

            return response.json()
