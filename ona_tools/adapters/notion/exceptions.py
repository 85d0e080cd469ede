"""Notion adapter exceptions.

Raised inside the adapter and converted to result envelopes by the tools;
none of these escape ``NotionTool.execute``.
"""

from typing import Any


class NotionAdapterError(Exception):
    """Base exception for Notion adapter."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class NotionAPIResponseError(NotionAdapterError):
    """Notion answered with a non-success status."""

    def __init__(self, status: int, details: Any):
        super().__init__(f"Notion API responded with status {status}", details)
        self.status = status


class NotionAuthError(NotionAPIResponseError):
    """Invalid API key or insufficient permissions (401/403 response)."""

    pass


class NotionResourceNotFoundError(NotionAPIResponseError):
    """Page/database/block not found (404 response)."""

    pass


class NotionRateLimitError(NotionAPIResponseError):
    """Rate limit exceeded (429 response)."""

    pass


class NotionValidationError(NotionAdapterError):
    """Invalid input parameters, detected before any request is sent."""

    pass
