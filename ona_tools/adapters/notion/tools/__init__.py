"""Notion tools package.

Exports all Notion tools for easy importing.
"""

from .base import MISSING_TOKEN_ERROR, NotionTool
from .blocks import (
    NotionDeleteBlockTool,
    NotionGetBlockChildrenTool,
    NotionPatchBlockChildrenTool,
    NotionRetrieveBlockTool,
    NotionUpdateBlockTool,
)
from .comments import NotionCreateCommentTool, NotionRetrieveCommentsTool
from .databases import (
    NotionCreateDatabaseTool,
    NotionQueryDatabaseTool,
    NotionRetrieveDatabaseTool,
    NotionUpdateDatabaseTool,
)
from .pages import (
    NotionPatchPageTool,
    NotionPostPageTool,
    NotionRetrievePagePropertyTool,
    NotionRetrievePageTool,
)
from .search import NotionSearchTool
from .users import NotionGetSelfTool, NotionGetUserTool, NotionGetUsersTool

NOTION_TOOLS: tuple[type[NotionTool], ...] = (
    NotionRetrieveBlockTool,
    NotionGetBlockChildrenTool,
    NotionPatchBlockChildrenTool,
    NotionUpdateBlockTool,
    NotionDeleteBlockTool,
    NotionRetrievePageTool,
    NotionPostPageTool,
    NotionPatchPageTool,
    NotionRetrievePagePropertyTool,
    NotionRetrieveDatabaseTool,
    NotionCreateDatabaseTool,
    NotionUpdateDatabaseTool,
    NotionQueryDatabaseTool,
    NotionGetUsersTool,
    NotionGetUserTool,
    NotionGetSelfTool,
    NotionRetrieveCommentsTool,
    NotionCreateCommentTool,
    NotionSearchTool,
)

__all__ = [
    "MISSING_TOKEN_ERROR",
    "NOTION_TOOLS",
    "NotionTool",
    "NotionRetrieveBlockTool",
    "NotionGetBlockChildrenTool",
    "NotionPatchBlockChildrenTool",
    "NotionUpdateBlockTool",
    "NotionDeleteBlockTool",
    "NotionRetrievePageTool",
    "NotionPostPageTool",
    "NotionPatchPageTool",
    "NotionRetrievePagePropertyTool",
    "NotionRetrieveDatabaseTool",
    "NotionCreateDatabaseTool",
    "NotionUpdateDatabaseTool",
    "NotionQueryDatabaseTool",
    "NotionGetUsersTool",
    "NotionGetUserTool",
    "NotionGetSelfTool",
    "NotionRetrieveCommentsTool",
    "NotionCreateCommentTool",
    "NotionSearchTool",
]
