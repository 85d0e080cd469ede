"""
Tools Router.

- GET /tools: descriptors of every registered tool
- POST /tools/{name}: run one tool with the stored Notion secret

Tool results (including Notion errors) are returned as data with 200;
only an unknown tool name is an HTTP error.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool

from apps.chat_api.deps import (
    get_credential_storage,
    get_settings,
    get_tool_registry,
    notion_client_options,
)
from ona_config.settings import Settings
from ona_connector import CredentialStorage, read_token
from ona_tools.exceptions import ToolNotFoundError
from ona_tools.registry import ToolRegistry

router = APIRouter()


@router.get("/tools")
async def list_tools(
    registry: ToolRegistry = Depends(get_tool_registry),
) -> list[dict[str, Any]]:
    """List tool descriptors (name, description, input schema, metadata)."""
    return [tool.describe().model_dump() for tool in registry.bind(None).values()]


@router.post("/tools/{name}")
async def execute_tool(
    name: str,
    request: Request,
    chat_id: str | None = None,
    arguments: dict[str, Any] | None = Body(default=None),
    registry: ToolRegistry = Depends(get_tool_registry),
    storage: CredentialStorage = Depends(get_credential_storage),
    settings: Settings = Depends(get_settings),
) -> Any:
    """
    Execute one tool.

    Args:
        name: Tool name (e.g. notion_retrieve_a_page)
        chat_id: Optional chat id for log correlation
        arguments: Tool arguments

    Returns:
        Decoded Notion response or {"error", "details"} envelope

    Raises:
        HTTPException: 404 if the tool is not registered
    """
    try:
        tool = registry.create(
            name, await run_in_threadpool(read_token, storage), **notion_client_options(settings)
        )
    except ToolNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    ctx = {"chat_id": chat_id, "request_id": getattr(request.state, "request_id", None)}
    return await tool.execute(ctx, arguments or {})
