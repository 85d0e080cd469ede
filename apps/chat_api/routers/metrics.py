"""
Prometheus Metrics Endpoint.

Exposes /metrics for Prometheus scraping.
"""

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics():
    """
    Prometheus metrics endpoint.

    Example metrics:
    ```
    # HELP tool_executions_total Total Notion tool executions
    # TYPE tool_executions_total counter
    tool_executions_total{tool_name="notion_retrieve_a_page",status="remote_error"} 1.0
    ```
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
