"""
Health Check Endpoint.

- GET /healthz: Liveness check (API running)
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz():
    """
    Liveness check - is the API process running?

    Returns 200 OK if server is alive.
    """
    return {"status": "healthy", "service": "ona-chat-api"}
