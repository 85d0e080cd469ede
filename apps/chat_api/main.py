"""
OpenNotionAI FastAPI Application Entry Point.

This module initializes the FastAPI application with:
- CORS middleware
- Request ID injection and request logging
- Global exception handling
- Router mounting (connector, tools, chat, health, metrics)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.chat_api.deps import settings
from apps.chat_api.middleware import RequestIDMiddleware, RequestLoggingMiddleware
from apps.chat_api.routers import chat, connector, health, metrics, tools
from ona_obs.logging import get_logger, setup_logging

# Setup logging
setup_logging(settings)
logger = get_logger(__name__)


# Initialize FastAPI application
app = FastAPI(
    title="OpenNotionAI Chat API",
    description="Chat with Claude over your Notion workspace",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# ============================================================================
# MIDDLEWARE
# ============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.API_CORS_ORIGINS.split(",") if settings.API_CORS_ORIGINS else ["*"],
    allow_credentials=settings.API_CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

# Request logging sits inside request ID so it can read request.state.request_id
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestIDMiddleware)

# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred.",
            "request_id": getattr(request.state, "request_id", None),
        },
    )


# ============================================================================
# ROUTERS
# ============================================================================

app.include_router(connector.router, prefix="", tags=["connector"])
app.include_router(tools.router, prefix="", tags=["tools"])
app.include_router(chat.router, prefix="", tags=["chat"])
app.include_router(health.router, prefix="", tags=["health"])
app.include_router(metrics.router, prefix="", tags=["metrics"])


# ============================================================================
# ROOT ENDPOINT
# ============================================================================


@app.get("/", tags=["root"])
async def root():
    """
    Root endpoint - API information.

    Returns:
        API metadata and available endpoints
    """
    return {
        "name": "OpenNotionAI Chat API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/healthz",
        "metrics": "/metrics",
        "endpoints": {
            "connector": "GET|PUT|DELETE /chats/{chat_id}/notion",
            "tools": "GET /tools",
            "execute_tool": "POST /tools/{name}",
            "chat": "POST /chat",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.chat_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
