"""
Orders RRP Feed — Main Application

FastAPI application entry point.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import structlog
from datetime import datetime, timezone

from config import settings
from models.feed import HealthResponse

logging.basicConfig(format="%(message)s", level=settings.log_level)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer() if settings.is_production
            else structlog.dev.ConsoleRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup: Report which Shopify credentials are configured
    """
    logger.info(
        "application_starting",
        environment=settings.environment,
        port=settings.port,
        api_version=settings.shopify_api_version,
        metafield_owner=settings.metafield_owner
    )
    logger.info(
        "environment_check",
        shop_url_configured=bool(settings.shopify_shop_url),
        access_token_configured=bool(settings.shopify_access_token),
        shopify_configured=settings.shopify_configured
    )

    yield

    logger.info("application_shutting_down")


# Create FastAPI app
app = FastAPI(
    title="Orders RRP Feed",
    description="Shopify orders enriched with recommended retail prices",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# ===================
# ROUTES
# ===================

@app.get("/", response_model=HealthResponse)
async def root():
    """
    Liveness probe.

    Returns:
        Static ok status; does not call Shopify
    """
    return HealthResponse(status="ok", message="Orders RRP feed API is running")


# ===================
# ERROR HANDLERS
# ===================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler.

    Catches unhandled exceptions and returns the feed error format.
    """
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "An unexpected error occurred",
            "details": str(exc),
            "code": "INTERNAL_ERROR",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    )


# ===================
# INCLUDE ROUTERS
# ===================
from routes.feed import router as feed_router

app.include_router(feed_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.port,
        reload=settings.debug
    )
