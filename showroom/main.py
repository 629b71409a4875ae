"""Showroom API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from showroom.api.auth import router as auth_router
from showroom.api.descriptions import router as descriptions_router
from showroom.api.health import router as health_router
from showroom.api.middleware import REQUEST_ID_HEADER, setup_middleware
from showroom.api.products import router as products_router
from showroom.api.reviews import router as reviews_router
from showroom.infrastructure.config import settings
from showroom.infrastructure.database import create_tables, dispose_engine
from showroom.infrastructure.logging_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    configure_logging()
    logger.info(
        "Starting Showroom API",
        version=settings.api_version,
        debug=settings.debug,
        store_backend=settings.store_backend,
    )

    missing = [
        name
        for name in ("admin_user", "admin_pass", "gemini_api_key")
        if not getattr(settings, name)
    ]
    if missing:
        logger.warning("Configuration values not set", missing=missing)

    if settings.store_backend == "sql" and settings.debug:
        await create_tables()
        logger.info("Database tables ensured")

    yield

    # Shutdown
    if settings.store_backend == "sql":
        await dispose_engine()
    logger.info("Shutting down Showroom API")


app = FastAPI(
    title="Showroom API",
    description="Product catalog and token-gated reviews for a stone and tile showroom",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request ID and log context
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(reviews_router)
app.include_router(auth_router)
app.include_router(descriptions_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
    else:
        error_code = "ERROR"
        message = str(detail)

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": message,
            "error_code": error_code,
            "request_id": request_id,
        },
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as validation failures."""
    request_id = getattr(request.state, "request_id", None)
    fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]

    logger.info(
        "Request validation failed",
        path=request.url.path,
        fields=fields,
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request",
            "error_code": "VALIDATION_FAILED",
            "fields": fields,
            "request_id": request_id,
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Log an unhandled exception and answer 500 without internals."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        product_id=request.path_params.get("product_id"),
        error_type=type(exc).__name__,
    )

    headers = {REQUEST_ID_HEADER: request_id} if request_id else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "An internal error occurred",
            "error_code": "INTERNAL_ERROR",
            "request_id": request_id,
        },
        headers=headers,
    )
