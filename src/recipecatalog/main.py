"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from recipecatalog import __version__
from recipecatalog.config import get_settings
from recipecatalog.logging_config import LoggingContext, configure_logging, get_logger
from recipecatalog.routers import recipes_router, shopping_list_router

settings = get_settings()

# Configure logging on module load
configure_logging(
    log_level=settings.log_level,
    json_format=True if settings.log_format.lower() == "json" else None,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Recipe Catalog API ({settings.environment})")
    yield
    logger.info("Shutting down Recipe Catalog API")


app = FastAPI(
    title="Recipe Catalog API",
    description="Recipe scaling and shopping list consolidation",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def bind_request_id(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag log records of a request with its X-Request-ID."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(recipes_router)
app.include_router(shopping_list_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipecatalog-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Recipe Catalog API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
