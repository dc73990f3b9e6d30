"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from tree_planner.config import settings
from tree_planner.api.dependencies import build_catalog_repository
from tree_planner.api.rate_limit import limiter
from tree_planner.api.routers import barangays, trees
from tree_planner.middleware.error_handler import (
    ErrorHandlerMiddleware,
    request_validation_exception_handler,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Creates the catalog backend on startup and releases it on shutdown.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Catalog backend: {settings.catalog_backend}")
    logger.info(f"Recommendation config: sqm_per_tree={settings.sqm_per_tree}, "
                f"nearest_strategy={settings.nearest_strategy}")
    logger.info(f"Rate limit: {settings.rate_limit_requests} requests/minute "
                f"(enabled={settings.rate_limit_enabled})")

    app.state.catalog = build_catalog_repository()

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await app.state.catalog.close()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Tree Planting Planner API

    Resolve a map click to its barangay and recommend tree species that
    suit a plot of land there.

    ## Features

    - **Nearest Barangay**: Planar nearest-neighbour lookup over the
      barangay catalog
    - **Tree Recommendation**: Species filtered by plot size, flood risk and
      urban density, with a planting capacity estimate
    - **Pluggable Catalog**: In-memory sample catalog or a remote catalog
      service with retries and exponential backoff
    - **Rate Limiting**: Protects the API from abuse

    ## Recommendation Rules

    1. A species needs at least its minimum area on the plot
    2. Medium/High flood-risk barangays only get flood-resilient species
    3. High-density barangays only get urban-suitable species
    4. Capacity is one tree per 15 m², never less than one
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    debug=settings.debug,
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Add CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add global error handling middleware
app.add_middleware(ErrorHandlerMiddleware)

# Include routers
app.include_router(barangays.router, prefix="/api")
app.include_router(trees.router, prefix="/api")


@app.get("/", tags=["health"])
async def root():
    """
    Root endpoint for health check.

    Returns:
        Status message
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
    }
