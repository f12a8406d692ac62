"""
FastAPI application entrypoint.

Creates and configures the FastAPI application with:
  - Lifespan management (logging, cache)
  - API router registration
  - CORS middleware
  - Custom exception handlers
  - Health check endpoint
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wfs_catalog.api.routes import router as capabilities_router
from wfs_catalog.core.config import settings
from wfs_catalog.core.exceptions import (
    CatalogError,
    InvalidCapabilitiesDocument,
    PermanentTransportError,
    TransientTransportError,
)
from wfs_catalog.core.lifespan import lifespan
from wfs_catalog.core.logging import get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Application factory — creates and configures the FastAPI instance."""

    application = FastAPI(
        title="WFS Capabilities Catalog",
        description=(
            "Reads Web Feature Service (WFS) GetCapabilities documents and "
            "exposes their service metadata, feature types and bounding "
            "boxes, with lookup of a feature type by layer name."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ────────────────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ───────────────────────────────────────────────
    application.include_router(capabilities_router, prefix="/api/v1")

    # ── Health Check ─────────────────────────────────────────
    @application.get(
        "/health",
        tags=["Health"],
        summary="Service health check",
        status_code=status.HTTP_200_OK,
    )
    async def health_check():
        """Return service health status."""
        return {"status": "healthy", "service": "wfs-catalog"}

    # ── Exception Handlers ───────────────────────────────────
    @application.exception_handler(InvalidCapabilitiesDocument)
    async def invalid_capabilities_handler(
        request: Request, exc: InvalidCapabilitiesDocument
    ):
        """Tell the client why the data source cannot be added."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.message, "title": exc.title},
        )

    @application.exception_handler(PermanentTransportError)
    async def permanent_transport_error_handler(
        request: Request, exc: PermanentTransportError
    ):
        logger.warning("Permanent transport failure: %s", exc.message)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": exc.message},
        )

    @application.exception_handler(TransientTransportError)
    async def transient_transport_error_handler(
        request: Request, exc: TransientTransportError
    ):
        logger.warning("Transient transport failure: %s", exc.message)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": exc.message},
        )

    @application.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all other catalog exceptions."""
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.message},
        )

    @application.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Catch-all handler to prevent stack traces from leaking to clients."""
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An internal server error occurred."},
        )

    return application


# Create the app instance — referenced by uvicorn as wfs_catalog.main:app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wfs_catalog.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
