"""
FastAPI dependency injection.

Provides shared inputs for use across API endpoints,
keeping endpoint functions free of request plumbing.
"""

from fastapi import HTTPException, Query, status

from wfs_catalog.core.exceptions import CatalogError
from wfs_catalog.core.logging import get_logger
from wfs_catalog.domain.capabilities import WebFeatureServiceCapabilities

logger = get_logger(__name__)


def get_capabilities_url(
    url: str = Query(
        ...,
        description="The WFS GetCapabilities URL",
        examples=["https://example.com/wfs?service=WFS&request=GetCapabilities"],
    ),
) -> str:
    """Validate the ``url`` query parameter."""
    if not url.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="URL query parameter is required.",
        )
    return url


async def load_capabilities(url: str) -> WebFeatureServiceCapabilities:
    """
    Load a capabilities document for an endpoint.

    Catalog errors propagate to the application's exception handlers;
    anything else is logged and turned into a generic 500.
    """
    try:
        return await WebFeatureServiceCapabilities.from_url(url)
    except CatalogError:
        raise
    except Exception as exc:
        logger.error("Unexpected error loading url=%s: %s", url, exc, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while loading capabilities.",
        ) from exc
