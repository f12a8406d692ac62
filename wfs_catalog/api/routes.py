"""
API routes for the WFS catalog.

Exposes the parsed capabilities of a WFS endpoint and name
resolution of its feature types.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from wfs_catalog.api.dependencies import get_capabilities_url, load_capabilities
from wfs_catalog.api.schemas import (
    CapabilitiesResponse,
    ErrorResponse,
    FeatureTypeResponse,
)
from wfs_catalog.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/capabilities", tags=["Capabilities"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing URL"},
    422: {"model": ErrorResponse, "description": "Not a WFS GetCapabilities document"},
    502: {"model": ErrorResponse, "description": "Server could not be reached"},
    503: {"model": ErrorResponse, "description": "Server temporarily unavailable"},
}


@router.get(
    "",
    response_model=CapabilitiesResponse,
    summary="Describe a WFS endpoint",
    description=(
        "Loads the GetCapabilities document of the given URL and returns "
        "its service metadata and feature types."
    ),
    responses=ERROR_RESPONSES,
)
async def get_capabilities(
    url: str = Depends(get_capabilities_url),
) -> CapabilitiesResponse:
    """GET /capabilities?url=... — service metadata and feature types."""
    capabilities = await load_capabilities(url)
    return CapabilitiesResponse(
        url=url,
        service=capabilities.service,
        feature_types=[
            FeatureTypeResponse.from_feature_type(feature_type)
            for feature_type in capabilities.feature_types
        ],
    )


@router.get(
    "/feature-types",
    response_model=list[FeatureTypeResponse],
    summary="List the feature types of a WFS endpoint",
    responses=ERROR_RESPONSES,
)
async def list_feature_types(
    url: str = Depends(get_capabilities_url),
) -> list[FeatureTypeResponse]:
    """GET /capabilities/feature-types?url=... — feature types in document order."""
    capabilities = await load_capabilities(url)
    return [
        FeatureTypeResponse.from_feature_type(feature_type)
        for feature_type in capabilities.feature_types
    ]


@router.get(
    "/feature-types/{name}",
    response_model=FeatureTypeResponse,
    summary="Resolve a layer name",
    description=(
        "Resolves a layer name by exact name, then by name without its "
        "namespace prefix, then by title."
    ),
    responses={
        **ERROR_RESPONSES,
        404: {"model": ErrorResponse, "description": "Layer not found"},
    },
)
async def find_feature_type(
    name: str,
    url: str = Depends(get_capabilities_url),
) -> FeatureTypeResponse:
    """GET /capabilities/feature-types/{name}?url=... — one resolved feature type."""
    capabilities = await load_capabilities(url)
    feature_type = capabilities.find_layer(name)
    if feature_type is None:
        logger.info("Layer name=%s not found at url=%s", name, url)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No feature type named '{name}' at {url}",
        )
    return FeatureTypeResponse.from_feature_type(feature_type)
