"""
API response schemas.

These Pydantic models define the contract between the API layer
and external clients. They are separate from domain models to
allow the API surface to evolve independently.
"""

import math
from typing import Optional, Union

from pydantic import BaseModel, Field, field_serializer

from wfs_catalog.domain.capabilities import get_rectangle_from_layer
from wfs_catalog.domain.models import FeatureType, ServiceMetadata


class RectangleResponse(BaseModel):
    """WGS84 extent; bounds that could not be parsed are returned as null."""

    west: Optional[float] = None
    south: Optional[float] = None
    east: Optional[float] = None
    north: Optional[float] = None

    @field_serializer("west", "south", "east", "north")
    def serialize_bound(self, value: Optional[float]) -> Optional[float]:
        if value is None or math.isnan(value):
            return None
        return value


class FeatureTypeResponse(BaseModel):
    """A single feature type as exposed by the API."""

    name: Optional[str] = Field(None, description="Layer identifier")
    title: str = Field(..., description="Display title")
    abstract: Optional[str] = None
    keywords: Optional[Union[str, list[str]]] = None
    rectangle: Optional[RectangleResponse] = Field(
        None, description="WGS84 extent, absent when the server gives none"
    )

    @classmethod
    def from_feature_type(cls, feature_type: FeatureType) -> "FeatureTypeResponse":
        rectangle = get_rectangle_from_layer(feature_type)
        return cls(
            name=feature_type.name,
            title=feature_type.title,
            abstract=feature_type.abstract,
            keywords=feature_type.keywords,
            rectangle=(
                RectangleResponse(**rectangle.model_dump())
                if rectangle is not None
                else None
            ),
        )


class CapabilitiesResponse(BaseModel):
    """Service metadata plus the feature types of a WFS endpoint."""

    url: str = Field(..., description="The requested GetCapabilities URL")
    service: ServiceMetadata
    feature_types: list[FeatureTypeResponse]


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(..., description="Error description")
    title: Optional[str] = Field(None, description="Short error title")
