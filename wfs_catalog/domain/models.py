"""
Domain models — pure data structures for WFS capabilities.

These are computed projections of a parsed GetCapabilities tree.
Every field is optional unless noted: servers differ wildly in what
they fill in, and a missing field is a normal state, not an error.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class ContactPersonPrimary(BaseModel):
    contact_person: Optional[str] = None
    contact_organization: Optional[str] = None


class ContactAddress(BaseModel):
    address: Optional[str] = None
    city: Optional[str] = None
    state_or_province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None


class ContactInformation(BaseModel):
    contact_person_primary: ContactPersonPrimary = Field(
        default_factory=ContactPersonPrimary
    )
    contact_position: Optional[str] = None
    contact_address: ContactAddress = Field(default_factory=ContactAddress)
    contact_voice_telephone: Optional[str] = None
    contact_facsimile_telephone: Optional[str] = None
    contact_electronic_mail_address: Optional[str] = None


class ServiceMetadata(BaseModel):
    """
    Service description of a WFS endpoint.

    Shaped like the service section of a WMS document, so the catalog
    can treat both kinds of servers the same way.
    """

    title: Optional[str] = None
    abstract: Optional[str] = None
    fees: Optional[str] = None
    access_constraints: Optional[str] = None
    keywords: Optional[list[str]] = Field(
        None, description="Service keywords in document order"
    )
    contact_information: ContactInformation = Field(
        default_factory=ContactInformation
    )


class GeographicBoundingBox(BaseModel):
    """
    WGS84 extent of a feature type, in degrees.

    A bound is ``None`` when its corner element was missing and
    ``nan`` when the corner text could not be parsed as a number.
    """

    west_bound_longitude: Optional[float] = None
    south_bound_latitude: Optional[float] = None
    east_bound_longitude: Optional[float] = None
    north_bound_latitude: Optional[float] = None


class FeatureType(BaseModel):
    """A named, queryable vector layer exposed by a WFS endpoint."""

    name: Optional[str] = Field(
        None, description="Layer identifier, possibly 'prefix:localName'"
    )
    title: str = Field(..., description="Display title")
    abstract: Optional[str] = None
    keywords: Optional[Union[str, list[str]]] = Field(
        None,
        description="A single keyword or a list, as found in the document",
    )
    wgs84_bounding_box: Optional[GeographicBoundingBox] = None


class Rectangle(BaseModel):
    """Generic rectangle with bounds, as used by the catalog's geometry model."""

    west: Optional[float] = None
    south: Optional[float] = None
    east: Optional[float] = None
    north: Optional[float] = None
