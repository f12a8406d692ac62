"""
WFS GetCapabilities document model.

Wraps the parsed tree of a GetCapabilities response and exposes
read-only projections of it: the service metadata, the list of
feature types, and name resolution of a layer.
"""

import math
from collections.abc import Mapping
from typing import Any, Optional
from xml.parsers.expat import ExpatError

from wfs_catalog.core.exceptions import InvalidCapabilitiesDocument
from wfs_catalog.core.logging import get_logger
from wfs_catalog.domain.cache import CapabilitiesCache
from wfs_catalog.domain.models import (
    ContactAddress,
    ContactInformation,
    ContactPersonPrimary,
    FeatureType,
    GeographicBoundingBox,
    Rectangle,
    ServiceMetadata,
)
from wfs_catalog.infrastructure.http.xml_loader import load_xml
from wfs_catalog.infrastructure.xml.xml2json import xml2json
from wfs_catalog.utils.nested import (
    freeze,
    get_path,
    is_sequence,
    text_value,
    text_values,
)

logger = get_logger(__name__)


def get_rectangle_from_layer(layer: FeatureType) -> Optional[Rectangle]:
    """Return the layer's WGS84 extent as a Rectangle, or None without one."""
    bbox = layer.wgs84_bounding_box
    if bbox is None:
        return None
    return Rectangle(
        west=bbox.west_bound_longitude,
        south=bbox.south_bound_latitude,
        east=bbox.east_bound_longitude,
        north=bbox.north_bound_latitude,
    )


def _parse_float(token: Optional[str]) -> float:
    if token is None:
        return math.nan
    try:
        return float(token)
    except ValueError:
        return math.nan


def _parse_corner(value: Any) -> tuple[Optional[float], Optional[float]]:
    """
    Parse an ``"x y"`` corner string.

    A missing corner gives ``(None, None)``; tokens that are not numbers,
    or are missing, give ``nan`` in their position.
    """
    if value is None:
        return None, None
    text = text_value(value)
    tokens = text.split() if text is not None else []
    first = tokens[0] if len(tokens) > 0 else None
    second = tokens[1] if len(tokens) > 1 else None
    return _parse_float(first), _parse_float(second)


def _parse_bounding_box(value: Any) -> Optional[GeographicBoundingBox]:
    if value is None:
        return None
    # Several boxes may be listed; WGS84 ones are all equivalent, use the first
    if is_sequence(value):
        value = value[0] if value else None
    if not isinstance(value, Mapping):
        return None

    west, south = _parse_corner(value.get("LowerCorner"))
    east, north = _parse_corner(value.get("UpperCorner"))
    return GeographicBoundingBox(
        west_bound_longitude=west,
        south_bound_latitude=south,
        east_bound_longitude=east,
        north_bound_latitude=north,
    )


def _parse_keywords(value: Any):
    keywords = get_path(value, "Keyword")
    if keywords is None:
        return None
    if is_sequence(keywords):
        return text_values(keywords)
    return text_value(keywords)


def _parse_feature_type(json: Mapping) -> FeatureType:
    name = text_value(json.get("Name"))
    title = text_value(json.get("Title"))
    if title is None:
        title = name or ""

    return FeatureType(
        name=name,
        title=title,
        abstract=text_value(json.get("Abstract")),
        keywords=_parse_keywords(json.get("Keywords")),
        wgs84_bounding_box=_parse_bounding_box(json.get("WGS84BoundingBox")),
    )


class WebFeatureServiceCapabilities:
    """
    A parsed WFS GetCapabilities document.

    Instances are created through :meth:`from_url`, which loads each URL
    once and hands every caller the same instance. The parsed tree is
    frozen on construction; all properties are recomputed from it on
    access.
    """

    def __init__(self, xml: str | bytes, json: Mapping[str, Any]) -> None:
        self._xml = xml
        self._json = freeze(json)

    @property
    def xml(self) -> str | bytes:
        """The document as retrieved, undecoded when it came from the network."""
        return self._xml

    @property
    def json(self) -> Mapping[str, Any]:
        """The parsed, read-only tree."""
        return self._json

    @classmethod
    async def from_url(cls, url: str) -> "WebFeatureServiceCapabilities":
        """
        Load and validate the GetCapabilities document at ``url``.

        Memoized by URL: repeated and concurrent calls with the same
        string share one request and get the same instance.

        Raises:
            TransportError: If the document could not be retrieved.
            InvalidCapabilitiesDocument: If it is not a WFS capabilities document.
        """
        return await _cache.get(url)

    @classmethod
    async def _load(cls, url: str) -> "WebFeatureServiceCapabilities":
        capabilities_xml = await load_xml(url)

        try:
            json = xml2json(capabilities_xml)
        except ExpatError as exc:
            logger.warning("Unparsable XML from url=%s: %s", url, exc)
            raise InvalidCapabilitiesDocument(url) from exc

        if json.get("ServiceIdentification") is None:
            logger.warning("No ServiceIdentification in document from url=%s", url)
            raise InvalidCapabilitiesDocument(url)

        return cls(capabilities_xml, json)

    @classmethod
    def clear_cache(cls) -> None:
        """Forget all loaded documents."""
        _cache.clear()

    @property
    def service(self) -> ServiceMetadata:
        """Service metadata, in the shape of a WMS service section."""
        identification = self._json.get("ServiceIdentification")
        provider = self._json.get("ServiceProvider")
        contact = get_path(provider, "ServiceContact")
        contact_info = get_path(contact, "ContactInfo")
        address = get_path(contact_info, "Address")

        return ServiceMetadata(
            title=text_value(get_path(identification, "Title")),
            abstract=text_value(get_path(identification, "Abstract")),
            fees=text_value(get_path(identification, "Fees")),
            access_constraints=text_value(
                get_path(identification, "AccessConstraints")
            ),
            keywords=text_values(get_path(identification, "Keywords", "Keyword")),
            contact_information=ContactInformation(
                contact_person_primary=ContactPersonPrimary(
                    contact_person=text_value(get_path(contact, "IndividualName")),
                    contact_organization=text_value(
                        get_path(provider, "ProviderName")
                    ),
                ),
                contact_position=text_value(get_path(contact, "PositionName")),
                contact_address=ContactAddress(
                    address=text_value(get_path(address, "DeliveryPoint")),
                    city=text_value(get_path(address, "City")),
                    state_or_province=text_value(
                        get_path(address, "AdministrativeArea")
                    ),
                    post_code=text_value(get_path(address, "PostalCode")),
                    country=text_value(get_path(address, "Country")),
                ),
                contact_voice_telephone=text_value(
                    get_path(contact_info, "Phone", "Voice")
                ),
                contact_facsimile_telephone=text_value(
                    get_path(contact_info, "Phone", "Facsimile")
                ),
                contact_electronic_mail_address=text_value(
                    get_path(address, "ElectronicMailAddress")
                ),
            ),
        )

    @property
    def feature_types(self) -> list[FeatureType]:
        """
        The feature types in document order.

        A ``FeatureType`` that is not wrapped in a sequence (which is what
        a single-layer server produces) is not picked up, and gives an
        empty list.
        """
        feature_types_json = get_path(self._json, "FeatureTypeList", "FeatureType")
        if not is_sequence(feature_types_json):
            return []
        return [
            _parse_feature_type(json)
            for json in feature_types_json
            if isinstance(json, Mapping)
        ]

    def find_layer(self, name: str) -> Optional[FeatureType]:
        """
        Find the feature type corresponding to a given layer name.

        Names are resolved as follows, the first rule with a hit wins:
          * The layer has the exact name specified.
          * The name without its namespace prefix equals the layer name.
          * The name equals the title of the layer.

        Args:
            name: The layer name to resolve.

        Returns:
            The resolved feature type, or None if the name could not be resolved.

        The result is a fresh projection like every item of :attr:`feature_types`;
        compare feature types by value, not by identity.
        """
        feature_types = self.feature_types

        match = next((ft for ft in feature_types if ft.name == name), None)
        if match is None and ":" in name:
            # Namespaced names usually show up in GetCapabilities without
            # their namespace qualifier.
            name_without_namespace = name.split(":", 1)[1]
            match = next(
                (ft for ft in feature_types if ft.name == name_without_namespace),
                None,
            )

        if match is None:
            match = next((ft for ft in feature_types if ft.title == name), None)

        return match


_cache: CapabilitiesCache[WebFeatureServiceCapabilities] = CapabilitiesCache(
    WebFeatureServiceCapabilities._load
)
