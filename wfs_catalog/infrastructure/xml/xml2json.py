"""
XML to JSON-like tree conversion.

Structural conversion only, no validation. The shape follows the
document exactly:
  - an element with only text becomes a string
  - an empty element becomes None
  - an element repeated under one parent becomes a list, but a single
    occurrence stays a bare value
  - attributes are stored as ``@name``, text next to attributes or
    children as ``#text``

Namespace prefixes are removed from element and attribute names, so
``ows:ServiceIdentification`` is found under ``ServiceIdentification``
whatever alias the server used. ``xmlns`` declarations are dropped.
"""

from typing import Any, Optional

import xmltodict

ATTR_PREFIX = "@"
CDATA_KEY = "#text"


def local_name(qualified: str) -> str:
    """Strip a ``prefix:`` from an XML name, keeping the attribute marker."""
    if qualified.startswith(ATTR_PREFIX):
        return ATTR_PREFIX + qualified[len(ATTR_PREFIX):].split(":", 1)[-1]
    return qualified.split(":", 1)[-1]


def _strip_namespaces(path, key: str, value: Any) -> Optional[tuple[str, Any]]:
    if key == "@xmlns" or key.startswith("@xmlns:"):
        return None
    return local_name(key), value


def xml2json(xml: str | bytes) -> dict[str, Any]:
    """
    Convert an XML document into a nested dict.

    The root element itself is not a key of the result; its children
    and attributes are.

    Raises:
        xml.parsers.expat.ExpatError: When the input is not well-formed XML.
    """
    parsed = xmltodict.parse(
        xml,
        attr_prefix=ATTR_PREFIX,
        cdata_key=CDATA_KEY,
        postprocessor=_strip_namespaces,
        disable_entities=True,
    )
    if not parsed:
        return {}

    root = next(iter(parsed.values()))
    if not isinstance(root, dict):
        return {}
    return root
