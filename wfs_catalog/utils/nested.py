"""
Helpers for navigating loosely-typed trees produced by ``xml2json``.

Any link of a path may be missing, ``None``, or of an unexpected
shape depending on the server. Navigation stops at the first such
link and returns ``None`` instead of raising.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Optional

from wfs_catalog.infrastructure.xml.xml2json import CDATA_KEY


def get_path(tree: Any, *keys: str) -> Any:
    """
    Follow ``keys`` down through nested mappings.

    >>> get_path({"a": {"b": "c"}}, "a", "b")
    'c'
    >>> get_path({"a": None}, "a", "b") is None
    True
    """
    node = tree
    for key in keys:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
        if node is None:
            return None
    return node


def is_sequence(value: Any) -> bool:
    """True for lists/tuples, False for strings and mappings."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def text_value(value: Any) -> Optional[str]:
    """
    Return the text of an element value.

    Elements with attributes (e.g. ``xml:lang``) carry their text
    under ``#text``. Anything else that is not text gives ``None``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        text = value.get(CDATA_KEY)
        return text if isinstance(text, str) else None
    return None


def text_values(value: Any) -> Optional[list[str]]:
    """Like :func:`text_value`, but for an element that may repeat."""
    if value is None:
        return None
    items = value if is_sequence(value) else [value]
    texts = [text_value(item) for item in items]
    return [text for text in texts if text is not None]


def freeze(value: Any) -> Any:
    """Return a read-only deep copy: mappings become proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if is_sequence(value):
        return tuple(freeze(item) for item in value)
    return value
