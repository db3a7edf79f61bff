"""Pull string values out of parsed weather feeds.

A :class:`Field` names a path (ElementTree's XPath subset, relative to the
document root) and an accessor: the element text, or a named attribute when
``attribute`` is set.  :func:`extract` always returns a list per field, empty
when nothing matched, so absent data stays distinguishable from an empty
string.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional
from xml.etree import ElementTree

from .providers.base import EmptyMandatoryField


@dataclass(frozen=True)
class Field:
    path: str
    attribute: Optional[str] = None

    def read(self, element: ElementTree.Element) -> Optional[str]:
        if self.attribute is not None:
            return element.get(self.attribute)
        if element.text is None:
            return None
        text = element.text.strip()
        return text or None


def extract(
    document: ElementTree.Element,
    fields: Mapping[str, Field],
    namespaces: Optional[Mapping[str, str]] = None,
) -> Dict[str, List[str]]:
    """Return every value found for each field, in document order."""
    result: Dict[str, List[str]] = {}
    for name, field in fields.items():
        values: List[str] = []
        for element in document.findall(field.path, namespaces):
            value = field.read(element)
            if value is not None:
                values.append(value)
        result[name] = values
    return result


def extract_each(
    document: ElementTree.Element,
    path: str,
    fields: Mapping[str, Field],
    namespaces: Optional[Mapping[str, str]] = None,
) -> List[Dict[str, Optional[str]]]:
    """One mapping per element matched by ``path``.

    Field paths are relative to that element, so a missing leaf is ``None``
    in its own row instead of shifting later rows.
    """
    rows: List[Dict[str, Optional[str]]] = []
    for element in document.findall(path, namespaces):
        rows.append(
            {name: first(extract(element, {name: field}, namespaces)[name]) for name, field in fields.items()}
        )
    return rows


def first(values: List[str]) -> Optional[str]:
    """First value, with an empty string read as absent."""
    if not values:
        return None
    return values[0] or None


def require(values: List[str], message: str) -> str:
    """Return the first value or raise :class:`EmptyMandatoryField`."""
    value = first(values)
    if value is None:
        raise EmptyMandatoryField(message)
    return value


__all__ = ["Field", "extract", "extract_each", "first", "require"]
