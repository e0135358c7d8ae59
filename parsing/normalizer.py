"""
Cardinality normalization for the tournament export.

Collection elements in the export (players, rounds, matches) may appear
zero, one or many times. Everything here returns lists so that callers
never have to check whether they got a single element or several.
"""

import xml.etree.ElementTree as ET
from typing import List, Optional


def child_list(element: Optional[ET.Element], path: str) -> List[ET.Element]:
    """
    Return every element matching a slash separated path below `element`.

    A missing container anywhere along the path yields an empty list.
    """
    if element is None:
        return []
    return element.findall(path)


def child_text(element: Optional[ET.Element], tag: str, default: str = "") -> str:
    """Stripped text of a child element, or `default` when it is absent."""
    if element is None:
        return default
    child = element.find(tag)
    if child is None or child.text is None:
        return default
    return child.text.strip()


def attribute(element: Optional[ET.Element], name: str, default: str = "") -> str:
    """Stripped attribute value, or `default` when it is absent."""
    if element is None:
        return default
    value = element.get(name)
    if value is None:
        return default
    return value.strip()
