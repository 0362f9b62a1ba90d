"""Small lookup helpers over BeautifulSoup trees shared by every parser.

All helpers accept ``None`` as the root and answer with an empty result, so
parsers can chain lookups without checking each level for absence.
"""

from __future__ import annotations

from typing import Mapping, Optional

from bs4 import BeautifulSoup, Tag


def parse_html(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def classes_of(tag: Optional[Tag]) -> list[str]:
    if tag is None:
        return []
    value = tag.get("class") or []
    if isinstance(value, str):
        return value.split()
    return list(value)


def has_classes(tag: Optional[Tag], *classes: str) -> bool:
    present = classes_of(tag)
    return tag is not None and all(name in present for name in classes)


def _matches(tag: Tag, classes: tuple[str, ...], attrs: Optional[Mapping[str, str]]) -> bool:
    if not has_classes(tag, *classes):
        return False
    if attrs:
        for key, expected in attrs.items():
            if tag.get(key) != expected:
                return False
    return True


def find_all(
    root: Optional[Tag],
    name: str,
    *classes: str,
    attrs: Optional[Mapping[str, str]] = None,
) -> list[Tag]:
    """Return descendants named ``name`` carrying every class in ``classes``, in document order."""

    if root is None:
        return []
    return [tag for tag in root.find_all(name) if _matches(tag, classes, attrs)]


def find_first(
    root: Optional[Tag],
    name: str,
    *classes: str,
    attrs: Optional[Mapping[str, str]] = None,
) -> Optional[Tag]:
    if root is None:
        return None
    for tag in root.find_all(name):
        if _matches(tag, classes, attrs):
            return tag
    return None


def find_by_id(root: Optional[Tag], element_id: str) -> Optional[Tag]:
    if root is None:
        return None
    return root.find(id=element_id)


def element_children(tag: Optional[Tag]) -> list[Tag]:
    """Child elements of ``tag``, skipping text and comment nodes."""

    if tag is None:
        return []
    return [child for child in tag.children if isinstance(child, Tag)]


def nth_descendant(root: Optional[Tag], name: str, index: int) -> Optional[Tag]:
    if root is None or index < 0:
        return None
    matches = root.find_all(name)
    if index >= len(matches):
        return None
    return matches[index]


def digits(text: Optional[str]) -> str:
    if not text:
        return ""
    return "".join(char for char in text if char.isdigit())


def int_attribute(tag: Optional[Tag], name: str, default: int = 0) -> int:
    if tag is None:
        return default
    value = tag.get(name)
    if not isinstance(value, str):
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def xpath_of(tag: Tag) -> str:
    """Absolute XPath of ``tag`` for handing an extracted node to the browser controller."""

    steps: list[str] = []
    node: Optional[Tag] = tag
    while node is not None and not isinstance(node, BeautifulSoup):
        position = len(node.find_previous_siblings(node.name)) + 1
        steps.append(f"{node.name}[{position}]")
        node = node.parent
    return "/" + "/".join(reversed(steps))
