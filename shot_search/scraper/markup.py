"""Thin selection layer over BeautifulSoup.

The field parsers only talk to the functions here, so the tree builder (or
the library itself) can change without touching field extraction.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from shot_search.config import settings

# Element type handed to the field parsers; nothing outside this module imports bs4.
Element = Tag


def parse_document(html: str | bytes, parser: str | None = None) -> BeautifulSoup:
    """Parse *html* permissively; malformed markup is repaired, not rejected."""
    return BeautifulSoup(html, parser or settings.html_parser)


def select_all(element: Tag, selector: str) -> List[Tag]:
    """Descendants of *element* matching the CSS *selector*, in document order."""
    return list(element.select(selector))


def select_first(element: Tag, selector: str) -> Tag | None:
    return element.select_one(selector)


def exists(element: Tag, selector: str) -> bool:
    return element.select_one(selector) is not None


def text_of(element: Tag) -> str:
    """Visible text of *element* with runs of whitespace collapsed to one space."""
    return " ".join(element.get_text().split())


def joined_text(element: Tag, selector: str) -> str:
    """Text of every match of *selector*, space-joined; empty when nothing matches."""
    parts = (text_of(match) for match in element.select(selector))
    return " ".join(part for part in parts if part)


def attr(element: Tag, name: str) -> str:
    """Attribute value as a string, or ``""`` when absent."""
    value = element.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def first_child(element: Tag) -> Tag | None:
    """First child *element* (text nodes are skipped)."""
    return element.find(True, recursive=False)
