"""Recognising heading elements in a parsed HTML tree."""

from __future__ import annotations

import re
from typing import Iterator

from bs4 import BeautifulSoup, PageElement, Tag

# "h" plus a single digit 1-9, nothing else ("h10", "hx", "header" are not headings)
_HEADING_NAME = re.compile(r"^[hH][1-9]$")


def is_heading_tag(node: PageElement | None) -> bool:
    """Return True if node is an element named h1..h9."""
    if not isinstance(node, Tag) or not node.name:
        return False
    return bool(_HEADING_NAME.match(node.name))


def heading_level(heading: Tag) -> int:
    """Level of a heading element, "h3" -> 3."""
    return int(heading.name[1])


def iter_headings(soup: BeautifulSoup | Tag) -> Iterator[tuple[Tag, int]]:
    """
    Yield (heading, level) pairs in document order.

    The matches are collected before yielding, so callers may modify the
    children of each heading while iterating.
    """
    for heading in soup.find_all(is_heading_tag):
        yield heading, heading_level(heading)
