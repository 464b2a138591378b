# docpages/markdown/postprocessors/heading_anchors.py
"""
Stable anchors for headings.

Every heading gets exactly one <a name="..."> anchor:
- An anchor already in the heading (GitHub renders one) is reused and its
  name, minus the user-content prefix, becomes the heading id
- Otherwise the id is the heading text with spaces replaced by hyphens,
  lower-cased, and a new anchor is inserted as the heading's first child
- Headings whose id comes out empty are skipped
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup, Tag

from ..config import get_anchor_prefix
from ..headings import iter_headings
from ..outline import Heading, Outline

logger = logging.getLogger(__name__)


def default_heading_id(heading: Tag) -> str:
    return heading.get_text().replace(" ", "-").lower()


def heading_id(heading: Tag, prefix: str) -> str:
    """Identifier for a heading before normalisation."""
    identifier = default_heading_id(heading)

    anchor = heading.find("a")
    if anchor is not None:
        identifier = anchor.get("name", identifier)
        if prefix and identifier.startswith(prefix):
            identifier = identifier[len(prefix):]

    return identifier


def assign_anchor(soup: BeautifulSoup, heading: Tag, prefix: Optional[str] = None) -> Optional[str]:
    """
    Ensure the heading carries a normalised anchor and return its id.

    Returns None, leaving the heading untouched, when the id is empty.
    """
    if prefix is None:
        prefix = get_anchor_prefix()

    identifier = heading_id(heading, prefix).lower().strip()
    if not identifier:
        logger.debug(f"Skipping <{heading.name}> without an identifier")
        return None

    anchor = heading.find("a")
    if anchor is None:
        anchor = soup.new_tag("a")
        heading.insert(0, anchor)

    # bs4 attribute-encodes the value when serialising
    anchor["name"] = identifier
    return identifier


def annotate_heading(
    soup: BeautifulSoup, heading: Tag, level: int, prefix: Optional[str] = None
) -> Optional[Heading]:
    """Anchor one heading and return its outline entry, or None if it was skipped."""
    identifier = assign_anchor(soup, heading, prefix)
    if identifier is None:
        return None
    return Heading(id=identifier, level=level, text=heading.get_text())


def annotate(
    soup: BeautifulSoup,
    prefix: Optional[str] = None,
    on_heading: Optional[Callable[[Tag, int], None]] = None,
) -> tuple[BeautifulSoup, Outline]:
    """
    Anchor every heading in the tree and collect the outline.

    on_heading(heading, level) is called for each anchored heading during
    the same walk, so callers can plan further work without a second scan.
    """
    outline = Outline()
    for heading, level in iter_headings(soup):
        entry = annotate_heading(soup, heading, level, prefix)
        if entry is None:
            continue
        outline.append(entry)
        if on_heading is not None:
            on_heading(heading, level)
    return soup, outline
