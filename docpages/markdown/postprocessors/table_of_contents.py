# docpages/markdown/postprocessors/table_of_contents.py
"""
Postprocessor that anchors headings, records the outline and wraps sections.

This postprocessor:
- Reuses the tree parsed by earlier postprocessors, parsing only if needed
- Walks the headings (h1-h9) once in document order, giving each a stable
  anchor and appending it to the outline
- Plans "topic" / "sub-topic" containers for level 1 and 2 headings during
  the same walk and applies them afterwards
- Stores the outline in context["outline"]
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..outline import Outline
from .heading_anchors import annotate
from .heading_containers import ContainerPlan, apply_containers, plan_container
from .utils import get_shared_soup, soup_to_html

logger = logging.getLogger(__name__)

OUTLINE_CONTEXT_KEY = "outline"


def process_headings(soup: BeautifulSoup, prefix: Optional[str] = None) -> Outline:
    """Anchor, outline and containerise the headings of a parsed document."""
    plans: List[ContainerPlan] = []

    def plan(heading: Tag, level: int) -> None:
        container = plan_container(soup, heading, level)
        if container is not None:
            plans.append(container)

    # anchors only touch heading children, so sibling runs planned here
    # are still valid when the containers are applied
    _, outline = annotate(soup, prefix, on_heading=plan)
    apply_containers(plans)
    return outline


def table_of_contents(html: str, context: dict) -> str:
    """
    Args:
        html: HTML string to process
        context: Context dictionary; receives the outline under "outline"
            and may override the anchor prefix with "anchor_prefix"

    Returns:
        HTML with anchored headings and section containers
    """
    soup = get_shared_soup(html, context)
    outline = process_headings(soup, prefix=context.get("anchor_prefix"))
    context[OUTLINE_CONTEXT_KEY] = outline

    logger.debug(f"Outlined {len(outline)} heading(s)")
    return soup_to_html(context, soup)
