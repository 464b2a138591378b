# docpages/markdown/postprocessors/heading_containers.py
"""
Wrap top-level headings and their content in container divs.

A level 1 heading becomes <div class="topic">, a level 2 heading
<div class="sub-topic">. The container holds the heading and every following
sibling up to (not including) the next heading of any level.

Containers are planned while the headings are scanned and only applied once
the scan is over; moving siblings around during the scan would break the
sibling walk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, PageElement, Tag

from ..exceptions import ContainerInvariantError
from ..headings import is_heading_tag

CONTAINER_CLASSES = {
    1: "topic",
    2: "sub-topic",
}


@dataclass
class ContainerPlan:
    wrapper: Tag
    # members[0] is the heading
    members: List[PageElement] = field(default_factory=list)

    @property
    def heading(self) -> Tag:
        return self.members[0]


def collect_section(heading: Tag) -> List[PageElement]:
    """The heading plus its following siblings up to the next heading."""
    members: List[PageElement] = [heading]
    sibling = heading.next_sibling
    while sibling is not None and not is_heading_tag(sibling):
        members.append(sibling)
        sibling = sibling.next_sibling
    return members


def plan_container(soup: BeautifulSoup, heading: Tag, level: int) -> Optional[ContainerPlan]:
    """Plan a container for a level 1 or 2 heading; None for other levels."""
    css_class = CONTAINER_CLASSES.get(level)
    if css_class is None:
        return None
    wrapper = soup.new_tag("div", attrs={"class": css_class})
    return ContainerPlan(wrapper=wrapper, members=collect_section(heading))


def apply_containers(plans: Iterable[ContainerPlan]) -> None:
    """Move each planned group under its wrapper, in plan order."""
    for plan in plans:
        heading = plan.heading
        if heading.parent is None:
            raise ContainerInvariantError(
                f"<{heading.name}> {heading.get_text()!r} was already moved by another container"
            )

        heading.replace_with(plan.wrapper)
        # append() extracts each node from its old parent
        for member in plan.members:
            plan.wrapper.append(member)


def plan_containers(soup: BeautifulSoup, headings: Iterable[tuple[Tag, int]]) -> List[ContainerPlan]:
    """Plan containers for the given (heading, level) pairs without moving anything."""
    plans = []
    for heading, level in headings:
        plan = plan_container(soup, heading, level)
        if plan is not None:
            plans.append(plan)
    return plans


def wrap(soup: BeautifulSoup, headings: Iterable[tuple[Tag, int]]) -> BeautifulSoup:
    """Plan and apply containers for the given (heading, level) pairs."""
    apply_containers(plan_containers(soup, headings))
    return soup
