from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, Iterator, TypedDict


@dataclass(frozen=True)
class Heading:
    id: str
    level: int
    text: str


class TocNode(TypedDict):
    level: int
    id: str
    title: str
    children: list["TocNode"]


class Outline:
    """
    Headings of a document in document order.

    Append-only. Duplicate ids are kept as they are; anything building links
    from the outline has to tolerate them.
    """

    def __init__(self, headings: Iterable[Heading] = ()):
        self._headings: list[Heading] = list(headings)

    def append(self, heading: Heading) -> None:
        self._headings.append(heading)

    def __iter__(self) -> Iterator[Heading]:
        return iter(self._headings)

    def __len__(self) -> int:
        return len(self._headings)

    def __getitem__(self, index):
        return self._headings[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Outline):
            return NotImplemented
        return self._headings == other._headings

    def __repr__(self) -> str:
        return f"Outline({self._headings!r})"

    @property
    def title(self) -> str | None:
        """Text of the first level 1 heading, if any."""
        for heading in self._headings:
            if heading.level == 1:
                return heading.text.strip()
        return None

    def to_list(self) -> list[dict]:
        return [asdict(heading) for heading in self._headings]

    @classmethod
    def from_list(cls, items: Iterable[dict]) -> "Outline":
        return cls(
            Heading(id=item["id"], level=int(item["level"]), text=item["text"])
            for item in items
        )


def build_toc_tree(outline: Iterable[Heading]) -> list[TocNode]:
    """
    Nest a flat outline into a tree for navigation.

    A heading becomes a child of the closest preceding heading with a lower
    level. Skipped levels are not padded ("h1, h3" nests the h3 directly
    under the h1).
    """
    tree: list[TocNode] = []
    stack: list[TocNode] = []
    for heading in outline:
        node: TocNode = {
            "level": heading.level,
            "id": heading.id,
            "title": heading.text.strip(),
            "children": [],
        }

        while stack and stack[-1]["level"] >= heading.level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            tree.append(node)

        stack.append(node)

    return tree
