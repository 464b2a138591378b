"""
Markdown page sources.

Resolves a request path such as "docs/create-packages" to a markdown file
under the configured root, matching each path segment case-insensitively so
that the reported source path carries the real on-disk casing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from django.http import Http404

from .markdown.config import get_page_config

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


def _match_entry(directory: Path, name: str) -> Optional[Path]:
    """Find name in directory, exact match first, then ignoring case."""
    exact = directory / name
    if exact.exists():
        return exact

    folded = name.casefold()
    for entry in sorted(directory.iterdir()):
        if entry.name.casefold() == folded:
            return entry
    return None


def title_from_path(path: Path, replacements: Optional[dict] = None) -> str:
    """
    "create-packages.md" -> "Create Packages".

    Replacements are applied after title-casing, for words the casing gets
    wrong (e.g. {"Nuget": "NuGet"}).
    """
    title = path.stem.replace("-", " ").title()
    for old, new in (replacements or {}).items():
        title = title.replace(old, new)
    return title


class MarkdownSource:
    """A markdown file under the pages root."""

    def __init__(self, root: Path, path: Path):
        self.root = root
        self.path = path

    @classmethod
    def resolve(cls, page_path: str, root: Optional[Path] = None) -> "MarkdownSource":
        """
        Resolve a page path to a source file.

        Raises Http404 if no markdown file matches or the path leaves the root.
        """
        root = root or get_page_config()["root"]
        if root is None:
            logger.error('DOCPAGES["ROOT"] is not configured')
            raise Http404("No pages configured")

        root = Path(root).resolve()
        if not root.is_dir():
            logger.error(f"Markdown pages root {root} is not a directory")
            raise Http404("No pages configured")

        segments = [segment for segment in page_path.strip("/").split("/") if segment]
        if not segments:
            segments = ["index"]
        if any(segment in (".", "..") for segment in segments):
            raise Http404("Invalid page path")

        current = root
        for segment in segments[:-1]:
            match = _match_entry(current, segment)
            if match is None or not match.is_dir():
                raise Http404(f"No page at {page_path!r}")
            current = match

        leaf = segments[-1]
        candidates = [leaf] if leaf.lower().endswith(MARKDOWN_SUFFIXES) else [
            leaf + suffix for suffix in MARKDOWN_SUFFIXES
        ]
        for candidate in candidates:
            match = _match_entry(current, candidate)
            if match is not None and match.is_file():
                resolved = match.resolve()
                if root not in resolved.parents:
                    raise Http404("Invalid page path")
                return cls(root, match)

        logger.info(f"No markdown source for {page_path!r} under {root}")
        raise Http404(f"No page at {page_path!r}")

    @property
    def source_path(self) -> str:
        """Path relative to the root, with on-disk casing and "/" separators."""
        return self.path.relative_to(self.root).as_posix()

    def title(self, replacements: Optional[dict] = None) -> str:
        if replacements is None:
            replacements = get_page_config()["title_replacements"]
        return title_from_path(self.path, replacements)

    def read(self) -> str:
        # utf-8-sig drops a byte order mark if the editor wrote one
        return self.path.read_text(encoding="utf-8-sig")
