"""Utilities to support efficient BeautifulSoup usage in postprocessors."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from ..exceptions import HtmlParseError

_SHARED_SOUP_KEY = "__shared_soup"
_SHARED_SOURCE_KEY = "__shared_soup_source"


def parse_html(html: str) -> BeautifulSoup:
    """Parse rendered HTML leniently; only unparseable input raises HtmlParseError."""
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise HtmlParseError(f"Rendered HTML could not be parsed: {exc}") from exc


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Return a shared BeautifulSoup instance for the given HTML.

    The parsed tree is cached in the rendering context, so consecutive
    postprocessors work on one tree instead of re-parsing the previous
    one's output. The cache is invalidated if the source HTML string
    changes between postprocessors.
    """
    soup = context.get(_SHARED_SOUP_KEY)
    source = context.get(_SHARED_SOURCE_KEY)
    if soup is None or source != html:
        soup = parse_html(html)
        context[_SHARED_SOUP_KEY] = soup
        context[_SHARED_SOURCE_KEY] = html
    return soup


def soup_to_html(context: dict, soup: BeautifulSoup | None = None) -> str:
    """Serialise the shared soup back to HTML and update the cache."""
    if soup is None:
        soup = context.get(_SHARED_SOUP_KEY)
    html = str(soup) if soup is not None else ""
    context[_SHARED_SOURCE_KEY] = html
    context[_SHARED_SOUP_KEY] = soup
    return html


def clear_shared_soup(context: dict) -> None:
    """Remove any cached soup information from the context."""
    context.pop(_SHARED_SOUP_KEY, None)
    context.pop(_SHARED_SOURCE_KEY, None)
