# docpages/markdown/postprocessors/github_headings.py
"""
Postprocessor that flattens GitHub's wrapped heading markup.

GitHub renders headings as

    <div class="markdown-heading"><h2 class="heading-element">Usage</h2>
    <a id="user-content-usage" class="anchor" href="#usage">...</a></div>

which hides the heading's real siblings behind the div and keeps the anchor
outside the heading. This turns it back into

    <h2 class="heading-element"><a name="user-content-usage" id="user-content-usage"
    class="anchor" href="#usage">...</a>Usage</h2>

so the table_of_contents postprocessor can reuse the anchor and group the
content that follows the heading.
"""

from bs4 import Tag

from ..headings import is_heading_tag
from .utils import get_shared_soup, soup_to_html

HEADING_WRAPPER_CLASS = "markdown-heading"


def github_headings(html: str, context: dict) -> str:
    if HEADING_WRAPPER_CLASS not in html:
        return html

    soup = get_shared_soup(html, context)

    for wrapper in soup.find_all("div", class_=HEADING_WRAPPER_CLASS):
        heading = next(
            (child for child in wrapper.children if is_heading_tag(child)),
            None,
        )
        if heading is None:
            continue

        anchor = wrapper.find("a", class_="anchor", recursive=False)
        if isinstance(anchor, Tag):
            if not anchor.get("name") and anchor.get("id"):
                anchor["name"] = anchor["id"]
            heading.insert(0, anchor.extract())

        wrapper.unwrap()

    return soup_to_html(context, soup)
