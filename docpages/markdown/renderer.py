# docpages/markdown/renderer.py

from dataclasses import dataclass
from typing import Optional

from .generators import GitHubMarkdownClient, render
from .outline import Outline
from .postprocessors import apply_postprocessors
from .postprocessors.table_of_contents import OUTLINE_CONTEXT_KEY
from .postprocessors.utils import clear_shared_soup


@dataclass(frozen=True)
class RenderedPage:
    html: str
    outline: Outline
    generator: str


def render_page(
    text: str,
    context: Optional[dict] = None,
    client: Optional[GitHubMarkdownClient] = None,
    use_remote: Optional[bool] = None,
) -> RenderedPage:
    """
    Main rendering function: markdown generation plus HTML post-processing

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data
        client: Remote markdown client (default: built from settings)
        use_remote: Force the remote attempt on or off (default: settings)

    Returns:
        RenderedPage with the final HTML, the heading outline and the
        generator ("remote" or "local") that produced the HTML
    """
    if context is None:
        context = {}

    # Markdown conversion, remote first with local fallback
    result = render(text, client=client, use_remote=use_remote)
    context["generator"] = result.generator

    # Post-processing: anchors, outline, topic containers
    html = apply_postprocessors(result.html, context)
    clear_shared_soup(context)

    return RenderedPage(
        html=html,
        outline=context.get(OUTLINE_CONTEXT_KEY) or Outline(),
        generator=result.generator,
    )


def render_markdown(text, context=None):
    """Render markdown to the final HTML string only."""
    return render_page(text, context=context).html
