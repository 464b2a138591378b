import hashlib
import json
import logging

from django.core.cache import cache
from django.utils import timezone
from django.views.generic import TemplateView

from .markdown.config import get_local_config, get_page_config, get_remote_config
from .markdown.outline import Outline, build_toc_tree
from .markdown.renderer import RenderedPage, render_page
from .sources import MarkdownSource

logger = logging.getLogger(__name__)

CACHE_PREFIX = "docpages:page"


def page_cache_key(text: str) -> str:
    """Cache key for a rendered page: the markdown text plus the renderer setup."""
    remote = get_remote_config()
    local = json.dumps(get_local_config(), sort_keys=True, default=str)
    renderer = f"{remote['ENABLED']}:{remote['URL']}:{local}"
    digest = hashlib.sha256(f"{renderer}\n{text}".encode("utf-8")).hexdigest()
    return f"{CACHE_PREFIX}:{digest}"


def get_rendered_page(text: str) -> RenderedPage:
    """Render markdown through the page cache."""
    key = page_cache_key(text)
    cached = cache.get(key)
    if cached is not None:
        return RenderedPage(
            html=cached["html"],
            outline=Outline.from_list(cached["outline"]),
            generator=cached["generator"],
        )

    page = render_page(text)
    cache.set(
        key,
        {
            "html": page.html,
            "outline": page.outline.to_list(),
            "generator": page.generator,
        },
        get_page_config()["cache_timeout"],
    )
    return page


class MarkdownPageView(TemplateView):
    """
    Render a markdown file from the pages root.

    Context:
    - content_html: annotated HTML, emitted unescaped
    - headings: flat outline (list of Heading)
    - toc: nested outline for navigation
    - generator: "remote" or "local"
    - title, source, generated_at: page metadata
    - heading_title: text of the first level 1 heading, if any
    """

    template_name = "docpages/markdown_page.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)

        source = MarkdownSource.resolve(self.kwargs.get("path", ""))
        page = get_rendered_page(source.read())
        logger.info(
            f"Rendered page '{source.source_path}' "
            f"({len(page.outline)} headings, generator: {page.generator})"
        )

        context["title"] = source.title()
        context["heading_title"] = page.outline.title
        context["source"] = source.source_path
        context["generated_at"] = timezone.now().strftime("%Y-%m-%d %H:%M:%S %p UTC")
        context["content_html"] = page.html
        context["headings"] = list(page.outline)
        context["toc"] = build_toc_tree(page.outline)
        context["generator"] = page.generator
        return context
