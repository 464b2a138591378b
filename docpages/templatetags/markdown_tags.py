# docpages/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from docpages.markdown.outline import build_toc_tree
from docpages.markdown.renderer import render_markdown, render_page

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.simple_tag
def markdown_outline(value):
    """Nested outline of a markdown text: {% markdown_outline text as toc %}"""
    return build_toc_tree(render_page(value).outline)
