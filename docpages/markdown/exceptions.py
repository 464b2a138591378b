# docpages/markdown/exceptions.py
"""Errors raised by the markdown page pipeline."""


class MarkdownPageError(Exception):
    """Base class for all pipeline errors."""


class RemoteRenderError(MarkdownPageError):
    """The remote markdown service could not render the document.

    Never leaves the generator module: it always triggers the local fallback.
    """


class LocalRenderError(MarkdownPageError):
    """The local markdown renderer failed. Fatal for the page."""


class HtmlParseError(MarkdownPageError):
    """Rendered HTML could not be parsed into a tree at all."""


class ContainerInvariantError(MarkdownPageError):
    """A heading container group overlapped another one.

    Groups stop at the next heading, so this only happens if heading
    scanning is broken.
    """
