# docpages/markdown/generators.py
"""
Markdown to HTML generators.

The remote generator posts the raw markdown to GitHub's markdown API and is
tried first. Any failure on that path falls back to the local generator
(Python-Markdown, or pandoc when configured), which is expected to always
succeed. The result records which generator produced the HTML.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional

import httpx
import markdown as python_markdown
import pypandoc

from .config import get_local_config, get_remote_config
from .exceptions import LocalRenderError, RemoteRenderError

logger = logging.getLogger(__name__)

REMOTE = "remote"
LOCAL = "local"


@dataclass(frozen=True)
class RenderResult:
    html: str

    generator: ClassVar[str] = ""


@dataclass(frozen=True)
class RemoteRender(RenderResult):
    """HTML produced by the remote markdown service."""

    generator: ClassVar[str] = REMOTE


@dataclass(frozen=True)
class LocalRender(RenderResult):
    """HTML produced by the local fallback renderer."""

    generator: ClassVar[str] = LOCAL


class GitHubMarkdownClient:
    """
    Minimal client for GitHub's ``POST /markdown/raw`` endpoint.

    Args:
        url: Endpoint URL (default from settings)
        timeout: Request timeout in seconds
        token: Optional GitHub token, raises the anonymous rate limit
        user_agent: Value of the User-Agent header (GitHub rejects requests without one)
        transport: Optional httpx transport, used by tests to simulate the service
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        config = get_remote_config()
        self.url = url or config["URL"]
        self.timeout = timeout if timeout is not None else config["TIMEOUT"]
        self.token = token if token is not None else config["TOKEN"]
        self.user_agent = user_agent or config["USER_AGENT"]
        self.transport = transport

    def _headers(self) -> dict:
        headers = {
            "Content-Type": "text/plain; charset=utf-8",
            "Accept": "text/html",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def render_raw(self, text: str) -> str:
        """Render markdown remotely, raising RemoteRenderError on any failure."""
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(
                    self.url,
                    content=text.encode("utf-8"),
                    headers=self._headers(),
                )
                response.raise_for_status()
                html = response.text
        except httpx.HTTPError as exc:
            raise RemoteRenderError(f"Remote markdown render failed: {exc}") from exc

        if not html or not html.strip():
            if text.strip():
                raise RemoteRenderError("Remote markdown service returned an empty body")
        return html


def render_local(text: str) -> str:
    """Render markdown with the configured local engine."""
    config = get_local_config()
    engine = config["engine"]

    try:
        if engine == "pandoc":
            return pypandoc.convert_text(
                text,
                to="html5",
                format="markdown",
                extra_args=config["pandoc_extra_args"],
            )
        if engine == "markdown":
            return python_markdown.markdown(text, extensions=config["extensions"])
    except (OSError, RuntimeError, ValueError, ImportError) as exc:
        raise LocalRenderError(f"Local markdown render failed ({engine}): {exc}") from exc

    raise LocalRenderError(f"Unknown local markdown engine: {engine!r}")


def render(
    text: str,
    client: Optional[GitHubMarkdownClient] = None,
    use_remote: Optional[bool] = None,
) -> RenderResult:
    """
    Convert markdown to HTML, preferring the remote service.

    A single remote attempt is made; any failure is logged and the local
    renderer is used instead. Local failures propagate as LocalRenderError.

    Args:
        text: Raw markdown text
        client: Remote client to use (default: GitHubMarkdownClient from settings)
        use_remote: Force the remote attempt on or off (default: on if
            enabled in settings or a client is given)

    Returns:
        RemoteRender or LocalRender
    """
    text = text or ""

    if use_remote is None:
        use_remote = client is not None or get_remote_config()["ENABLED"]

    if use_remote:
        client = client or GitHubMarkdownClient()
        try:
            html = client.render_raw(text)
        except RemoteRenderError as exc:
            logger.warning(f"Falling back to local markdown renderer: {exc}")
        except Exception as exc:
            logger.warning(
                f"Unexpected error from remote markdown renderer, falling back: {exc}",
                exc_info=True,
            )
        else:
            if html is not None:
                logger.debug("Markdown rendered by remote generator")
                return RemoteRender(html)
            logger.warning("Remote markdown renderer returned nothing, falling back")

    html = render_local(text)
    logger.debug("Markdown rendered by local generator")
    return LocalRender(html)
