"""Test fixtures for docpages."""

import copy
import os
from typing import Callable

import django
import httpx
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "docsite.settings")
# Never reach GitHub from the test suite
os.environ["DOCPAGES_REMOTE_ENABLED"] = "0"

django.setup()

from django.conf import settings  # noqa: E402
from django.core.cache import cache  # noqa: E402
from django.test.utils import (  # noqa: E402
    override_settings,
    setup_test_environment,
    teardown_test_environment,
)

from docpages.markdown.generators import GitHubMarkdownClient  # noqa: E402

REMOTE_URL = "https://markdown.test/markdown/raw"


@pytest.fixture(scope="session", autouse=True)
def django_test_environment():
    setup_test_environment()
    yield
    teardown_test_environment()


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def docpages_settings() -> Callable:
    """Override keys of settings.DOCPAGES for the rest of the test."""
    overrides = []

    def apply(**changes):
        docpages = copy.deepcopy(settings.DOCPAGES)
        for key, value in changes.items():
            if isinstance(value, dict) and isinstance(docpages.get(key), dict):
                docpages[key].update(value)
            else:
                docpages[key] = value
        override = override_settings(DOCPAGES=docpages)
        override.enable()
        overrides.append(override)
        return docpages

    yield apply

    for override in reversed(overrides):
        override.disable()


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> GitHubMarkdownClient:
    """GitHub client whose requests are answered by handler."""
    return GitHubMarkdownClient(
        url=REMOTE_URL,
        timeout=1.0,
        token="",
        user_agent="docpages-tests",
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def remote_html() -> Callable[[str], GitHubMarkdownClient]:
    """Client for a remote service that always answers with the given HTML."""

    def factory(html: str) -> GitHubMarkdownClient:
        return make_client(lambda request: httpx.Response(200, text=html))

    return factory


@pytest.fixture
def failing_remote() -> GitHubMarkdownClient:
    """Client for a remote service that always errors."""
    return make_client(lambda request: httpx.Response(503, text="unavailable"))


@pytest.fixture
def pages_root(tmp_path, docpages_settings):
    """A pages root with a few markdown files, installed as DOCPAGES["ROOT"]."""
    root = tmp_path / "pages"
    (root / "Guides").mkdir(parents=True)
    (root / "index.md").write_text("# Welcome\n\nHello.\n", encoding="utf-8")
    (root / "nuget-config.md").write_text(
        "# Config\n\n## Keys\n\nText.\n\n### Details\n\nMore.\n", encoding="utf-8"
    )
    (root / "Guides" / "Getting-Started.md").write_text(
        "\ufeff# Getting Started\n\nInstall it.\n\n## Next Steps\n\nRead on.\n",
        encoding="utf-8",
    )
    docpages_settings(ROOT=root)
    return root
