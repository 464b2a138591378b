from django.conf import settings

DEFAULT_REMOTE_CONFIG = {
    "ENABLED": True,
    "URL": "https://api.github.com/markdown/raw",
    "TIMEOUT": 10.0,
    "TOKEN": None,
    "USER_AGENT": "docpages",
}

DEFAULT_ANCHOR_PREFIX = "user-content-"


def _docpages_settings():
    return getattr(settings, "DOCPAGES", {}) or {}


def get_remote_config():
    """
    Configuration for the remote (GitHub) markdown renderer.

    Keys missing from settings.DOCPAGES["REMOTE"] fall back to
    DEFAULT_REMOTE_CONFIG.
    """
    config = dict(DEFAULT_REMOTE_CONFIG)
    config.update(_docpages_settings().get("REMOTE", {}))
    return config


def get_local_config():
    """
    Configuration for the local fallback renderer.

    "markdown" uses Python-Markdown and needs nothing outside Python.
    "pandoc" uses pypandoc and requires a pandoc binary on the PATH.
    """
    docpages = _docpages_settings()
    return {
        "engine": docpages.get("LOCAL_ENGINE", "markdown"),
        "extensions": docpages.get(
            "MARKDOWN_EXTENSIONS",
            [
                # Tables, fenced code, footnotes, attribute lists, abbreviations
                "extra",
                "sane_lists",
            ],
        ),
        "pandoc_extra_args": docpages.get(
            "PANDOC_EXTRA_ARGS",
            [
                "--from=markdown+autolink_bare_uris+strikeout+task_lists+pipe_tables+fenced_code_blocks+fenced_code_attributes+raw_html+footnotes",
            ],
        ),
    }


def get_anchor_prefix():
    """Prefix the remote renderer puts on anchor names to namespace user content."""
    return _docpages_settings().get("ANCHOR_PREFIX", DEFAULT_ANCHOR_PREFIX)


def get_page_config():
    """Settings used by the page view (source root, caching, title casing)."""
    docpages = _docpages_settings()
    return {
        "root": docpages.get("ROOT"),
        "cache_timeout": docpages.get("CACHE_TIMEOUT", 24 * 60 * 60),
        "title_replacements": docpages.get("TITLE_REPLACEMENTS", {}),
    }
