"""
Django settings for the docsite project.

Serves markdown documentation pages from DOCPAGES["ROOT"].
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "docsite-insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "") == "1"

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "docpages",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "docsite.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "docsite.wsgi.application"

# No models; the pages are read straight from disk
DATABASES = {}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "docpages",
    }
}

STATIC_URL = "static/"

USE_TZ = True
TIME_ZONE = "UTC"

# Markdown pages
DOCPAGES = {
    "ROOT": Path(os.environ.get("DOCPAGES_ROOT", BASE_DIR / "docs")),
    "ANCHOR_PREFIX": "user-content-",
    "CACHE_TIMEOUT": 24 * 60 * 60,
    "TITLE_REPLACEMENTS": {"Nuget": "NuGet"},
    "REMOTE": {
        "ENABLED": os.environ.get("DOCPAGES_REMOTE_ENABLED", "1") == "1",
        "URL": "https://api.github.com/markdown/raw",
        "TIMEOUT": 10.0,
        "TOKEN": os.environ.get("GITHUB_TOKEN"),
        "USER_AGENT": "docpages",
    },
    "LOCAL_ENGINE": os.environ.get("DOCPAGES_LOCAL_ENGINE", "markdown"),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "docpages": {
            "handlers": ["console"],
            "level": os.environ.get("DOCPAGES_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
