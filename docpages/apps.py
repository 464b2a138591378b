from django.apps import AppConfig


class DocpagesConfig(AppConfig):
    name = "docpages"
    verbose_name = "Markdown documentation pages"
