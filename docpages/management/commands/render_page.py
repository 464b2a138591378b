"""
Management command to render a markdown page from the command line.

Prints the annotated HTML (default) or the heading outline as JSON. Useful
for checking how a page will come out, and which generator produced it,
without running the site.
"""

import json

from django.core.management.base import BaseCommand, CommandError
from django.http import Http404

from docpages.markdown.renderer import render_page
from docpages.sources import MarkdownSource


class Command(BaseCommand):
    help = 'Render a markdown page and print its HTML or outline'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            type=str,
            help='Page path relative to the pages root (e.g. "guides/install")',
        )
        parser.add_argument(
            '--outline',
            action='store_true',
            help='Print the heading outline as JSON instead of HTML',
        )
        parser.add_argument(
            '--local',
            action='store_true',
            help='Skip the remote renderer and use the local fallback',
        )

    def handle(self, *args, **options):
        try:
            source = MarkdownSource.resolve(options['path'])
        except Http404 as exc:
            raise CommandError(str(exc))

        page = render_page(source.read(), use_remote=False if options['local'] else None)

        self.stderr.write(
            f'{source.source_path}: {len(page.outline)} heading(s), generator: {page.generator}'
        )

        if options['outline']:
            self.stdout.write(json.dumps(page.outline.to_list(), indent=2))
        else:
            self.stdout.write(page.html)
