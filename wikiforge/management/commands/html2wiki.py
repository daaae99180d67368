"""
Management command to convert an HTML fragment to wikitext.
"""

from django.core.management.base import BaseCommand

from wikiforge.wikitext import convert_html
from wikiforge.wikitext.config import get_wikitext_config

from ._files import read_text, write_text


class Command(BaseCommand):
    help = 'Convert an HTML file to wikitext'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            help='HTML file to convert ("-" reads stdin)',
        )
        parser.add_argument(
            '--output',
            type=str,
            help='Write the wikitext to this file instead of stdout',
        )

    def handle(self, *args, **options):
        encoding = get_wikitext_config()['ENCODING']
        output = options.get('output')

        wikitext = convert_html(read_text(options['path'], encoding))

        if output:
            write_text(output, wikitext + '\n', encoding)
            self.stdout.write(self.style.SUCCESS(f'Wrote {output}'))
        else:
            self.stdout.write(wikitext)
