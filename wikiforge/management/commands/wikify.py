"""
Management command to apply house typographic style to wikitext files.

Prints the normalized text, rewrites the files with --in-place, or with
--check only reports which files would change and fails if any would.
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from wikiforge.wikitext import normalize
from wikiforge.wikitext.config import get_wikitext_config

from ._files import STDIN, read_text, write_text

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Normalize typography of wikitext files'

    def add_arguments(self, parser):
        parser.add_argument(
            'paths',
            nargs='+',
            help='Wikitext files to normalize ("-" reads stdin)',
        )
        parser.add_argument(
            '--in-place',
            action='store_true',
            help='Overwrite the files instead of printing the result',
        )
        parser.add_argument(
            '--check',
            action='store_true',
            help='Only report files that would change; exit non-zero if any',
        )

    def handle(self, *args, **options):
        paths = options['paths']
        in_place = options.get('in_place')
        check = options.get('check')
        encoding = get_wikitext_config()['ENCODING']

        if in_place and STDIN in paths:
            raise CommandError('--in-place cannot be used with stdin')

        changed = []
        for path in paths:
            text = read_text(path, encoding)
            result = normalize(text)

            if result != text:
                changed.append(path)

            if check:
                if result != text:
                    self.stdout.write(f'Would normalize {path}')
            elif in_place:
                if result != text:
                    write_text(path, result, encoding)
                    self.stdout.write(self.style.SUCCESS(f'Normalized {path}'))
            else:
                self.stdout.write(result, ending='')

        logger.info(f'{len(changed)} of {len(paths)} file(s) need normalization')

        if check and changed:
            raise CommandError(f'{len(changed)} file(s) would be normalized')
