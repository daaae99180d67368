"""
Management command to turn absolute links into the wiki into internal links.

The wiki is identified by its API endpoint, taken from --api-url or the
WIKIFORGE["API_URL"] setting. Typography is normalized afterwards unless
--no-typography is given or WIKIFORGE["FIX_TYPOGRAPHY"] is False.
"""

from django.core.management.base import BaseCommand, CommandError

from wikiforge.wikitext import canonicalize_links, resolve_origin
from wikiforge.wikitext.config import get_wikitext_config

from ._files import STDIN, read_text, write_text


class Command(BaseCommand):
    help = 'Rewrite same-wiki URLs in wikitext files as internal links'

    def add_arguments(self, parser):
        parser.add_argument(
            'paths',
            nargs='+',
            help='Wikitext files to fix ("-" reads stdin)',
        )
        parser.add_argument(
            '--api-url',
            type=str,
            help='Wiki API endpoint, e.g. https://wiki.example.org/w/api.php',
        )
        parser.add_argument(
            '--no-typography',
            action='store_true',
            help='Do not normalize typography after rewriting links',
        )
        parser.add_argument(
            '--in-place',
            action='store_true',
            help='Overwrite the files instead of printing the result',
        )

    def handle(self, *args, **options):
        config = get_wikitext_config()
        paths = options['paths']
        in_place = options.get('in_place')
        api_url = options.get('api_url') or config['API_URL']
        fix_typography = config['FIX_TYPOGRAPHY'] and not options.get('no_typography')
        encoding = config['ENCODING']

        if not api_url:
            raise CommandError('No API endpoint: pass --api-url or set WIKIFORGE["API_URL"]')
        if in_place and STDIN in paths:
            raise CommandError('--in-place cannot be used with stdin')

        origin, base_dir = resolve_origin(api_url)
        if not origin:
            raise CommandError(f'Malformed API endpoint: {api_url}')

        for path in paths:
            text = read_text(path, encoding)
            result = canonicalize_links(text, origin, base_dir, also_normalize=fix_typography)

            if in_place:
                if result != text:
                    write_text(path, result, encoding)
                    self.stdout.write(self.style.SUCCESS(f'Fixed {path}'))
                else:
                    self.stdout.write(f'Unchanged {path}')
            else:
                self.stdout.write(result, ending='')
