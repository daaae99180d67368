"""
File helpers shared by the wikitext management commands.

A path of ``-`` means stdin for reading and the command's stdout for writing.
"""

import sys
from pathlib import Path

from django.core.management.base import CommandError

STDIN = "-"


def read_text(path, encoding):
    """Read a file (or stdin) as text, raising CommandError when it cannot be read."""
    if path == STDIN:
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise CommandError(f'Cannot read {path}: {e}')


def write_text(path, text, encoding):
    try:
        Path(path).write_text(text, encoding=encoding)
    except (OSError, UnicodeError) as e:
        raise CommandError(f'Cannot write {path}: {e}')
