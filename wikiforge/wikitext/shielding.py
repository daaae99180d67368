# wikiforge/wikitext/shielding.py
"""
Content shielding for the wikitext rewriting pipelines.

A shield pass swaps every match of a pattern for a numbered placeholder so the
passes that follow cannot touch it. At the end of a run the table is drained in
reverse insertion order, which unwinds placeholders that were captured inside
later shielded regions.

Placeholders look like ``\\x01<n>\\x02``. Both delimiters are control characters
that do not occur in real wikitext; the input is not checked for them up front,
only a warning is logged when they are found.
"""

import logging
import re
from typing import Callable, List, Optional, Union

logger = logging.getLogger(__name__)

SHIELD_OPEN = "\x01"
SHIELD_CLOSE = "\x02"

# Matches any placeholder produced by ShieldTable
PLACEHOLDER_RE = re.compile(f"{SHIELD_OPEN}\\d+{SHIELD_CLOSE}")

RESERVED_CODE_POINTS = frozenset({SHIELD_OPEN, SHIELD_CLOSE})


def contains_placeholder(text: str) -> bool:
    """Return True if a shield placeholder is present in ``text``."""
    return PLACEHOLDER_RE.search(text) is not None


class ShieldTable:
    """
    Ordered placeholder → original text table for one pipeline run.

    Usage:
        shields = ShieldTable()
        text = shields.shield(text, r"<nowiki>.*?</nowiki>")
        ...
        text = shields.restore_all(text)
    """

    def __init__(self):
        self._entries: List[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    def token(self, index: int) -> str:
        """Placeholder for the 1-based entry ``index``."""
        return f"{SHIELD_OPEN}{index}{SHIELD_CLOSE}"

    def hide(self, original: str) -> str:
        """Store ``original`` and return the placeholder that stands in for it."""
        self._entries.append(original)
        return self.token(len(self._entries))

    def shield(
        self,
        text: str,
        pattern: Union[str, re.Pattern],
        flags: int = 0,
        render: Optional[Callable[[re.Match], str]] = None,
    ) -> str:
        """
        Replace every match of ``pattern`` with a fresh placeholder.

        Args:
            text: Document to process
            pattern: Regex (string or compiled) to shield
            flags: Regex flags, only used when ``pattern`` is a string
            render: Optional callable producing the text to store for a match;
                the matched text itself is stored when omitted

        Returns:
            Document with matches replaced by placeholders
        """
        regex = re.compile(pattern, flags) if isinstance(pattern, str) else pattern

        def replace(match):
            stored = render(match) if render else match.group(0)
            return self.hide(stored)

        return regex.sub(replace, text)

    def restore_all(self, text: str) -> str:
        """
        Put every shielded string back, last hidden first.

        Substitution is literal so restored text is never re-read as a pattern.
        The table is empty afterwards.
        """
        while self._entries:
            index = len(self._entries)
            original = self._entries.pop()
            text = text.replace(self.token(index), original)

        if contains_placeholder(text):
            logger.error("Shield placeholder left in output after restore")

        return text


def warn_on_reserved(text: str) -> None:
    """Log a warning if ``text`` already contains placeholder code points."""
    found = RESERVED_CODE_POINTS.intersection(text)
    if found:
        logger.warning(
            f"Input contains reserved placeholder characters "
            f"{sorted(hex(ord(c)) for c in found)}; output may be corrupted"
        )
