# wikiforge/wikitext/normalizer/quotes.py
"""
Quote styling.

Straight double quotes that open at a word boundary become guillemets. A
guillemet pair nested inside another one is then demoted to „low-high“ quotes,
repeating until no «...« remains:

    «a «b» c»  →  «a „b“ c»
"""

from ..passes import FixedPointPass, RewritePass

QUOTE_STYLING = [
    RewritePass("guillemets", r'(^|\W)"([^"]+)"', r"\1«\2»"),
    FixedPointPass(
        "nested quotes",
        r"«([^»]*)«([^»]*)»",
        r"«\1„\2“",
        guard=r"«[^»]*«",
    ),
]
