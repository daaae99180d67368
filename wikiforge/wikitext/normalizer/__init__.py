# wikiforge/wikitext/normalizer/__init__.py
"""
Typographic normalizer for wikitext.

Freely typed or pasted wikitext goes in, house-style wikitext comes out. The
work is one long ordered list of rewrite passes; markup the author did not mean
to change is shielded first and restored verbatim at the end.
"""

import logging

from ..passes import apply_passes
from ..shielding import ShieldTable, warn_on_reserved
from .links import DATE_RANGE_LINKS, LINK_SIMPLIFICATION
from .markup import HEADINGS, INLINE_MARKUP, TAB_NORMALIZATION
from .measures import DECIMAL_SEPARATOR, TEMPERATURE
from .protection import (
    LINK_TARGETS,
    PROTECTED_REGIONS,
    RAW_TAGS,
    SECOND_PASS,
    TABLE_SYNTAX,
    TEMPLATES,
    UNSHIELD,
    WHITESPACE,
)
from .punctuation import (
    DASHES,
    ENTITIES,
    INITIALS,
    QUOTE_UNIFICATION,
    REDUCTIONS,
    SENTENCE_SPACING,
    YEAR_RANGES,
)
from .quotes import QUOTE_STYLING

logger = logging.getLogger(__name__)

NORMALIZER_PASSES = [
    *PROTECTED_REGIONS,  # Code, math, preformatted lines, URLs, compounds
    *TEMPLATES,  # Canonical template names, then hide every {{...}}
    *SECOND_PASS,  # Regions earlier rewrites may have exposed
    *WHITESPACE,  # Trailing spaces; adds the sentinel lines
    *DATE_RANGE_LINKS,  # [[1941]]—[[1945]], [[1990 год]]
    *LINK_SIMPLIFICATION,  # [[a|a]] → [[a]]
    *LINK_TARGETS,  # Only link labels are prose from here on
    *INLINE_MARKUP,  # <b>, `code`, $tex$, <hr>, <references />
    *RAW_TAGS,  # Whatever tags are left
    *TABLE_SYNTAX,  # {| |- and cell attributes
    *TAB_NORMALIZATION,
    *HEADINGS,
    *QUOTE_UNIFICATION,  # Every quote mark becomes " until QUOTE_STYLING
    *DASHES,
    *ENTITIES,  # Entities, symbols and units
    *YEAR_RANGES,
    *REDUCTIONS,  # Russian abbreviations, number + unit
    *INITIALS,  # List markers, initials, "г. Москва"
    *SENTENCE_SPACING,
    *TEMPERATURE,
    *DECIMAL_SEPARATOR,
    *QUOTE_STYLING,  # " → «», nested « → „
    *UNSHIELD,  # Must be last
    # Order matters - they run sequentially
]


def normalize(text: str) -> str:
    """
    Apply house typographic style to wikitext.

    Args:
        text: Raw wikitext

    Returns:
        Normalized wikitext
    """
    warn_on_reserved(text)
    shields = ShieldTable()
    result = apply_passes(text, NORMALIZER_PASSES, shields)
    logger.debug(f"Normalized {len(text)} chars with {len(NORMALIZER_PASSES)} passes")
    return result


__all__ = ["NORMALIZER_PASSES", "normalize"]
