# wikiforge/wikitext/normalizer/measures.py
"""
Temperatures and decimal separators.

    25 C, 25°C, 25 *C, 25^F  →  25 °C / 25 °F (non-breaking space)
    3.5 %                    →  3,5 %
"""

import re

from ..passes import RewritePass
from ..shielding import SHIELD_OPEN
from ..tables import NBSP


def _temperature(scale):
    return RewritePass(
        f"temperature °{scale}",
        r"([\s\d=≈≠≤≥<>—(\"'|])([+±−-]?\d+?(?:[.,]\d+?)?)(([ °^*]| [°^*])" + scale + r")"
        rf"(?=[\s\"').,;!?|{SHIELD_OPEN}])",
        rf"\1\2{NBSP}°{scale}",
        re.MULTILINE,
    )


TEMPERATURE = [
    _temperature("C"),
    _temperature("F"),
]

DECIMAL_SEPARATOR = [
    RewritePass(
        "decimal comma before unit",
        r"(\s\d+)\.(\d+[\u00a0 ]*[%‰°×])",
        r"\1,\2",
        re.IGNORECASE,
    ),
]
