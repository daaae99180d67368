# wikiforge/wikitext/normalizer/punctuation.py
"""
Punctuation and spacing stages of the normalizer.

Dashes, entities, units, abbreviations and the spaces around them. Quote marks
are folded to a plain double quote here and styled again at the very end.
"""

import re

from ..passes import RewritePass
from ..shielding import SHIELD_CLOSE, SHIELD_OPEN
from ..tables import (
    ABBREVIATIONS,
    AREA_PREFIXES,
    AREA_UNITS,
    EM_DASH,
    MINUS,
    NAMED_ENTITIES,
    NARROW_NBSP,
    NBSP,
    NUMBER_UNITS,
    QUOTE_ENTITIES,
    SYMBOL_SEQUENCES,
)

QUOTE_UNIFICATION = [
    RewritePass("fold quote marks", r"«|»|“|”|„", '"'),
]

DASHES = [
    RewritePass("en dash to hyphen", r"–", "-"),
    RewritePass("dash entities", r"&(#151|[nm]dash);", EM_DASH),
    RewritePass("hyphen to minus", r"(\s)-(\d)", rf"\1{MINUS}\2"),
    RewritePass("double hyphen between digits", r"(\d)--(\d)", rf"\1{EM_DASH}\2"),
    RewritePass("spaced hyphen", r"\s+-{1,3}\s+", f" {EM_DASH} "),
]


def _hex_entity(match):
    code_point = int(match.group(1), 16)
    # C0 controls clash with shield delimiters; surrogates cannot be encoded
    if (code_point < 0x20 and code_point not in (0x09, 0x0A, 0x0D)) or 0xD800 <= code_point <= 0xDFFF:
        return match.group(0)
    return chr(code_point)


def _named_entity(match):
    return NAMED_ENTITIES[match.group(1).lower()]


_AREA_UNIT = "|".join(AREA_UNITS)

ENTITIES = [
    RewritePass("hex entities", r"&#x([0-9a-f]{1,4});", _hex_entity, re.IGNORECASE),
    RewritePass(
        "named entities",
        rf"&({'|'.join(NAMED_ENTITIES)});",
        _named_entity,
        re.IGNORECASE,
    ),
    *[
        RewritePass(f"symbol {replacement!r}", pattern, replacement, re.IGNORECASE)
        for pattern, replacement in SYMBOL_SEQUENCES
    ],
    RewritePass("plus-minus", r"(^|[^+])\+-(?!\+|-)", r"\1±"),
    *[
        RewritePass(
            f"{prefix}. units",
            rf"(\s){prefix}\.\s*({_AREA_UNIT})(\s)",
            rf"{NBSP}\2{power}\3",
        )
        for prefix, power in AREA_PREFIXES.items()
    ],
    RewritePass(
        "dimensions",
        r"((?:^|[\s\"])\d+(?:[\.,]\d+)?)\s*[xх]\s*(\d+(?:[\.,]\d+)?)\s*([мm]{1,2}(?:[\s\"\.,;?!]|$))",
        rf"\1×\2{NBSP}\3",
    ),
    RewritePass("quote entities", rf"&({'|'.join(QUOTE_ENTITIES)});", '"'),
    RewritePass("apostrophe", r"([\wа-яА-ЯёЁ])'([\wа-яА-ЯёЁ])", r"\1’\2"),
    RewritePass("double numero", r"№№", "№"),
]

YEAR_RANGES = [
    RewritePass(
        "year range",
        r"(\(|\s)([12]?\d{3})[\u00a0 ]?(-{1,3}|—) ?([12]?\d{3})"
        r"(?![\wА-ЯЁа-яё]|-[^ех]|-[ех][\wА-ЯЁа-яё])",
        rf"\1\2{EM_DASH}\4",
    ),
    RewritePass("year unit", r"([12]?\d{3}) ?(гг?\.)", rf"\1{NBSP}\2"),
    RewritePass(
        "century range",
        r"(\(|\s)([IVX]{1,5})[\u00a0 ]?(-{1,3}|—) ?([IVX]{1,5})(?![\w-])",
        rf"\1\2{EM_DASH}\4",
    ),
    RewritePass("century unit", r"([IVX]{1,5}) ?(вв?\.)", rf"\1{NBSP}\2"),
]

REDUCTIONS = [
    *[RewritePass(f"abbreviation {pattern}", pattern, replacement) for pattern, replacement in ABBREVIATIONS],
    RewritePass(
        "number and unit",
        rf"(\d)[\u00a0 ]?({NUMBER_UNITS})\.?(?=[,;.]| \"?[а-яё-])",
        rf"\1{NBSP}\2",
    ),
    RewritePass("thousands", r"(\d)[\u00a0 ](тыс)([^\.А-Яа-яЁё])", rf"\1{NBSP}\2.\3"),
    RewritePass("isbn label", r"ISBN:\s?(?=[\d\-]{8,17})", "ISBN ", count=1),
]

INITIALS = [
    RewritePass("list marker space", r"^([#*:]+)[ \t\f\v]*(?!\{\|)([^ \t\f\v*#:;])", r"\1 \2", re.MULTILINE),
    RewritePass(
        "initials before surname",
        r"([А-ЯЁ]\.) ?([А-ЯЁ]\.) ?([А-ЯЁ][а-яё])",
        rf"\1{NARROW_NBSP}\2{NARROW_NBSP}\3",
    ),
    RewritePass("chained initials", r"([А-ЯЁ]\.)([А-ЯЁ]\.)", rf"\1{NARROW_NBSP}\2"),
    RewritePass("city abbreviation", r"(г\.) ?([А-Я][а-я])", rf"\1{NARROW_NBSP}\2"),
]

SENTENCE_SPACING = [
    RewritePass(
        "space after sentence",
        rf"([а-яё]\"?\)?[\.\?!:])((?:{SHIELD_OPEN}\d+{SHIELD_CLOSE}\|)?[A-ZА-ЯЁ])",
        r"\1 \2",
    ),
    RewritePass("space after comma", r"([)\"a-zа-яё\]])\s*([,:])([\[(\"a-zа-яё])", r"\1\2 \3"),
    RewritePass("space before comma", r"([)\"a-zа-яё\]])\s([,;])\s([\[(\"a-zа-яё])", r"\1\2 \3"),
    RewritePass(
        "percent",
        r"([^%/\wА-Яа-яЁё]\d+?(?:[\.,]\d+?)?) ?([%‰])(?!-[А-Яа-яЁё])",
        rf"\1{NBSP}\2",
    ),
    RewritePass("percent with suffix", r"(\d) ([%‰])(?=-[А-Яа-яЁё])", r"\1\2"),
    RewritePass("numero and section", r"([№§])(\s*)(\d)", rf"\1{NBSP}\3"),
    RewritePass("space after paren", r"\( +", "("),
    RewritePass("space before paren", r" +\)", ")"),
]
