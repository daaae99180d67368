# wikiforge/wikitext/normalizer/markup.py
"""
Markup stages of the normalizer.

Turns pseudo-markup and HTML formatting into wiki syntax, tidies tab-formatted
tables and formats section headings.
"""

import re

from ..passes import RewritePass, ShieldPass
from ..tables import HEADING_SYNONYMS, MINUS, NOTES_TEMPLATE


def _as_math(match):
    return f"<math>{match.group(1)}</math>"


def _as_teletype(match):
    return f"<tt>{match.group(1)}</tt>"


INLINE_MARKUP = [
    # Converted spans are shielded at once so no later rule reads inside them
    ShieldPass("tex in dollars", r"\$([^$\n]*\\[^$\n]*)\$", render=_as_math),
    ShieldPass("backtick code", r"`([^`\n]+)`", render=_as_teletype),
    RewritePass("double angle quotes", r"<<(\S.+\S)>>", r'"\1"'),
    RewritePass("minus in sub/sup", r"(su[pb]>)-(\d)", rf"\1{MINUS}\2"),
    RewritePass("superscript two", r"&sup2;", "²", re.IGNORECASE),
    RewritePass("superscript three", r"&sup3;", "³", re.IGNORECASE),
    RewritePass("html bold", r"<(b|strong)>(.*?)</(b|strong)>", r"'''\2'''", re.IGNORECASE),
    RewritePass("html italic", r"<(i|em)>(.*?)</(i|em)>", r"''\2''", re.IGNORECASE),
    RewritePass("html rule", r"^<hr ?/?>", "----", re.MULTILINE | re.IGNORECASE),
    RewritePass(
        "self-closing br/hr",
        r"<[/\\]?(hr|br)( [^/\\>]+?)? ?[/\\]?>",
        r"<\1\2 />",
        re.IGNORECASE,
    ),
    RewritePass("empty ref name", r"[\u00a0 \t]*<ref(?:\s+name=\"\")?(\s|>)", r"<ref\1", re.IGNORECASE),
    RewritePass(
        "references under notes heading",
        r"(\n== *[a-zа-я\s\.:]+ *==\n+)<references */>",
        rf"\1{{{{{NOTES_TEMPLATE}}}}}",
        re.IGNORECASE,
    ),
]

TAB_NORMALIZATION = [
    RewritePass("collapse space around tabs", r"[ \t\u00a0]*\t[ \t\u00a0]*", "\t"),
]


def _heading_synonym(pattern, canonical):
    return RewritePass(
        f"heading '{canonical}'",
        rf"^== {pattern} ==$",
        f"== {canonical} ==",
        re.MULTILINE | re.IGNORECASE,
    )


HEADINGS = [
    RewritePass("pad heading markers", r"^(=+)[ \t\f\v]*(.*?)[ \t\f\v]*=+$", r"\1 \2 \1", re.MULTILINE),
    RewritePass("blank line before heading", r"([^\r\n])(\r?\n==.*==\r?\n)", "\\1\n\\2"),
    *[_heading_synonym(pattern, canonical) for pattern, canonical in HEADING_SYNONYMS],
    RewritePass("heading trailing punctuation", r"^== (.+)[.:] ==$", r"== \1 ==", re.MULTILINE),
    RewritePass("bold heading", r"^== '''(?!.*'''.*''')(.+)''' ==$", r"== \1 ==", re.MULTILINE),
]
