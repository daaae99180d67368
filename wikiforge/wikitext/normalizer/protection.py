# wikiforge/wikitext/normalizer/protection.py
"""
Shielding stages of the normalizer.

Everything that must come out of the pipeline byte-for-byte (code, math,
preformatted lines, URLs, templates, link targets, raw tags, table syntax) is
hidden here before the prose rules run.
"""

import re

from ..passes import FunctionPass, RewritePass, ShieldPass, shield_tag
from ..tables import NOTES_TEMPLATE, TEMPLATE_NAMESPACES

_TEMPLATE_PREFIX = "|".join(TEMPLATE_NAMESPACES)

PROTECTED_REGIONS = [
    shield_tag("html"),
    shield_tag("m"),
    ShieldPass("shield leading-space lines", r"^ .*$", re.MULTILINE | re.IGNORECASE),
    ShieldPass(
        "shield urls",
        r"(http|https|ftp|tftp|news|nntp|telnet|irc|gopher)://[^ \n\r\u00a0]* ?",
        re.IGNORECASE,
    ),
    shield_tag("nowiki"),
    shield_tag("pre"),
    shield_tag("source"),
    shield_tag("syntaxhighlight"),
    shield_tag(r"code[\-\w]*"),
    shield_tag("tt"),
    shield_tag("math"),
    shield_tag("timeline"),
    ShieldPass("shield hyphenated compounds", r"\w+-\w+"),
]

TEMPLATES = [
    RewritePass("template bullets", r"( |\n|\r)+\{\{(·|•|\*)\}\}", r"{{\2}}"),
    RewritePass(
        "strip template namespace",
        rf"\{{\{{\s*({_TEMPLATE_PREFIX}):([\s\S]+?)\}}\}}",
        r"{{\2}}",
    ),
    RewritePass(
        "localize reflist",
        r"(\{\{\s*)reflist(\s*[|}])",
        rf"\1{NOTES_TEMPLATE}\2",
        re.IGNORECASE,
    ),
    ShieldPass("shield templates", r"\{\{[\s\S]+?\}\}"),
]

SECOND_PASS = [
    ShieldPass("shield leading-space lines again", r"^ .*", re.MULTILINE),
    ShieldPass(
        "shield raw links",
        r"(https?|ftp|news|nntp|telnet|irc|gopher)://[^\s\[\]<>\"]+ ?",
        re.IGNORECASE,
    ),
    ShieldPass("shield redirect", r"^#(redirect|перенапр(авление)?)", re.IGNORECASE),
    shield_tag("gallery"),
]


def _add_sentinel_lines(text, shields):
    return f"\n{text}\n"


def _trim_sentinel_lines(text, shields):
    return text[1:-1]


WHITESPACE = [
    RewritePass("strip trailing spaces", r" +(\n|\r)", r"\1"),
    # Gives line-anchored rules a line break to lean on at both ends
    FunctionPass("add sentinel lines", _add_sentinel_lines),
]

LINK_TARGETS = [
    ShieldPass("shield link targets", r"\[\[[^\]|]+"),
]

RAW_TAGS = [
    ShieldPass(
        "shield tags with content",
        r"<([a-z][a-z0-9]*)(?: [^>]+)?>[\s\S]*?</\1>",
        re.IGNORECASE,
    ),
    ShieldPass("shield bare tags", r"<[a-z][^>]*?>", re.IGNORECASE),
]

TABLE_SYNTAX = [
    ShieldPass("shield table rows", r"^(\{\||\|-).*", re.MULTILINE),
    ShieldPass(
        "shield cell styles",
        r"(^\||^!|!!|\|\|) *[a-z]+=[^|]+\|(?!\|)",
        re.MULTILINE | re.IGNORECASE,
    ),
    ShieldPass("shield formatted cells", r"\| +"),
]

UNSHIELD = [
    FunctionPass("restore shielded text", lambda text, shields: shields.restore_all(text)),
    FunctionPass("trim sentinel lines", _trim_sentinel_lines),
]
