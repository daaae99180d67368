# wikiforge/wikitext/converter/__init__.py
"""
HTML to wikitext conversion.

Best-effort conversion of a pasted HTML fragment. Tables are taken out first
and come back almost verbatim; everything else is rewritten by an ordered list
of passes sharing one TableStash.

Internal sentinels, never present in the result:

    \\x00       paragraph break
    \\x01 \\x02  escaped < and > inside verbatim blocks
    \\x03       escaped space inside preformatted blocks
    \\x04n\\x05  extracted table n
"""

import logging
import re

from ..passes import FunctionPass, RewritePass, apply_passes
from ..tables import HTML_ENTITIES, NBSP
from .attributes import remove_tag, sanitize_attributes
from .table_blocks import TableStash, extract_tables, restore_tables

logger = logging.getLogger(__name__)

BREAK = "\x00"
ESCAPED_LT = "\x01"
ESCAPED_GT = "\x02"
ESCAPED_SPACE = "\x03"

# Whitespace, <br> or a paragraph break
GAP = rf"(?:\s|<br\b[^>]*>|{BREAK})"

PREFORMATTED_RE = re.compile(r"^(syntaxhighlight|source|pre)$", re.IGNORECASE)


def _escape_verbatim(match: re.Match) -> str:
    content = match.group(3).replace("<", ESCAPED_LT).replace(">", ESCAPED_GT)
    if PREFORMATTED_RE.match(match.group(2)):
        content = re.sub(f"[ {NBSP}]", ESCAPED_SPACE, content)
    return match.group(1) + content + match.group(4)


def _sanitize_tag(match: re.Match) -> str:
    tag, attributes, slash = match.group(1), match.group(2), match.group(3)
    return f"<{tag}{sanitize_attributes(attributes)}{slash}>"


def _heading_pass(level: int) -> RewritePass:
    marks = "=" * level
    return RewritePass(
        f"<h{level}>",
        rf"{GAP}*(?:^|\n|<br\b[^>]*>|{BREAK}){GAP}*<h{level}\b[^>]*>([\s\S]*?)</h{level}>{GAP}*",
        f"{BREAK}{BREAK}{marks} \\1 {marks}{BREAK}{BREAK}",
        re.IGNORECASE,
    )


def _convert_lists(text: str, stash) -> str:
    """Turn list tags into wikitext markers; ``prefix`` tracks the nesting."""
    prefix = ""

    def replace(match):
        nonlocal prefix
        tag = match.group(1).lower()

        if tag == "ol":
            prefix += "#"
        elif tag == "ul":
            prefix += "*"
        elif tag == "dl":
            prefix += ":"
        elif tag in ("/ol", "/ul", "/dl"):
            prefix = prefix[:-1]
            return BREAK + BREAK
        elif tag in ("li", "dd"):
            return f"{BREAK}{prefix} "
        elif tag == "dt":
            return f"{BREAK}{re.sub(':$', ';', prefix)} "
        else:
            return ""
        return BREAK

    return re.sub(
        rf"[\s{BREAK}]*<(/?(?:ol|ul|li|dl|dd|dt))\b[^>]*>[\s{BREAK}]*",
        replace,
        text,
        flags=re.IGNORECASE,
    )


def _convert_anchor(match: re.Match) -> str:
    href = match.group(1) or match.group(2) or match.group(3)
    content = match.group(4)
    if not href:
        return content

    label = re.sub(r"<[^>]+>", "", content).strip()
    if label and label != href:
        return f"[{href} {label}]"
    return f"[{href}]"


def _decode_entities(text: str, stash) -> str:
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


CONVERTER_PASSES = [
    FunctionPass("extract tables", extract_tables),
    RewritePass(
        "escape verbatim blocks",
        r"(<(syntaxhighlight|source|pre|nowiki)\b[^/>]*>)([\s\S]*?)(</\2>)",
        _escape_verbatim,
        re.IGNORECASE,
    ),
    RewritePass("drop style and script", r"<(style|script)\b[^>]*>[\s\S]*?</\1>", "", re.IGNORECASE),
    RewritePass("drop comments", r"<!--[\s\S]*?-->", ""),
    RewritePass(
        "sanitize attributes",
        r"<(span|div|p|font)\s+([^>]*?)\s*(/?)>",
        _sanitize_tag,
        re.IGNORECASE,
    ),
    FunctionPass("unwrap span and font", lambda text, stash: remove_tag(text, "span|font")),
    FunctionPass(
        "unwrap paragraphs",
        lambda text, stash: remove_tag(text, "p", None, BREAK * 2, BREAK * 2),
    ),
    RewritePass(
        "escape bare ampersand",
        r"&(?!(amp;|lt;|gt;|nbsp;|quot;|apos;|#\d+;|#x[0-9a-fA-F]+;))",
        "&amp;",
    ),
    RewritePass("<hr>", rf"{GAP}*<hr\b[^>]*>{GAP}*", f"{BREAK}{BREAK}----{BREAK}{BREAK}", re.IGNORECASE),
    RewritePass("italic", r"</?(i|em|dfn|var|cite)\b[^>]*?>", "''", re.IGNORECASE),
    RewritePass("bold", r"</?(b|strong)\b[^>]*?>", "'''", re.IGNORECASE),
    *[_heading_pass(level) for level in range(6, 0, -1)],
    FunctionPass("lists", _convert_lists),
    RewritePass("dangling list markers", rf"[\n{BREAK}]+[#*:;]+\s(?=[\n{BREAK}])", ""),
    RewritePass(
        "anchors",
        r"<a\s+href=(?:\"([^\"]*)\"|'([^']*)'|([^\s>]+))[^>]*>([\s\S]*?)</a>",
        _convert_anchor,
        re.IGNORECASE,
    ),
    RewritePass("<br>", r"<br\s*/?>[\n ]*", BREAK, re.IGNORECASE),
    RewritePass("strip tags", r"<[^>]*>", ""),
    RewritePass("breaks before newline", f"{BREAK}+\n", "\n\n"),
    RewritePass("breaks after newline", f"\n{BREAK}+", "\n\n"),
    RewritePass("break runs", f"\n*{BREAK}({BREAK}|\n)+", "\n\n"),
    RewritePass("lone break", BREAK, "\n"),
    FunctionPass(
        "unescape verbatim blocks",
        lambda text, stash: text.replace(ESCAPED_LT, "<").replace(ESCAPED_GT, ">").replace(ESCAPED_SPACE, NBSP),
    ),
    FunctionPass("decode entities", _decode_entities),
    FunctionPass("restore tables", restore_tables),
    FunctionPass("trim", lambda text, stash: text.strip()),
    # Order matters - they run sequentially
]


def convert_html(html: str) -> str:
    """
    Convert an HTML fragment to wikitext.

    Args:
        html: HTML fragment, e.g. clipboard content

    Returns:
        Wikitext
    """
    stash = TableStash()
    result = apply_passes(html, CONVERTER_PASSES, stash)
    logger.debug(f"Converted {len(html)} chars of HTML, {len(stash.blocks)} table(s) kept")
    return result


__all__ = ["CONVERTER_PASSES", "convert_html"]
