# wikiforge/wikitext/converter/table_blocks.py
"""
Table handling for the HTML converter.

Tables are lifted out of the document before any other conversion runs, tidied
up, re-indented and spliced back in unchanged at the very end, so nothing in a
cell is ever read as a list, heading, link or bold text.
"""

import logging
import re
from typing import List

from bs4 import BeautifulSoup

from ..passes import MAX_FIXED_POINT_ITERATIONS
from ..tables import VOID_ELEMENTS

logger = logging.getLogger(__name__)

TABLE_OPEN = "\x04"
TABLE_CLOSE = "\x05"

TABLE_RE = re.compile(r"<table\b[\s\S]*?</table>", re.IGNORECASE)
ZERO_WIDTH_RE = re.compile(r"^\s*width\s*:\s*0px\s*$", re.IGNORECASE)
TAG_SPLIT_RE = re.compile(r"(<[^>]+>)")
TAG_NAME_RE = re.compile(r"^</?([a-zA-Z0-9]+)")

CELL_TAGS = ("td", "th")
WRAPPER_TAGS = ["span", "div"]
INDENT = "  "


class TableStash:
    """Extracted table blocks, put back by index once conversion is done."""

    def __init__(self):
        self.blocks: List[str] = []

    def token(self, index: int) -> str:
        return f"{TABLE_OPEN}{index}{TABLE_CLOSE}"

    def stash(self, block: str) -> str:
        self.blocks.append(block)
        return self.token(len(self.blocks) - 1)

    def restore(self, text: str) -> str:
        for index, block in enumerate(self.blocks):
            text = text.replace(self.token(index), block)
        return text


def _unwrap_empty_wrappers(soup: BeautifulSoup) -> None:
    """Drop attribute-less <span>/<div> wrappers until none are left."""
    for _ in range(MAX_FIXED_POINT_ITERATIONS):
        wrappers = [tag for tag in soup.find_all(WRAPPER_TAGS) if not tag.attrs]
        if not wrappers:
            break
        for tag in wrappers:
            tag.unwrap()


def _clean_style(style: str) -> str:
    """Remove ``width:0px`` declarations; returns "" when nothing is left."""
    had_semicolon = style.strip().endswith(";")
    declarations = [declaration.strip() for declaration in style.split(";")]
    declarations = [d for d in declarations if d and not ZERO_WIDTH_RE.match(d)]

    if not declarations:
        return ""

    style = "; ".join(declarations)
    if had_semicolon:
        style += ";"
    return style


def clean_table(html: str) -> str:
    """
    Strip what wikitext tables cannot use.

    - <colgroup> blocks are dropped
    - <tbody> tags are dropped, their rows kept
    - class attributes are removed everywhere
    - attribute-less <span>/<div> wrappers are unwrapped
    - width:0px is removed from the table style
    """
    soup = BeautifulSoup(html, "html.parser")

    for colgroup in soup.find_all("colgroup"):
        colgroup.decompose()

    for tbody in soup.find_all("tbody"):
        tbody.unwrap()

    for tag in soup.find_all(class_=True):
        del tag["class"]

    _unwrap_empty_wrappers(soup)

    table = soup.find("table")
    if table is not None and table.has_attr("style"):
        style = _clean_style(table["style"])
        if style:
            table["style"] = style
        else:
            del table["style"]

    return str(soup)


def _tag_name(tag: str) -> str:
    match = TAG_NAME_RE.match(tag)
    return match.group(1).lower() if match else ""


def pretty_print_table(html: str) -> str:
    """
    Put one tag per line, indented by nesting depth.

    Inside a <td>/<th> nothing is split or indented: text, inline tags and the
    closing cell tag stay on the cell's own line.
    """
    html = re.sub(r"[\r\n]", " ", html)
    html = re.sub(r"\s{2,}", " ", html).strip()

    lines: List[str] = []
    stack: List[str] = []

    for part in TAG_SPLIT_RE.split(html):
        if not part:
            continue

        in_cell = any(tag in stack for tag in CELL_TAGS) and bool(lines)

        if not part.strip():
            if in_cell:
                lines[-1] += " "
            continue

        if part.startswith("</"):
            name = _tag_name(part)
            if name in stack:
                while stack.pop() != name:
                    pass
            if in_cell:
                lines[-1] += part
            else:
                lines.append(INDENT * len(stack) + part)
        elif part.startswith("<"):
            if in_cell:
                lines[-1] += part
            else:
                lines.append(INDENT * len(stack) + part)
            name = _tag_name(part)
            if name and not part.endswith("/>") and name not in VOID_ELEMENTS:
                stack.append(name)
        elif in_cell:
            lines[-1] += part
        else:
            lines.append(INDENT * len(stack) + part.strip())

    return "\n".join(lines)


def extract_tables(text: str, stash: TableStash) -> str:
    """Replace every <table> block with a placeholder, keeping its cleaned form."""

    def hide_table(match):
        return stash.stash(pretty_print_table(clean_table(match.group(0))))

    text = TABLE_RE.sub(hide_table, text)
    if stash.blocks:
        logger.debug(f"Extracted {len(stash.blocks)} table block(s)")
    return text


def restore_tables(text: str, stash: TableStash) -> str:
    return stash.restore(text)
