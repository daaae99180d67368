# wikiforge/wikitext/normalizer/links.py
"""
Wikilink stages of the normalizer.

- Joins linked year / century ranges with an em dash and binds the unit word
  ("год", "век", "гг.", "вв.") to the link
- Collapses [[Target|Target]] style links and pulls a bare suffix into the label
"""

from ..passes import RewritePass
from ..tables import EM_DASH, NBSP

_YEAR_LINK = r"\[\[[12]?\d{3}\]\]"
_CENTURY_LINK = r"\[\[[IVX]{1,5}\]\]"
_RANGE_DASH = r"[\u00a0 ]?(-{1,3}|–|—) ?"

DATE_RANGE_LINKS = [
    RewritePass(
        "linked year range",
        rf"(\(|\s)({_YEAR_LINK}){_RANGE_DASH}({_YEAR_LINK})(\W)",
        rf"\1\2{EM_DASH}\4\5",
    ),
    RewritePass("linked year unit", rf"({_YEAR_LINK}) ?(гг?\.)", rf"\1{NBSP}\2"),
    RewritePass(
        "linked century range",
        rf"(\(|\s)({_CENTURY_LINK}){_RANGE_DASH}({_CENTURY_LINK})(\W)",
        rf"\1\2{EM_DASH}\4\5",
    ),
    RewritePass("linked century unit", rf"({_CENTURY_LINK}) ?(вв?\.)", rf"\1{NBSP}\2"),
    # [[1990]] год → [[1990 год]]
    RewritePass("year word into link", r"\[\[(\d+)\]\]\sгод", rf"[[\1{NBSP}год]]"),
    RewritePass(
        "piped year word into link",
        r"\[\[(\d+)\sгод\|\1\]\]\sгод",
        rf"[[\1{NBSP}год]]",
    ),
    RewritePass(
        "year word suffix out of link",
        r"\[\[(\d+)\sгод\|\1\sгод([а-я]{0,3})\]\]",
        rf"[[\1{NBSP}год]]\2",
    ),
    RewritePass(
        "year in context into link",
        r"\[\[((\d+)(?: (?:год )?в [\wa-яёА-ЯЁ ]+\|\2)?)\]\][\u00a0 ](год[а-яё]*)",
        rf"[[\1{NBSP}\3]]",
    ),
    RewritePass("century word into link", r"\[\[([XVI]+)\]\]\sвек", rf"[[\1{NBSP}век]]"),
    RewritePass(
        "piped century word into link",
        r"\[\[([XVI]+)\sвек\|\1\]\]\sвек",
        rf"[[\1{NBSP}век]]",
    ),
    RewritePass(
        "century word suffix out of link",
        r"\[\[([XVI]+)\sвек\|\1\sвек([а-я]{0,3})\]\]",
        rf"[[\1{NBSP}век]]\2",
    ),
    RewritePass(
        "century alias into link",
        r"\[\[(([XVI]+) век\|\2)\]\][\u00a0 ]век",
        rf"[[\2{NBSP}век]]",
    ),
]

LINK_SIMPLIFICATION = [
    RewritePass(
        "invisible chars in link target",
        r"(\[\[[^|\[\]]*)[\u00ad\u200e\u200f]+([^\[\]]*\]\])",
        r"\1\2",
    ),
    # [[word|word]]s → [[word]]s
    RewritePass(
        "duplicate label",
        r"\[\[ *([^|\[\]]+) *\| *(\1)([a-zа-яё]*) *\]\]",
        r"[[\2]]\3",
    ),
    # [[word|wo]]rd → [[word]]
    RewritePass(
        "label repeated after link",
        r"\[\[ *([^|\[\]]+)([^|\[\]()]+) *\| *\1 *\]\]\2",
        r"[[\1\2]]",
    ),
    # [[target|label]]s → [[target|labels]]
    RewritePass(
        "absorb suffix into label",
        r"\[\[ *(?!Файл:|Категория:|File:|Image:|Category:)"
        r"([a-zA-Zа-яёА-ЯЁ\u00a0-\u00ff %!\"$&'()*,\-—./0-9:;=?\\@^_`’~]+)"
        r" *\| *([^|\[\]]+) *\]\]([a-zа-яё]+)",
        r"[[\1|\2\3]]",
    ),
]
