# wikiforge/__init__.py
"""
Wikitext tools: typographic normalization, HTML to wikitext conversion and
same-origin link canonicalization.
"""

from .wikitext import (
    canonicalize_links,
    convert_html,
    decode_fragment,
    normalize,
    resolve_origin,
)

__version__ = "0.1.0"

__all__ = [
    "canonicalize_links",
    "convert_html",
    "decode_fragment",
    "normalize",
    "resolve_origin",
]
