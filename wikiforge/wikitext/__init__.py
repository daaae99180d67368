# wikiforge/wikitext/__init__.py

from .converter import convert_html
from .links import canonicalize_links, decode_fragment, resolve_origin
from .normalizer import normalize

__all__ = [
    "canonicalize_links",
    "convert_html",
    "decode_fragment",
    "normalize",
    "resolve_origin",
]
