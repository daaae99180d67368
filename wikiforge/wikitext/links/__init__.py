# wikiforge/wikitext/links/__init__.py

from .canonicalizer import canonicalize_links, resolve_origin
from .fragments import decode_fragment

__all__ = ["canonicalize_links", "decode_fragment", "resolve_origin"]
