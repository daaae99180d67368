# wikiforge/wikitext/links/fragments.py
"""
Decoding of MediaWiki section anchors.

MediaWiki writes anchor bytes as ``.XX`` instead of ``%XX`` and spaces as
underscores, so ``#.D0.9F.D1.80.D0.B8.D0.BC.D0.B5.D1.80`` is ``#Пример``.
"""

import logging
import re
from urllib.parse import unquote

logger = logging.getLogger(__name__)

# Private use code point, stands in for the dots of version-like numbers
DOT_PLACEHOLDER = "\ue000"

# 2.6.16 or 1.2, but not the tail of an encoded sequence such as .9617
DOTTED_NUMBER_RE = re.compile(r"(?<![0-9A-Fa-f.])\d+(?:\.\d+)+(?![0-9A-Fa-f])")
DOT_ENCODED_RE = re.compile(r"\.([0-9A-Fa-f]{2})")


def decode_fragment(fragment: str) -> str:
    """
    Decode a MediaWiki-encoded fragment to readable text.

    Returns the fragment unchanged when the bytes are not valid UTF-8.
    """
    if not fragment:
        return ""

    text = fragment.replace("_", " ")
    text = DOTTED_NUMBER_RE.sub(lambda m: m.group(0).replace(".", DOT_PLACEHOLDER), text)
    text = DOT_ENCODED_RE.sub(r"%\1", text)

    try:
        decoded = unquote(text, errors="strict")
    except UnicodeDecodeError as e:
        logger.warning(f"Could not decode fragment '{fragment}': {e}")
        return fragment

    return decoded.replace(DOT_PLACEHOLDER, ".")
