# wikiforge/wikitext/links/canonicalizer.py
"""
Same-origin link canonicalization.

Absolute links into the wiki itself are turned into internal markup:

    [https://wiki.example.org/Foo_bar see foo]          →  [[Foo bar|see foo]]
    https://wiki.example.org/index.php?title=Foo&a=b    →  {{fullurl:Foo|a=b}}
    https://wiki.example.org/Category:X                 →  [[:Category:X]]

Links to any other origin are left byte for byte, except that punycode host
names are shown decoded everywhere.
"""

import logging
import re
from typing import Optional, Tuple
from urllib.parse import SplitResult, parse_qsl, unquote, urlsplit

from ..normalizer import normalize
from ..tables import FILE_NAMESPACES, LINKED_NAMESPACES
from .fragments import decode_fragment

logger = logging.getLogger(__name__)

METADATA_START = "<!--"
METADATA_END_MARKER = "END_MWS_METADATA -->"

DEFAULT_PORTS = {"http": 80, "https": 443}

HOST_RE = re.compile(r"(https?://)([^/?#\s\]|}:]+)")
BRACKETED_LINK_RE = re.compile(r"(?<!\[)\[([^\[\]\n]+)\](?!\])")
URL_RE = re.compile(r"https?://[^\]\s]+")
BARE_URL_RE = re.compile(r"(?<![\[=|])(https?://[^\s|\]}]+)")

FILE_TITLE_RE = re.compile(rf"^({'|'.join(FILE_NAMESPACES)}):", re.IGNORECASE)
LINKED_TITLE_RE = re.compile(rf"^({'|'.join(LINKED_NAMESPACES)}):", re.IGNORECASE)
PDF_PAGE_RE = re.compile(r"^page=\d+$")
SURROUNDING_QUOTES_RE = re.compile(r'^"|"$')


def decode_host(host: str) -> str:
    """
    Decode punycode labels (``xn--...``, any case) of a host name to Unicode.

    Labels are decoded with the raw punycode codec, so IDNA-2008 names such as
    ``xn--strae-oqa`` (straße) are accepted.
    """
    labels = []
    for label in host.split("."):
        if label.lower().startswith("xn--"):
            try:
                label = label[4:].lower().encode("ascii").decode("punycode")
            except UnicodeError:
                logger.warning(f"Could not decode IDN label '{label}' in '{host}'")
        labels.append(label)
    return ".".join(labels)


def _origin_of(parts: SplitResult) -> str:
    """``scheme://host[:port]``, host lower-cased and decoded, default port omitted."""
    host = decode_host(parts.hostname or "").lower()
    port = parts.port
    if port and port != DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"
    return f"{parts.scheme}://{host}"


def _normalize_origin(origin: str) -> str:
    try:
        return _origin_of(urlsplit(origin.rstrip("/")))
    except ValueError:
        return origin


def resolve_origin(endpoint: str) -> Tuple[str, str]:
    """
    Split an API endpoint into the wiki origin and the script directory.

    ``https://wiki.example.org/w/api.php`` gives
    ``("https://wiki.example.org", "/w/")``. A scheme-less endpoint is taken as
    https. A malformed endpoint gives ``("", "/")``.
    """
    trimmed = re.sub(r"/+$", "", endpoint.strip())
    if not re.match(r"^https?://", trimmed, re.IGNORECASE):
        trimmed = f"https://{trimmed}"

    try:
        parts = urlsplit(trimmed)
        if not parts.hostname:
            return "", "/"
        origin = _origin_of(parts)
    except ValueError:
        logger.warning(f"Malformed API endpoint '{endpoint}'")
        return "", "/"

    base_dir = parts.path or "/"
    if re.search(r"api\.php$", base_dir, re.IGNORECASE):
        base_dir = base_dir[: base_dir.rfind("/") + 1]
    elif not base_dir.endswith("/"):
        base_dir += "/"
    return origin, base_dir


def split_metadata(text: str) -> Tuple[str, str]:
    """Return ``(metadata_block, content)``; the block is empty when absent."""
    end = text.find(METADATA_END_MARKER)
    if end == -1 or not text.strip().startswith(METADATA_START):
        return "", text
    end += len(METADATA_END_MARKER)
    return text[:end], text[end:]


def _fullurl(parts: SplitResult) -> Optional[str]:
    """Return ``Title|k=v|...`` for a query URL, or None without a title."""
    params = parse_qsl(parts.query, keep_blank_values=True)
    titles = [value for key, value in params if key == "title"]
    if not titles or not titles[0]:
        return None

    others = [f"{key}={SURROUNDING_QUOTES_RE.sub('', value)}" for key, value in params if key != "title"]
    return "|".join([titles[0], *others])


def _page_title(parts: SplitResult, base_dir: str) -> Optional[str]:
    """Return the wiki page title a path-style URL points at, or None."""
    path = parts.path
    if base_dir != "/" and path.startswith(base_dir):
        path = path[len(base_dir) :]
    elif path.startswith("/"):
        path = path[1:]

    if "img_auth.php" in path:
        filename = path.split("/")[-1]
        if filename:
            path = f"File:{filename}"

    try:
        title = unquote(path, errors="strict").replace("_", " ")
    except UnicodeDecodeError as e:
        logger.warning(f"Could not decode page path '{parts.path}': {e}")
        return None

    if not title:
        return None

    fragment = parts.fragment
    if fragment:
        if FILE_TITLE_RE.match(title) and title.lower().endswith(".pdf") and PDF_PAGE_RE.match(fragment):
            title += f"|{fragment}"
        else:
            title += f"#{decode_fragment(fragment)}"

    if LINKED_TITLE_RE.match(title):
        title = f":{title}"
    return title


class LinkCanonicalizer:
    """Rewrites same-origin links of one wiki."""

    def __init__(self, origin: str, base_dir: str):
        self.origin = _normalize_origin(origin) if origin else ""
        self.base_dir = base_dir or "/"
        self.rewritten = 0

    def _same_origin(self, url: str) -> Optional[SplitResult]:
        if not self.origin:
            return None
        try:
            parts = urlsplit(url)
            if _origin_of(parts) != self.origin:
                return None
        except ValueError:
            return None
        return parts

    def _bracketed(self, match: re.Match) -> str:
        content = match.group(1)
        url_match = URL_RE.search(content)
        if not url_match:
            return match.group(0)

        parts = self._same_origin(url_match.group(0))
        if parts is None:
            return match.group(0)

        label = (content[: url_match.start()] + content[url_match.end() :]).strip()
        suffix = f" {label}" if label else ""

        if parts.query:
            params = _fullurl(parts)
            if params is None:
                return match.group(0)
            self.rewritten += 1
            return f"[{{{{fullurl:{params}}}}}{suffix}]"

        title = _page_title(parts, self.base_dir)
        if title is None:
            return match.group(0)
        self.rewritten += 1
        return f"[[{title}|{label}]]" if label else f"[[{title}]]"

    def _bare(self, match: re.Match) -> str:
        parts = self._same_origin(match.group(1))
        if parts is None:
            return match.group(0)

        if parts.query:
            params = _fullurl(parts)
            if params is None:
                return match.group(0)
            self.rewritten += 1
            return f"{{{{fullurl:{params}}}}}"

        title = _page_title(parts, self.base_dir)
        if title is None:
            return match.group(0)
        self.rewritten += 1
        return f"[[{title}]]"

    def __call__(self, content: str) -> str:
        content = HOST_RE.sub(lambda m: m.group(1) + decode_host(m.group(2)), content)
        content = BRACKETED_LINK_RE.sub(self._bracketed, content)
        return BARE_URL_RE.sub(self._bare, content)


def canonicalize_links(text: str, origin: str, base_dir: str, also_normalize: bool = False) -> str:
    """
    Rewrite absolute links into ``origin`` as internal wiki links.

    Args:
        text: Wikitext document
        origin: Wiki origin, e.g. ``https://wiki.example.org``
        base_dir: Script directory under the origin, e.g. ``/w/``
        also_normalize: Run the typographic normalizer on the result

    Returns:
        Rewritten wikitext; a leading metadata comment is kept untouched
    """
    metadata, content = split_metadata(text)

    canonicalizer = LinkCanonicalizer(origin, base_dir)
    content = canonicalizer(content)
    logger.debug(f"Rewrote {canonicalizer.rewritten} link(s) into {canonicalizer.origin or 'no origin'}")

    if also_normalize:
        content = normalize(content)

    return metadata + content
