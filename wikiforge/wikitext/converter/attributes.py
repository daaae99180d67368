# wikiforge/wikitext/converter/attributes.py

import re

from ..tables import ALLOWED_ATTRIBUTES

ATTRIBUTE_RE = re.compile(r"\s*(\w+)(\s*=\s*(('|\")(.*?)\4|(\w+)))?\s*")


def sanitize_attributes(attributes: str) -> str:
    """
    Keep only allow-listed attributes that carry a value.

    Values are re-emitted double-quoted; unquoted values are accepted.
    """
    sanitized = ""
    for match in ATTRIBUTE_RE.finditer(attributes or ""):
        name = match.group(1).lower()
        value = match.group(5) or match.group(6) or ""
        if name not in ALLOWED_ATTRIBUTES or not value:
            continue
        sanitized += f' {name}="{value}"'
    return sanitized


def remove_tag(html: str, tag: str, attribute_re=None, replace_open="", replace_close="") -> str:
    """
    Remove ``tag`` (a regex alternation such as ``span|font``) keeping content.

    Without ``attribute_re`` only attribute-less opening tags are removed;
    otherwise the tags whose attribute string matches it. A closing tag is
    removed only when the opening tag it pairs with was removed.
    """
    tag_re = re.compile(rf"(<(/?)({tag})\b([^>]*)>)", re.IGNORECASE)
    removed = []

    def replace(match):
        is_close = match.group(2) or ""
        attributes = match.group(4) or ""

        if not is_close:
            if attribute_re is None:
                remove = attributes.strip() == ""
            else:
                remove = bool(attribute_re.search(attributes))
            removed.append(remove)
            return replace_open if remove else match.group(1)

        if removed and removed.pop():
            return replace_close
        return match.group(1)

    return tag_re.sub(replace, html)
