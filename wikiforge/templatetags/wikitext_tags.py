# wikiforge/templatetags/wikitext_tags.py

from django import template

from wikiforge.wikitext import canonicalize_links, convert_html, normalize, resolve_origin
from wikiforge.wikitext.config import get_wikitext_config

register = template.Library()


@register.filter(name="wikify")
def wikify_filter(value):
    return normalize(str(value))


@register.filter(name="html2wiki")
def html2wiki_filter(value):
    """Convert an HTML fragment to wikitext"""
    return convert_html(str(value))


@register.filter(name="canonical_links")
def canonical_links_filter(value):
    """Rewrite links into the configured wiki as internal links"""
    config = get_wikitext_config()
    origin, base_dir = resolve_origin(config["API_URL"]) if config["API_URL"] else ("", "/")
    return canonicalize_links(
        str(value),
        origin,
        base_dir,
        also_normalize=config["FIX_TYPOGRAPHY"],
    )
