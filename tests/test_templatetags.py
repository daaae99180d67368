"""Tests for the wikitext template filters."""

from django.template import Context, Template
from django.test import override_settings

from wikiforge.templatetags.wikitext_tags import canonical_links_filter


def render(source, **context):
    return Template("{% load wikitext_tags %}" + source).render(Context(context))


def test_wikify_filter():
    assert render("{{ value|wikify }}", value="Москва - столица") == "Москва — столица"


def test_html2wiki_filter():
    """Test output is autoescaped like any other string."""
    assert render("{{ value|html2wiki }}", value="<b>Hi</b>") == "&#x27;&#x27;&#x27;Hi&#x27;&#x27;&#x27;"


def test_html2wiki_filter_safe():
    assert render("{{ value|html2wiki|safe }}", value="<b>Hi</b>") == "'''Hi'''"


@override_settings(WIKIFORGE={"API_URL": "https://wiki.example.org/w/api.php", "FIX_TYPOGRAPHY": False})
def test_canonical_links_filter():
    result = canonical_links_filter('"x" https://wiki.example.org/w/index.php?title=Foo&oldid=5')
    assert result == '"x" {{fullurl:Foo|oldid=5}}'


@override_settings(WIKIFORGE={"API_URL": "https://wiki.example.org/w/api.php"})
def test_canonical_links_filter_fixes_typography_by_default():
    result = canonical_links_filter('"x" https://wiki.example.org/w/index.php?title=Foo')
    assert result == "«x» {{fullurl:Foo}}"


def test_canonical_links_filter_without_api_url():
    text = "https://wiki.example.org/Foo"
    assert canonical_links_filter(text) == text
