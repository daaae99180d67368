"""Tests for the wikitext management commands."""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from wikiforge.management.commands._files import write_text

API_URL = "https://wiki.example.org/w/api.php"


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.wiki"
    path.write_text('He said "hi" today.', encoding="utf-8")
    return path


def test_wikify_prints_result(page):
    out = StringIO()
    call_command("wikify", str(page), stdout=out)

    assert out.getvalue() == "He said «hi» today."
    assert page.read_text(encoding="utf-8") == 'He said "hi" today.'


def test_wikify_in_place(page):
    out = StringIO()
    call_command("wikify", str(page), in_place=True, stdout=out)

    assert page.read_text(encoding="utf-8") == "He said «hi» today."
    assert f"Normalized {page}" in out.getvalue()


def test_wikify_check_fails_on_change(page):
    out = StringIO()
    with pytest.raises(CommandError):
        call_command("wikify", str(page), check=True, stdout=out)

    assert f"Would normalize {page}" in out.getvalue()
    assert page.read_text(encoding="utf-8") == 'He said "hi" today.'


def test_wikify_check_passes_on_clean_file(tmp_path):
    path = tmp_path / "clean.wiki"
    path.write_text("He said «hi» today.", encoding="utf-8")

    call_command("wikify", str(path), check=True, stdout=StringIO())


def test_wikify_missing_file(tmp_path):
    with pytest.raises(CommandError, match="Cannot read"):
        call_command("wikify", str(tmp_path / "missing.wiki"), stdout=StringIO())


def test_html2wiki_output_file(tmp_path):
    source = tmp_path / "page.html"
    source.write_text("<h2>Title</h2><p>Some <b>bold</b> text</p>", encoding="utf-8")
    target = tmp_path / "page.wiki"

    call_command("html2wiki", str(source), output=str(target), stdout=StringIO())

    assert target.read_text(encoding="utf-8") == "== Title ==\n\nSome '''bold''' text\n"


def test_html2wiki_stdout(tmp_path):
    source = tmp_path / "page.html"
    source.write_text("<i>x</i>", encoding="utf-8")
    out = StringIO()

    call_command("html2wiki", str(source), stdout=out)

    assert out.getvalue() == "''x''\n"


def test_fix_wiki_links(tmp_path):
    path = tmp_path / "page.wiki"
    path.write_text('"x" https://wiki.example.org/w/index.php?title=Foo&oldid=5', encoding="utf-8")
    out = StringIO()

    call_command("fix_wiki_links", str(path), api_url=API_URL, no_typography=True, stdout=out)

    assert out.getvalue() == '"x" {{fullurl:Foo|oldid=5}}'


@override_settings(WIKIFORGE={"API_URL": API_URL})
def test_fix_wiki_links_in_place_uses_settings(tmp_path):
    path = tmp_path / "page.wiki"
    path.write_text('"x" [https://wiki.example.org/Foo_bar see]', encoding="utf-8")

    call_command("fix_wiki_links", str(path), in_place=True, stdout=StringIO())

    assert path.read_text(encoding="utf-8") == "«x» [[Foo bar|see]]"


def test_fix_wiki_links_requires_api_url(page):
    with pytest.raises(CommandError, match="No API endpoint"):
        call_command("fix_wiki_links", str(page), stdout=StringIO())


def test_write_text_reports_unencodable_text(tmp_path):
    """Test text the encoding cannot represent raises CommandError, not a traceback."""
    with pytest.raises(CommandError, match="Cannot write"):
        write_text(tmp_path / "out.wiki", "\ud800", "utf-8")
