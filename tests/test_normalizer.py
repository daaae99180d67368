"""Tests for the typographic normalizer."""

import re

import pytest

from wikiforge.wikitext.normalizer import NORMALIZER_PASSES, normalize
from wikiforge.wikitext.normalizer.quotes import QUOTE_STYLING
from wikiforge.wikitext.passes import pass_names

NBSP = "\u00a0"
NARROW = "\u202f"
MINUS = "\u2212"


def test_quotes_become_guillemets(assert_no_leak):
    """Test straight quotes are promoted to guillemets."""
    result = assert_no_leak(normalize('He said "hi" today.'))
    assert "«hi»" in result
    assert result == "He said «hi» today."


def test_nested_quotes_terminate(assert_no_leak):
    """Test quote styling leaves no unclosed guillemet inside another."""
    result = assert_no_leak(normalize('"a "b" c"'))
    assert re.search("«[^»]*«", result) is None


def test_nested_guillemets_are_demoted():
    """Test inner guillemets become low-high quotes."""
    nested = QUOTE_STYLING[1]
    assert nested("«a «b» c»", None) == "«a „b“ c»"
    assert nested("«a «b «c» d» e»", None) == "«a „b „c“ d“ e»"


def test_spaced_hyphen_becomes_dash(assert_no_leak):
    """Test a free-standing hyphen is turned into an em dash."""
    assert assert_no_leak(normalize("Москва - столица")) == "Москва — столица"


def test_year_range():
    """Test a spaced year range is joined with an em dash."""
    assert normalize("Война 1941 - 1945 годов.") == "Война 1941—1945 годов."


def test_heading_is_padded_and_separated():
    """Test heading markers get spaces and a blank line before them."""
    assert normalize("text\n==See also==\nmore") == "text\n\n== See also ==\nmore"


def test_heading_synonym():
    """Test a heading synonym is replaced by the house title."""
    assert "== Примечания ==" in normalize("Текст.\n\n== Сноски ==\n")


def test_bold_heading():
    """Test bold markup is dropped from a whole heading."""
    assert normalize("== '''Title''' ==") == "== Title =="


def test_named_entity():
    """Test named entities are decoded."""
    assert normalize("&copy; 2020") == "© 2020"


def test_abbreviation_binding():
    """Test "и т. д." is bound with non-breaking spaces."""
    assert normalize("Яблоки, груши и т. д.") == f"Яблоки, груши и{NBSP}т.{NBSP}д."


def test_temperature():
    """Test a temperature gets the degree sign and a non-breaking space."""
    assert normalize("Вода кипит при 100 C.") == f"Вода кипит при 100{NBSP}°C."


def test_percent_and_decimal_comma():
    """Test percent binding and the decimal comma."""
    assert normalize("рост 3.5 %") == f"рост 3,5{NBSP}%"


def test_duplicate_link_label():
    """Test [[X|X]] is collapsed to [[X]]."""
    assert normalize("[[Москва|Москва]]") == "[[Москва]]"


@pytest.mark.parametrize(
    "text",
    [
        '<nowiki>"x" - y</nowiki>',
        "see http://example.com/a--b",
        '<source lang="python">x = "a" - 1</source>',
        '{{cite|title="Quoted" - 1941 - 1945}}',
        " preformatted - line",
    ],
)
def test_protected_regions_are_untouched(text, assert_no_leak):
    """Test shielded regions come out byte for byte."""
    assert assert_no_leak(normalize(text)) == text


@pytest.mark.parametrize(
    "text",
    [
        "Москва — столица России.",
        'He said "hi" today.',
        "text\n==See also==\nmore",
        "Яблоки, груши и т. д.",
        "[[Москва|Москва]] и [[Санкт-Петербург]]",
    ],
)
def test_idempotent_on_clean_input(text):
    """Test a second run changes nothing for representative input."""
    once = normalize(text)
    assert normalize(once) == once


def test_no_placeholder_leak_on_mixed_document(assert_no_leak):
    """Test a document exercising many passes restores every placeholder."""
    document = (
        "== Сноски ==\n"
        "Текст с <ref name=\"\">сноской</ref> и {{шаблон|1}} и `код`.\n"
        "{| class=\"wikitable\"\n|-\n| style=\"x\" | ячейка\n|}\n"
        "* пункт - http://example.org/a-b\n"
        "$\\alpha$ и <math>x</math>\n"
    )
    assert_no_leak(normalize(document))


def test_empty_input():
    """Test the empty string passes through."""
    assert normalize("") == ""


def test_pass_list_starts_and_ends_with_shielding():
    """Test the pipeline shields first and restores last."""
    names = pass_names(NORMALIZER_PASSES)
    assert names[0] == "shield <html>"
    assert names[-2:] == ["restore shielded text", "trim sentinel lines"]


@pytest.mark.parametrize(
    "text, expected",
    [
        # Linked dates
        ("Война [[1941]] - [[1945]].", "Война [[1941]]—[[1945]]."),
        ("В [[XV]] - [[XVI]] вв.", f"В [[XV]]—[[XVI]]{NBSP}вв."),
        ("[[1990]] год", f"[[1990{NBSP}год]]"),
        # Link labels
        ("[[a|b]]s", "[[a|bs]]"),
        # Inline markup
        ("<b>жирный</b> и <strong>сильный</strong>", "'''жирный''' и '''сильный'''"),
        ("код `x = 1` тут", "код <tt>x = 1</tt> тут"),
        ("формула $\\alpha + 1$ тут", "формула <math>\\alpha + 1</math> тут"),
        ("Роман <<Война и мир>>.", "Роман «Война и мир»."),
        ("текст\n<hr>\nещё", "текст\n----\nещё"),
        ("строка<br>строка", "строка<br />строка"),
        ("строка</br>строка", "строка<br />строка"),
        ('Текст <ref name="">сноска</ref>', "Текст<ref>сноска</ref>"),
        ("== Примечания ==\n<references />", "== Примечания ==\n{{примечания}}"),
        # Templates
        ("{{Шаблон:Foo}} {{reflist}}", "{{Foo}} {{примечания}}"),
        ("{{Template:Bar}}", "{{Bar}}"),
        # Numbers and units
        ("температура -5", f"температура {MINUS}5"),
        ("размер 5 x 3 m", f"размер 5×3{NBSP}m"),
        ("площадь 5 кв. км", f"площадь 5{NBSP}км²"),
        ("объём 2 куб. м", f"объём 2{NBSP}м³"),
        # Initials and abbreviations
        ("А. С. Пушкин", f"А.{NARROW}С.{NARROW}Пушкин"),
        ("Живу в г. Москва", f"Живу в г.{NARROW}Москва"),
        ("Это, т. е. пример", "Это, то есть пример"),
        ("Ушёл, т. к. устал", "Ушёл, так как устал"),
        ("ISBN:9785171183667", "ISBN 9785171183667"),
        # Lists and tabs
        ("*пункт\n#номер", "* пункт\n# номер"),
        ("ячейка \t ячейка", "ячейка\tячейка"),
    ],
)
def test_rule_output(text, expected, assert_no_leak):
    """Test each rule family produces its house-style form."""
    assert assert_no_leak(normalize(text)) == expected


def test_control_entities_stay_encoded(assert_no_leak):
    """Test entities for placeholder delimiters are not decoded mid-pipeline."""
    text = "<nowiki>SECRET</nowiki> and &#x1;1&#x2;"
    result = assert_no_leak(normalize(text))
    assert result.count("SECRET") == 1
    assert result == text


def test_surrogate_entity_stays_encoded():
    """Test a lone surrogate entity is left as written."""
    assert normalize("&#xD800;") == "&#xD800;"


def test_hex_entity_is_decoded():
    """Test an ordinary hex entity still becomes its character."""
    assert normalize("&#xA9; 2020") == "© 2020"
