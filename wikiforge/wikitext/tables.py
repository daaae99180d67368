# wikiforge/wikitext/tables.py
"""
Static lookup tables shared by the wikitext pipelines.

Kept apart from the passes so localization only touches this module.
"""

NBSP = "\u00a0"
# Narrow no-break space, used between initials
NARROW_NBSP = "\u202f"
MINUS = "\u2212"
EM_DASH = "\u2014"

# Canonical name of the footnotes template
NOTES_TEMPLATE = "примечания"

# Localized namespace prefixes
TEMPLATE_NAMESPACES = ("Шаблон", "шаблон", "Template", "template")
FILE_NAMESPACES = ("File", "Файл")
LINKED_NAMESPACES = ("Category", "Категория", "Template", "Шаблон")

# Section titles folded to one canonical spelling: (regex body, canonical title)
HEADING_SYNONYMS = [
    (r"см(\.?|отри|отрите) ?также", "См. также"),
    (r"сноски", "Примечания"),
    (r"внешние\sссылки", "Ссылки"),
]

# Named HTML entities decoded by the normalizer (matched case-insensitively)
NAMED_ENTITIES = {
    "copy": "©",
    "reg": "®",
    "sect": "§",
    "euro": "€",
    "yen": "¥",
    "pound": "£",
    "deg": "°",
    "trade": "™",
    "hellip": "…",
    "plusmn": "±",
    "sup2": "²",
    "sup3": "³",
}

# Entities that stand for a quote mark and collapse to a plain double quote
QUOTE_ENTITIES = ("laquo", "raquo", "bdquo", "ldquo", "quot")

# Plain-ASCII stand-ins for typographic symbols: (regex, replacement)
SYMBOL_SEQUENCES = [
    (r"\(tm\)", "™"),
    (r"\.\.\.", "…"),
    (r"~=", "≈"),
    (r"\^2(\D)", r"²\1"),
    (r"\^3(\D)", r"³\1"),
]

# Length units that take ² / ³ after "кв." / "куб."
AREA_UNITS = ("дм", "см", "мм", "мкм", "нм", "км", "м")
AREA_PREFIXES = {"кв": "²", "куб": "³"}

# Words and units bound to a preceding number with a non-breaking space
NUMBER_UNITS = r"млн|млрд|трлн|(?:м|с|д|к)?м|[км]г"

# Russian abbreviations: (regex, replacement). Applied in order.
ABBREVIATIONS = [
    (r"(Т|т)\.\s?е\.", r"\1о есть"),
    (r"(Т|т)\.\s?к\.", r"\1ак как"),
    (r"(В|в)\sт\. ?ч\.", r"\1 том числе"),
    (r"(И|и)\sт\.\s?д\.", rf"\1{NBSP}т.{NBSP}д."),
    (r"(И|и)\sт\.\s?п\.", rf"\1{NBSP}т.{NBSP}п."),
    (r"(Т|т)\.\s?н\.", rf"\1.{NBSP}н."),
    (r"(И|и)\.\s?о\.", rf"\1.{NBSP}о."),
    (r"н\.\s?э(\.|(?=\s))", f"н.{NBSP}э."),
    (r"(Д|д)(о|\.)\sн\.\s?э\.", rf"\1о{NBSP}н.{NBSP}э."),
]

# Entities decoded by the HTML converter, "&amp;" last
HTML_ENTITIES = [
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&nbsp;", NBSP),
    ("&amp;", "&"),
]

# Attributes kept on span/div/p/font by the HTML converter
ALLOWED_ATTRIBUTES = frozenset(
    {
        "href", "src", "class", "id", "style", "align", "valign", "rowspan",
        "colspan", "border", "cellspacing", "cellpadding", "width", "height",
        "title", "alt", "name", "clear", "type", "start", "value", "summary",
        "char", "charoff", "abbr", "axis", "headers", "scope", "nowrap",
        "bgcolor", "face", "size", "color", "datetime", "lang", "dir",
    }
)

# Elements that never take a closing tag
VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "col"})
