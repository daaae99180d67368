"""Tests for MediaWiki anchor decoding."""

import pytest

from wikiforge.wikitext.links import decode_fragment


@pytest.mark.parametrize(
    "fragment, expected",
    [
        (".D0.9F.D1.80.D0.B8.D0.BC.D0.B5.D1.80", "Пример"),
        ("2.6.16", "2.6.16"),
        (".E2.84.9617", "№17"),
        ("Linux_2.6.16", "Linux 2.6.16"),
        ("See_also", "See also"),
        ("Version_1.2_.28beta.29", "Version 1.2 (beta)"),
        ("", ""),
    ],
)
def test_decode_fragment(fragment, expected):
    assert decode_fragment(fragment) == expected


def test_invalid_utf8_returns_fragment():
    """Test a truncated byte sequence leaves the fragment unchanged."""
    assert decode_fragment(".D0") == ".D0"
