"""Tests for wikitext configuration."""

from django.test import override_settings

from wikiforge.wikitext.config import DEFAULTS, get_wikitext_config


def test_defaults_without_setting():
    assert get_wikitext_config() == DEFAULTS


@override_settings(WIKIFORGE={"FIX_TYPOGRAPHY": False})
def test_setting_is_merged_over_defaults():
    config = get_wikitext_config()

    assert config["FIX_TYPOGRAPHY"] is False
    assert config["API_URL"] == ""
    assert config["ENCODING"] == "utf-8"


def test_defaults_are_not_mutated():
    config = get_wikitext_config()
    config["API_URL"] = "changed"

    assert DEFAULTS["API_URL"] == ""
