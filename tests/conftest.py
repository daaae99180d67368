"""Pytest configuration for wikiforge tests."""

import django
import pytest
from django.conf import settings

from wikiforge.wikitext.shielding import RESERVED_CODE_POINTS, contains_placeholder


def pytest_configure(config):
    """Minimal Django settings so filters and management commands load."""
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["wikiforge"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
        django.setup()


@pytest.fixture
def assert_no_leak():
    """Fail when a shield placeholder or control sentinel survives into output."""

    def check(text):
        assert not contains_placeholder(text), repr(text)
        assert not RESERVED_CODE_POINTS.intersection(text), repr(text)
        return text

    return check
