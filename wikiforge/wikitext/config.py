# wikiforge/wikitext/config.py

from django.conf import settings

DEFAULTS = {
    "API_URL": "",
    "FIX_TYPOGRAPHY": True,
    "ENCODING": "utf-8",
}


def get_wikitext_config():
    """
    Configuration for the wikitext tools.

    Reads the optional ``WIKIFORGE`` dict from Django settings and merges it
    over the defaults. Outside a configured Django project the defaults are
    returned unchanged, so the text transforms never need Django.

    Example settings:

        WIKIFORGE = {
            "API_URL": "https://wiki.example.org/w/api.php",
            "FIX_TYPOGRAPHY": False,
        }
    """
    config = dict(DEFAULTS)
    if settings.configured:
        config.update(getattr(settings, "WIKIFORGE", None) or {})
    return config
