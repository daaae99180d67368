from django.apps import AppConfig


class WikiforgeConfig(AppConfig):
    name = 'wikiforge'
    verbose_name = 'Wikitext tools'
