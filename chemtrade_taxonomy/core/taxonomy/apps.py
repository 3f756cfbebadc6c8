"""
taxonomy Django application initialization.
"""

from django.apps import AppConfig


class TaxonomyConfig(AppConfig):
    """
    Configuration for the catalog taxonomy Django application.
    """

    name = "chemtrade_taxonomy.core.taxonomy"
    verbose_name = "Catalog Taxonomy"
    default_auto_field = "django.db.models.BigAutoField"
    label = "chemtrade_taxonomy"
