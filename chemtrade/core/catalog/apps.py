"""
catalog Django application initialization.
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """
    Configuration for the product catalog Django application.
    """

    name = "chemtrade.core.catalog"
    verbose_name = "Catalog"
    default_auto_field = "django.db.models.BigAutoField"
    label = "chemtrade_catalog"
