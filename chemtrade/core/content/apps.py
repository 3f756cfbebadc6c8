"""
content Django application initialization.
"""

from django.apps import AppConfig


class ContentConfig(AppConfig):
    """
    Configuration for the site content Django application.
    """

    name = "chemtrade.core.content"
    verbose_name = "Site Content"
    default_auto_field = "django.db.models.BigAutoField"
    label = "chemtrade_content"
