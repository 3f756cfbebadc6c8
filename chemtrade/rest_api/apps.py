"""
Django metadata for the chemtrade REST API app
"""
from django.apps import AppConfig


class RESTAPIConfig(AppConfig):
    """
    Configuration for the chemtrade REST API Django app.
    """

    name = "chemtrade.rest_api"
    verbose_name = "Chemtrade: REST API"
    default_auto_field = "django.db.models.BigAutoField"
