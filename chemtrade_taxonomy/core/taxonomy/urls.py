"""
Taxonomy API URLs.
"""

from django.urls import include, path

app_name = "chemtrade_taxonomy"
urlpatterns = [path("v1/", include("chemtrade_taxonomy.core.taxonomy.rest_api.v1.urls"))]
