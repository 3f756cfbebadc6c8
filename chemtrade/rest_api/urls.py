"""
URLs for the chemtrade REST API
"""
from django.urls import include, path

urlpatterns = [path("v1/", include("chemtrade.rest_api.v1.urls"))]
