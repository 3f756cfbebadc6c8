"""
URLs for the chemtrade REST API v1
"""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from . import views

router = DefaultRouter()
router.register("products", views.ProductView, basename="product")
router.register("admin/products", views.AdminProductView, basename="admin-product")

urlpatterns = [
    path("", include(router.urls)),
    path("content/", views.PublicContentView.as_view(), name="content"),
    path("admin/content/", views.AdminContentView.as_view(), name="admin-content"),
    path("admin/content/publish/", views.PublishContentView.as_view(), name="admin-content-publish"),
]
