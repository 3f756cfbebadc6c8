"""
Taxonomy API v1 URLs.

Category and sub-category names can contain "/", so they are matched with the
``path`` converter. The longest patterns come first so that ".../subcategories/"
is never read as part of a category name. The one name that can't be reached
is a category ending in "/subcategories".
"""

from django.urls.conf import path

from . import views

urlpatterns = [
    path("admin/taxonomy/", views.TaxonomyView.as_view(), name="taxonomy"),
    path(
        "admin/taxonomy/categories/",
        views.CategoriesView.as_view(),
        name="taxonomy-categories",
    ),
    path(
        "admin/taxonomy/categories/<path:category>/subcategories/<path:sub_category>/",
        views.SubCategoryView.as_view(),
        name="taxonomy-subcategory",
    ),
    path(
        "admin/taxonomy/categories/<path:category>/subcategories/",
        views.SubCategoriesView.as_view(),
        name="taxonomy-subcategories",
    ),
    path(
        "admin/taxonomy/categories/<path:category>/",
        views.CategoryView.as_view(),
        name="taxonomy-category",
    ),
]
