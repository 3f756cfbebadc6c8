"""
Django admin for catalog models
"""
from __future__ import annotations

from django.contrib import admin

from chemtrade.lib.admin_utils import ReadOnlyModelAdmin

from .models import Product


@admin.register(Product)
class ProductAdmin(ReadOnlyModelAdmin):
    """
    Read-only admin for Product model
    """
    fields = [
        "uuid", "sku", "name", "category", "sub_category", "price",
        "cas_number", "stock_quantity", "is_active", "created", "updated",
    ]
    readonly_fields = fields
    list_display = ["sku", "name", "category", "sub_category", "is_active", "updated"]
    list_filter = ["is_active", "category"]
    search_fields = ["sku", "name", "cas_number"]
