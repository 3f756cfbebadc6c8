"""
Products sold through the storefront.

Only used by the relational storage backend. Go through
``chemtrade.core.catalog.api`` rather than querying these directly.
"""
from django.db import models

from chemtrade.lib.fields import immutable_uuid_field, manual_date_time_field, name_field


class Product(models.Model):
    """
    A chemical product in the catalog.

    ``category`` and ``sub_category`` are free text on purpose. There is no
    Category table to point a foreign key at: the category list is rebuilt from
    the products themselves plus the admin-maintained structure stored in site
    content. Renaming a category therefore means rewriting this column on every
    matching product.
    """
    uuid = immutable_uuid_field()

    name = name_field()
    description = models.TextField(blank=True, default="")
    sku = models.CharField(max_length=100, unique=True, blank=False, null=False)

    category = name_field(max_length=100)
    sub_category = name_field(max_length=100, blank=True, null=True)

    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    cas_number = models.CharField(max_length=255, blank=True, default="")
    stock_quantity = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)

    created = manual_date_time_field()
    updated = manual_date_time_field()

    def __str__(self):
        return f"{self.sku}: {self.name}"

    class Meta:
        indexes = [
            models.Index(fields=["category"], name="chemtrade_product_cat_idx"),
        ]
        verbose_name = "Product"
        verbose_name_plural = "Products"
