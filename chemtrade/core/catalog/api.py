"""
Catalog API

Anyone using the catalog app should use these functions instead of going to a
Repository or the models directly.

No permissions are enforced here -- that is the job of the views.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext as _

from chemtrade.core.storage import get_repository
from chemtrade.core.storage.base import normalize_name
from chemtrade.core.storage.data import PRODUCT_FIELDS, ProductData
from chemtrade.lib.exceptions import DuplicateError, NotFoundError
from chemtrade.lib.validators import validate_required_name

log = logging.getLogger(__name__)

REQUIRED_PRODUCT_FIELDS = ("name", "sku", "category")

# Spellings seen in imported JSON that Django's BooleanField doesn't accept.
_BOOLEAN_STRINGS = {"true": True, "false": False, "yes": True, "no": False}


def _clean_product_fields(fields: dict[str, Any], partial: bool) -> dict[str, Any]:
    """
    Validate and normalize product fields passed to create/update.
    """
    unknown = set(fields) - set(PRODUCT_FIELDS)
    if unknown:
        raise ValidationError(
            _("Unknown product fields: %(fields)s"),
            params={"fields": ", ".join(sorted(unknown))},
        )

    cleaned = dict(fields)
    for name in REQUIRED_PRODUCT_FIELDS:
        if name in cleaned or not partial:
            cleaned[name] = validate_required_name(cleaned.get(name), name)

    if "sub_category" in cleaned:
        cleaned["sub_category"] = (cleaned["sub_category"] or "").strip() or None

    if "price" in cleaned:
        try:
            cleaned["price"] = Decimal(str(cleaned["price"]))
        except InvalidOperation as e:
            raise ValidationError(_("price must be a number.")) from e

    # Both storage backends must see the same types; the relational one would
    # otherwise coerce in full_clean() while the in-memory one stores as given.
    if "stock_quantity" in cleaned:
        quantity = models.IntegerField().to_python(cleaned["stock_quantity"])
        if quantity is None or quantity < 0:
            raise ValidationError(_("stock_quantity must be zero or more."))
        cleaned["stock_quantity"] = quantity

    if "is_active" in cleaned:
        value = cleaned["is_active"]
        if isinstance(value, str):
            value = _BOOLEAN_STRINGS.get(value.strip().lower(), value)
        cleaned["is_active"] = models.BooleanField().to_python(value)

    return cleaned


def get_products(
    search: str | None = None,
    category: str | None = None,
    include_inactive: bool = False,
) -> list[ProductData]:
    """
    Return products, optionally filtered.

    ``search`` is a case-insensitive substring match against the name, SKU, CAS
    number, description and sub-category. ``category`` must match the product's
    category (case-insensitively).
    """
    products = get_repository().list_products(include_inactive=include_inactive)

    if search:
        needle = search.lower()
        products = [
            p for p in products
            if any(
                needle in (value or "").lower()
                for value in (p.name, p.sku, p.cas_number, p.description, p.sub_category)
            )
        ]

    if category:
        wanted = normalize_name(category)
        products = [p for p in products if normalize_name(p.category) == wanted]

    return products


def get_product(product_id: str) -> ProductData:
    """
    Get a product by id.

    Raises NotFoundError if it doesn't exist.
    """
    product = get_repository().get_product(product_id)
    if product is None:
        raise NotFoundError(_("Product {product_id} not found").format(product_id=product_id))
    return product


def create_product(created: datetime | None = None, **fields) -> ProductData:
    """
    Create a new product.

    ``name``, ``sku`` and ``category`` are required. SKUs must be unique.

    Errors that can be raised:

    * django.core.exceptions.ValidationError
    * chemtrade.lib.exceptions.DuplicateError
    """
    cleaned = _clean_product_fields(fields, partial=False)
    repository = get_repository()
    if repository.get_product_by_sku(cleaned["sku"]):
        raise DuplicateError(_("SKU {sku} already exists").format(sku=cleaned["sku"]))

    if created is None:
        created = datetime.now(tz=timezone.utc)
    product = repository.create_product(cleaned, created)
    log.info("Created product %s (SKU %s)", product.id, product.sku)
    return product


def update_product(product_id: str, updated: datetime | None = None, **fields) -> ProductData:
    """
    Update some fields of a product.

    Fields that are not passed in are left alone.
    """
    cleaned = _clean_product_fields(fields, partial=True)
    repository = get_repository()

    if "sku" in cleaned:
        existing = repository.get_product_by_sku(cleaned["sku"])
        if existing and existing.id != product_id:
            raise DuplicateError(_("SKU {sku} already exists").format(sku=cleaned["sku"]))

    if updated is None:
        updated = datetime.now(tz=timezone.utc)
    product = repository.update_product(product_id, cleaned, updated)
    if product is None:
        raise NotFoundError(_("Product {product_id} not found").format(product_id=product_id))
    return product


def delete_product(product_id: str) -> None:
    if not get_repository().delete_product(product_id):
        raise NotFoundError(_("Product {product_id} not found").format(product_id=product_id))


def rename_category(old_name: str, new_name: str, updated: datetime | None = None) -> int:
    """
    Rewrite the category of every product in ``old_name`` to ``new_name``.

    Products are matched case-insensitively. Returns the number of products
    that changed.
    """
    new_name = validate_required_name(new_name, "category")
    if updated is None:
        updated = datetime.now(tz=timezone.utc)
    changed = get_repository().rename_category(old_name, new_name, updated)
    log.info("Moved %d products from category %r to %r", changed, old_name, new_name)
    return changed


def rename_sub_category(category: str, old_name: str, new_name: str, updated: datetime | None = None) -> int:
    """
    Rewrite the sub-category ``old_name`` to ``new_name`` on every product in
    ``category``.

    Returns the number of products that changed.
    """
    new_name = validate_required_name(new_name, "sub_category")
    if updated is None:
        updated = datetime.now(tz=timezone.utc)
    changed = get_repository().rename_sub_category(category, old_name, new_name, updated)
    log.info(
        "Renamed sub-category %r to %r on %d products in %r",
        old_name, new_name, changed, category,
    )
    return changed
