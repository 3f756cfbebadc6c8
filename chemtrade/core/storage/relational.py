"""
Repository backed by the Django ORM.

This is the production storage. Writes happen synchronously inside the request,
so ``persist()`` always hands back an already-resolved Future.
"""
from __future__ import annotations

import functools
import logging
from concurrent.futures import Future
from datetime import datetime
from typing import Any
from uuid import UUID

from django.db import DatabaseError
from django.db.transaction import atomic

from chemtrade.core.catalog.models import Product
from chemtrade.core.content.models import ContentEntry
from chemtrade.lib.exceptions import PersistenceError

from .base import Repository, completed_future, normalize_name
from .data import ContentEntryData, ProductData

log = logging.getLogger(__name__)


def _wrap_db_errors(fn):
    """
    Re-raise database failures as PersistenceError.
    """
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except DatabaseError as e:
            raise PersistenceError(f"{fn.__name__} failed") from e
    return wrapper


def _content_data(entry: ContentEntry) -> ContentEntryData:
    return ContentEntryData(
        key=entry.key,
        live_value=entry.live_value,
        draft_value=entry.draft_value,
        is_published=entry.is_published,
        last_published_at=entry.last_published_at,
        updated=entry.updated,
    )


def _product_data(product: Product) -> ProductData:
    return ProductData(
        id=str(product.uuid),
        name=product.name,
        sku=product.sku,
        category=product.category,
        created=product.created,
        updated=product.updated,
        sub_category=product.sub_category,
        description=product.description,
        price=product.price,
        cas_number=product.cas_number,
        stock_quantity=product.stock_quantity,
        is_active=product.is_active,
    )


def _product_by_id(product_id: str) -> Product | None:
    try:
        product_uuid = UUID(str(product_id))
    except ValueError:
        return None
    return Product.objects.filter(uuid=product_uuid).first()


class RelationalRepository(Repository):
    """
    Repository over the ContentEntry and Product models.
    """

    # Content

    @_wrap_db_errors
    def list_content(self) -> dict[str, ContentEntryData]:
        return {
            entry.key: _content_data(entry)
            for entry in ContentEntry.objects.order_by("key")
        }

    @_wrap_db_errors
    def get_content(self, key: str) -> ContentEntryData | None:
        entry = ContentEntry.objects.filter(key=key).first()
        return _content_data(entry) if entry else None

    @_wrap_db_errors
    def upsert_draft(self, key: str, value: str, updated: datetime) -> ContentEntryData:
        with atomic():
            entry, created = ContentEntry.objects.select_for_update().get_or_create(
                key=key,
                defaults={
                    "live_value": value,
                    "draft_value": value,
                    "is_published": False,
                    "updated": updated,
                },
            )
            if not created:
                entry.draft_value = value
                entry.updated = updated
                entry.full_clean()
                entry.save(update_fields=["draft_value", "updated"])
        return _content_data(entry)

    @_wrap_db_errors
    def publish_all(self, published_at: datetime) -> list[str]:
        with atomic():
            entries = list(
                ContentEntry.objects.select_for_update()
                                    .filter(draft_value__isnull=False)
                                    .order_by("key")
            )
            for entry in entries:
                entry.live_value = entry.draft_value
                entry.is_published = True
                entry.last_published_at = published_at
                entry.updated = published_at
            ContentEntry.objects.bulk_update(
                entries,
                ["live_value", "is_published", "last_published_at", "updated"],
            )
        return [entry.key for entry in entries]

    # Products

    @_wrap_db_errors
    def list_products(self, include_inactive: bool = False) -> list[ProductData]:
        qs = Product.objects.order_by("id")
        if not include_inactive:
            qs = qs.filter(is_active=True)
        return [_product_data(product) for product in qs]

    @_wrap_db_errors
    def get_product(self, product_id: str) -> ProductData | None:
        product = _product_by_id(product_id)
        return _product_data(product) if product else None

    @_wrap_db_errors
    def get_product_by_sku(self, sku: str) -> ProductData | None:
        product = Product.objects.filter(sku=sku).first()
        return _product_data(product) if product else None

    @_wrap_db_errors
    def create_product(self, fields: dict[str, Any], created: datetime) -> ProductData:
        product = Product(created=created, updated=created, **fields)
        product.full_clean()
        product.save()
        return _product_data(product)

    @_wrap_db_errors
    def update_product(self, product_id: str, fields: dict[str, Any], updated: datetime) -> ProductData | None:
        with atomic():
            product = _product_by_id(product_id)
            if product is None:
                return None
            for name, value in fields.items():
                setattr(product, name, value)
            product.updated = updated
            product.full_clean()
            product.save()
        return _product_data(product)

    @_wrap_db_errors
    def delete_product(self, product_id: str) -> bool:
        product = _product_by_id(product_id)
        if product is None:
            return False
        product.delete()
        return True

    @_wrap_db_errors
    def rename_category(self, old_name: str, new_name: str, updated: datetime) -> int:
        with atomic():
            return Product.objects.filter(category__iexact=normalize_name(old_name)) \
                                  .update(category=new_name, updated=updated)

    @_wrap_db_errors
    def rename_sub_category(self, category: str, old_name: str, new_name: str, updated: datetime) -> int:
        with atomic():
            return Product.objects.filter(
                category__iexact=normalize_name(category),
                sub_category__iexact=normalize_name(old_name),
            ).update(sub_category=new_name, updated=updated)

    # Durability

    def persist(self) -> Future:
        return completed_future()
