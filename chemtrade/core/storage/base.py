"""
The storage interface used by the content, catalog and taxonomy APIs.

Everything above this layer only ever talks to a ``Repository``. Which concrete
Repository is used is decided once per process from settings (see
``chemtrade.core.storage.get_repository``).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future
from datetime import datetime
from typing import Any

from .data import ContentEntryData, ProductData


def normalize_name(name: str | None) -> str:
    """
    Normalized form used when comparing category and sub-category names.
    """
    return (name or "").strip().lower()


def completed_future(result: Any = None) -> Future:
    """
    Return a Future that is already resolved, for writes that were synchronous.
    """
    future: Future = Future()
    future.set_result(result)
    return future


class Repository(ABC):
    """
    Narrow get/set interface over site content and products.

    Lookups return ``None`` for missing rows instead of raising; deciding
    whether that is an error is the job of the API layer.

    Writes may be durable only after the call returns. ``persist()`` returns a
    Future for the most recent write that callers can wait on if they need to.
    """

    # Content

    @abstractmethod
    def list_content(self) -> dict[str, ContentEntryData]:
        """
        All content entries keyed by content key, drafts included.
        """

    @abstractmethod
    def get_content(self, key: str) -> ContentEntryData | None:
        ...

    @abstractmethod
    def upsert_draft(self, key: str, value: str, updated: datetime) -> ContentEntryData:
        """
        Set the draft of ``key`` to ``value``, creating the entry if needed.

        A new entry starts with the same live and draft value and is not
        published. An existing entry only has its draft (and updated time)
        changed; the live value is never touched here.
        """

    @abstractmethod
    def publish_all(self, published_at: datetime) -> list[str]:
        """
        Promote every present draft to be the live value.

        Returns the keys that were promoted.
        """

    # Products

    @abstractmethod
    def list_products(self, include_inactive: bool = False) -> list[ProductData]:
        ...

    @abstractmethod
    def get_product(self, product_id: str) -> ProductData | None:
        ...

    @abstractmethod
    def get_product_by_sku(self, sku: str) -> ProductData | None:
        ...

    @abstractmethod
    def create_product(self, fields: dict[str, Any], created: datetime) -> ProductData:
        ...

    @abstractmethod
    def update_product(self, product_id: str, fields: dict[str, Any], updated: datetime) -> ProductData | None:
        ...

    @abstractmethod
    def delete_product(self, product_id: str) -> bool:
        ...

    @abstractmethod
    def rename_category(self, old_name: str, new_name: str, updated: datetime) -> int:
        """
        Rewrite ``category`` on every product whose category matches
        ``old_name`` (compared with ``normalize_name``).

        Returns the number of products changed.
        """

    @abstractmethod
    def rename_sub_category(self, category: str, old_name: str, new_name: str, updated: datetime) -> int:
        """
        Rewrite ``sub_category`` on products in ``category`` whose
        sub-category matches ``old_name``.

        Returns the number of products changed.
        """

    # Durability

    @abstractmethod
    def persist(self) -> Future:
        """
        Future for the most recent write.

        It resolves once that write is durable, or carries a PersistenceError
        if the write failed.
        """
