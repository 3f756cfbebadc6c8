"""
In-memory Repository, optionally backed by a JSON file.

This is the "demo" storage: everything lives in dicts for the life of the
process. If a ``data_file`` is configured, the state is loaded from it at
startup and written back after every mutation.

Writes to the file are write-behind: the mutation returns as soon as the dicts
are updated, and the file is rewritten on a single background thread. The
Future for that write is available from ``persist()``; failures are logged and
sent out through the ``PERSIST_FAILED`` signal rather than being dropped.
"""
from __future__ import annotations

import json
import logging
import os
import threading
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from attrs import asdict, evolve

from chemtrade.lib.exceptions import PersistenceError

from .base import Repository, completed_future, normalize_name
from .data import ContentEntryData, ProductData
from .signals import PERSIST_FAILED

log = logging.getLogger(__name__)

_DATETIME_FIELDS = ("updated", "created", "last_published_at")


def _to_json(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def _from_json(record: dict[str, Any]) -> dict[str, Any]:
    record = dict(record)
    for name in _DATETIME_FIELDS:
        if record.get(name):
            record[name] = datetime.fromisoformat(record[name])
    if "price" in record:
        record["price"] = Decimal(record["price"])
    return record


class MemoryRepository(Repository):
    """
    Dict-backed Repository.

    Products are keyed by their id, content entries by their key. All access
    goes through one re-entrant lock. Records are frozen and replaced whole, so
    a reader never sees an entry that is only partly promoted by a publish.
    """

    def __init__(self, data_file: str | os.PathLike | None = None):
        self._lock = threading.RLock()
        self._content: dict[str, ContentEntryData] = {}
        self._products: dict[str, ProductData] = {}
        self._last_write: Future = completed_future()
        self.data_file = Path(data_file) if data_file else None
        self._executor = None
        if self.data_file:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="chemtrade-persist")
            self._load()

    # Content

    def list_content(self) -> dict[str, ContentEntryData]:
        with self._lock:
            return dict(self._content)

    def get_content(self, key: str) -> ContentEntryData | None:
        with self._lock:
            return self._content.get(key)

    def upsert_draft(self, key: str, value: str, updated: datetime) -> ContentEntryData:
        with self._lock:
            existing = self._content.get(key)
            if existing:
                entry = evolve(existing, draft_value=value, updated=updated)
            else:
                entry = ContentEntryData(
                    key=key,
                    live_value=value,
                    draft_value=value,
                    is_published=False,
                    last_published_at=None,
                    updated=updated,
                )
            self._content[key] = entry
            self._schedule_write()
            return entry

    def publish_all(self, published_at: datetime) -> list[str]:
        with self._lock:
            promoted = []
            for key, entry in self._content.items():
                if entry.draft_value is None:
                    continue
                self._content[key] = evolve(
                    entry,
                    live_value=entry.draft_value,
                    is_published=True,
                    last_published_at=published_at,
                    updated=published_at,
                )
                promoted.append(key)
            if promoted:
                self._schedule_write()
            return promoted

    # Products

    def list_products(self, include_inactive: bool = False) -> list[ProductData]:
        with self._lock:
            return [
                product for product in self._products.values()
                if include_inactive or product.is_active
            ]

    def get_product(self, product_id: str) -> ProductData | None:
        with self._lock:
            return self._products.get(product_id)

    def get_product_by_sku(self, sku: str) -> ProductData | None:
        with self._lock:
            return next((p for p in self._products.values() if p.sku == sku), None)

    def create_product(self, fields: dict[str, Any], created: datetime) -> ProductData:
        with self._lock:
            product = ProductData(id=str(uuid.uuid4()), created=created, updated=created, **fields)
            self._products[product.id] = product
            self._schedule_write()
            return product

    def update_product(self, product_id: str, fields: dict[str, Any], updated: datetime) -> ProductData | None:
        with self._lock:
            existing = self._products.get(product_id)
            if existing is None:
                return None
            product = evolve(existing, updated=updated, **fields)
            self._products[product_id] = product
            self._schedule_write()
            return product

    def delete_product(self, product_id: str) -> bool:
        with self._lock:
            deleted = self._products.pop(product_id, None) is not None
            if deleted:
                self._schedule_write()
            return deleted

    def rename_category(self, old_name: str, new_name: str, updated: datetime) -> int:
        old_name = normalize_name(old_name)
        with self._lock:
            changed = 0
            for product_id, product in self._products.items():
                if normalize_name(product.category) == old_name:
                    self._products[product_id] = evolve(product, category=new_name, updated=updated)
                    changed += 1
            if changed:
                self._schedule_write()
            return changed

    def rename_sub_category(self, category: str, old_name: str, new_name: str, updated: datetime) -> int:
        category = normalize_name(category)
        old_name = normalize_name(old_name)
        with self._lock:
            changed = 0
            for product_id, product in self._products.items():
                if normalize_name(product.category) != category:
                    continue
                if normalize_name(product.sub_category) != old_name:
                    continue
                self._products[product_id] = evolve(product, sub_category=new_name, updated=updated)
                changed += 1
            if changed:
                self._schedule_write()
            return changed

    # Durability

    def persist(self) -> Future:
        with self._lock:
            return self._last_write

    def close(self) -> None:
        """
        Wait for pending writes and stop the writer thread.
        """
        if self._executor:
            self._executor.shutdown(wait=True)

    def _snapshot(self) -> str:
        return json.dumps(
            {
                "content": [asdict(entry, value_serializer=lambda _i, _a, v: _to_json(v))
                            for entry in self._content.values()],
                "products": [asdict(product, value_serializer=lambda _i, _a, v: _to_json(v))
                             for product in self._products.values()],
            },
            indent=2,
        )

    def _schedule_write(self) -> Future:
        """
        Queue a write of the current state. Must be called with the lock held.
        """
        if not self._executor:
            return self._last_write
        # Serialize now, while we hold the lock, so the file always gets a
        # consistent snapshot even if more mutations land before it's written.
        payload = self._snapshot()
        future = self._executor.submit(self._write, payload)
        future.add_done_callback(self._on_write_done)
        self._last_write = future
        return future

    def _write(self, payload: str) -> None:
        assert self.data_file is not None
        tmp_path = self.data_file.with_suffix(self.data_file.suffix + ".tmp")
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.data_file)
        except OSError as e:
            raise PersistenceError(f"Unable to write {self.data_file}") from e

    def _on_write_done(self, future: Future) -> None:
        exc = future.exception()
        if exc is None:
            return
        log.error("Background save of %s failed", self.data_file, exc_info=exc)
        PERSIST_FAILED.send(sender=self.__class__, repository=self, exception=exc)

    def _load(self) -> None:
        assert self.data_file is not None
        if not self.data_file.exists():
            return
        try:
            data = json.loads(self.data_file.read_text(encoding="utf-8"))
            content = [ContentEntryData(**_from_json(r)) for r in data.get("content", [])]
            products = [ProductData(**_from_json(r)) for r in data.get("products", [])]
        except (OSError, ValueError, TypeError, AttributeError):
            # Start empty rather than refusing to boot; the next write will
            # replace the unreadable file.
            log.exception("Unable to load storage data from %s, starting empty", self.data_file)
            return
        self._content = {entry.key: entry for entry in content}
        self._products = {product.id: product for product in products}
        log.info("Loaded %d content entries and %d products from %s",
                 len(self._content), len(self._products), self.data_file)
