"""
Records that cross the storage boundary.

Repositories hand these out instead of ORM model instances, so the in-memory
and relational backends are interchangeable for everything above them. They
are frozen: an update always produces a new record, which is what lets the
in-memory backend swap a whole entry in one step.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from attrs import frozen

# Product fields that callers are allowed to set through create/update.
PRODUCT_FIELDS = (
    "name",
    "description",
    "sku",
    "category",
    "sub_category",
    "price",
    "cas_number",
    "stock_quantity",
    "is_active",
)


@frozen
class ContentEntryData:
    """
    One site content entry: a live value plus an optional unpublished draft.

    The draft is kept after a publish, so "has unpublished changes" is decided
    by comparing the draft to the live value rather than by the draft's
    presence.
    """
    key: str
    live_value: str
    draft_value: str | None
    is_published: bool
    last_published_at: datetime | None
    updated: datetime

    @property
    def has_unpublished_changes(self) -> bool:
        if not self.is_published:
            return True
        return self.draft_value is not None and self.draft_value != self.live_value


@frozen
class ProductData:
    """
    A catalog product, reduced to the fields the storefront admin edits.

    ``category`` and ``sub_category`` are free text. They are matched by value
    against the taxonomy, not through a foreign key.
    """
    id: str
    name: str
    sku: str
    category: str
    created: datetime
    updated: datetime
    sub_category: str | None = None
    description: str = ""
    price: Decimal = Decimal("0")
    cas_number: str = ""
    stock_quantity: int = 0
    is_active: bool = True
