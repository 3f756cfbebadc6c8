"""
Building the admin's category list from stored structure and live products.

Categories are not a table of their own. They come from two places: the
structure an admin saved (which can hold categories no product uses yet), and
the categories and sub-categories products carry. Products imported in bulk
show up in the taxonomy without anyone having to add their categories first.
"""
from __future__ import annotations

from typing import Iterable

from chemtrade.core.storage.base import normalize_name
from chemtrade.core.storage.data import ProductData

from .data import CategoryStructure, TaxonomyWorkingSet


def reconcile(products: Iterable[ProductData], persisted: CategoryStructure) -> TaxonomyWorkingSet:
    """
    Merge the stored structure with what products use.

    * Every stored category is kept, in stored order, with its stored
      sub-categories.
    * Every category seen on a product is added (normalized), after the stored
      ones, in the order first seen.
    * Every non-empty sub-category on a product is added under its product's
      category.

    This has no side effects.
    """
    categories: list[str] = []
    sub_categories: dict[str, set[str]] = {}

    def _add_category(name: str) -> str:
        name = normalize_name(name)
        if name not in sub_categories:
            categories.append(name)
            sub_categories[name] = set()
        return name

    def _add_sub_category(category: str, sub: str | None) -> None:
        sub = (sub or "").strip()
        if not sub:
            return
        existing = sub_categories[category]
        # Sub-categories keep their case, but "Strong" and "strong" are one.
        if normalize_name(sub) not in {normalize_name(s) for s in existing}:
            existing.add(sub)

    for name, subs in persisted.items():
        if not normalize_name(name):
            continue
        key = _add_category(name)
        for sub in sorted(subs):
            _add_sub_category(key, sub)

    for product in products:
        if not normalize_name(product.category):
            continue
        key = _add_category(product.category)
        _add_sub_category(key, product.sub_category)

    return TaxonomyWorkingSet(categories=categories, sub_categories=sub_categories)
