"""
Data types used by the taxonomy app
"""
from __future__ import annotations

from concurrent.futures import Future
from typing import Dict, Set

from attrs import define, field, frozen
from typing_extensions import TypeAlias

# What the category_structure content entry decodes to: category name -> the
# sub-category names listed under it.
CategoryStructure: TypeAlias = Dict[str, Set[str]]


@define
class TaxonomyWorkingSet:
    """
    The category list an admin is editing.

    It is rebuilt every time from the stored category structure plus whatever
    categories and sub-categories products actually use. It is never stored as
    such: after each edit only the names are encoded back into the
    category_structure content entry.

    ``categories`` keeps its order: stored categories first, then ones that
    were only found on products, in the order they were first seen.
    """
    categories: list[str] = field(factory=list)
    sub_categories: dict[str, set[str]] = field(factory=dict)

    def has_category(self, name: str) -> bool:
        return name in self.sub_categories

    def to_structure(self) -> CategoryStructure:
        return {name: set(self.sub_categories.get(name, ())) for name in self.categories}


@frozen
class TaxonomyChange:
    """
    Outcome of one taxonomy edit.

    ``products_changed`` counts products rewritten by a rename cascade. ``write``
    resolves when the new structure (and cascaded products) are durable.
    """
    working_set: TaxonomyWorkingSet
    products_changed: int
    write: Future
