"""
Taxonomy API

Category and sub-category editing for the storefront admin.

The taxonomy is not stored as rows. Each edit:

1. rebuilds the working set from the stored ``category_structure`` content
   entry and from the categories products use (see ``reconciler``),
2. changes it, rewriting products on renames,
3. encodes the names back into ``category_structure`` as a draft, and
4. publishes all drafts right away.

Step 4 is what makes taxonomy edits visible to product forms immediately,
unlike other content keys which wait for an explicit publish. Note that it
publishes *every* pending draft, not just the category structure.

Steps 1 to 4 run inside one database transaction. With the relational
storage backend a failed publish rolls back the product rewrite too; the
in-memory backend has nothing to roll back.

There is no locking around the read-edit-write cycle. Two admins editing at
the same time can overwrite each other's structure; the last publish wins.

No permissions are enforced here -- that is the job of the views.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.db.transaction import atomic
from django.utils.translation import gettext as _

from chemtrade.core.catalog import api as catalog_api
from chemtrade.core.content import api as content_api
from chemtrade.core.storage import get_repository
from chemtrade.core.storage.base import normalize_name
from chemtrade.lib.exceptions import DuplicateError, NotFoundError, ProtectedError
from chemtrade.lib.validators import validate_required_name

from .codec import CATEGORY_STRUCTURE_KEY, decode, encode
from .data import CategoryStructure, TaxonomyChange, TaxonomyWorkingSet
from .reconciler import reconcile

log = logging.getLogger(__name__)


def get_protected_categories() -> set[str]:
    """
    Categories that may not be deleted, from ``CHEMTRADE["PROTECTED_CATEGORIES"]``.

    Empty unless configured.
    """
    names = getattr(settings, "CHEMTRADE", {}).get("PROTECTED_CATEGORIES", ())
    return {normalize_name(name) for name in names}


def get_category_structure() -> CategoryStructure:
    """
    Return the stored category structure, as the admin last saved it.
    """
    entry = get_repository().get_content(CATEGORY_STRUCTURE_KEY)
    if entry is None:
        return {}
    raw = entry.draft_value if entry.draft_value is not None else entry.live_value
    return decode(raw)


def get_working_set() -> TaxonomyWorkingSet:
    """
    Build the category list the admin console shows.

    Inactive products count too: an admin needs to see their categories.
    """
    products = catalog_api.get_products(include_inactive=True)
    return reconcile(products, get_category_structure())


def _save(working_set: TaxonomyWorkingSet, products_changed: int = 0) -> TaxonomyChange:
    """
    Store the working set's names and publish them immediately.
    """
    structure = working_set.to_structure()
    content_api.update_draft(CATEGORY_STRUCTURE_KEY, encode(structure, structure))
    result = content_api.publish_all_drafts()
    return TaxonomyChange(
        working_set=working_set,
        products_changed=products_changed,
        write=result.write,
    )


def _find_sub_category(working_set: TaxonomyWorkingSet, category: str, name: str) -> str | None:
    """
    Return the stored spelling of sub-category ``name`` under ``category``.
    """
    wanted = normalize_name(name)
    for sub in working_set.sub_categories.get(category, ()):
        if normalize_name(sub) == wanted:
            return sub
    return None


def _get_category(working_set: TaxonomyWorkingSet, name: str) -> str:
    category = normalize_name(name)
    if not working_set.has_category(category):
        raise NotFoundError(_("Category {name} not found").format(name=name))
    return category


def add_category(name: str) -> TaxonomyChange:
    """
    Add an empty category.

    Names are stored lowercased, so "Acids" and "acids" collide.
    """
    name = normalize_name(validate_required_name(name, "category"))
    with atomic():
        working_set = get_working_set()
        if working_set.has_category(name):
            raise DuplicateError(_("Category {name} already exists").format(name=name))

        working_set.categories.append(name)
        working_set.sub_categories[name] = set()
        log.info("Added category %r", name)
        return _save(working_set)


def rename_category(old_name: str, new_name: str) -> TaxonomyChange:
    """
    Rename a category and move every product in it to the new name.

    The sub-categories move with it. The product rewrite and the publish
    commit together: if publishing fails, products keep the old name.
    """
    new_name = normalize_name(validate_required_name(new_name, "category"))
    with atomic():
        working_set = get_working_set()
        old_name = _get_category(working_set, old_name)
        if new_name != old_name and working_set.has_category(new_name):
            raise DuplicateError(_("Category {name} already exists").format(name=new_name))

        index = working_set.categories.index(old_name)
        working_set.categories[index] = new_name
        working_set.sub_categories[new_name] = working_set.sub_categories.pop(old_name)

        changed = catalog_api.rename_category(old_name, new_name)
        log.info("Renamed category %r to %r (%d products updated)", old_name, new_name, changed)
        return _save(working_set, changed)


def delete_category(name: str) -> TaxonomyChange:
    """
    Remove a category and its sub-categories from the stored structure.

    Products in the category are left alone. As long as any product still uses
    the name, it will come back the next time the working set is rebuilt.
    """
    if normalize_name(name) in get_protected_categories():
        raise ProtectedError(_("Category {name} cannot be deleted").format(name=name))

    with atomic():
        working_set = get_working_set()
        name = _get_category(working_set, name)
        working_set.categories.remove(name)
        del working_set.sub_categories[name]
        log.info("Deleted category %r", name)
        return _save(working_set)


def add_sub_category(category: str, name: str) -> TaxonomyChange:
    """
    Add a sub-category under an existing category.
    """
    name = validate_required_name(name, "sub_category")
    with atomic():
        working_set = get_working_set()
        category = _get_category(working_set, category)
        if _find_sub_category(working_set, category, name) is not None:
            raise DuplicateError(
                _("Sub-category {name} already exists in {category}").format(name=name, category=category)
            )

        working_set.sub_categories[category].add(name)
        log.info("Added sub-category %r to %r", name, category)
        return _save(working_set)


def rename_sub_category(category: str, old_name: str, new_name: str) -> TaxonomyChange:
    """
    Rename a sub-category and update every product in the category that uses it.
    """
    new_name = validate_required_name(new_name, "sub_category")
    with atomic():
        working_set = get_working_set()
        category = _get_category(working_set, category)

        current = _find_sub_category(working_set, category, old_name)
        if current is None:
            raise NotFoundError(
                _("Sub-category {name} not found in {category}").format(name=old_name, category=category)
            )
        clash = _find_sub_category(working_set, category, new_name)
        if clash is not None and clash != current:
            raise DuplicateError(
                _("Sub-category {name} already exists in {category}").format(name=new_name, category=category)
            )

        subs = working_set.sub_categories[category]
        subs.discard(current)
        subs.add(new_name)

        changed = catalog_api.rename_sub_category(category, current, new_name)
        log.info(
            "Renamed sub-category %r to %r in %r (%d products updated)",
            current, new_name, category, changed,
        )
        return _save(working_set, changed)


def delete_sub_category(category: str, name: str) -> TaxonomyChange:
    """
    Remove a sub-category from a category. Products are left alone.
    """
    with atomic():
        working_set = get_working_set()
        category = _get_category(working_set, category)
        current = _find_sub_category(working_set, category, name)
        if current is None:
            raise NotFoundError(
                _("Sub-category {name} not found in {category}").format(name=name, category=category)
            )

        working_set.sub_categories[category].discard(current)
        log.info("Deleted sub-category %r from %r", current, category)
        return _save(working_set)
