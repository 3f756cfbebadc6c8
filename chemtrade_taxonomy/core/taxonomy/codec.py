"""
Reading and writing the category structure stored in site content.

The structure lives in the ``category_structure`` content entry as JSON::

    {"schema_version": 1, "categories": {"acids": ["strong", "weak"]}}

Entries written before the format was versioned are a bare mapping of category
name to a list of sub-category names, and are still accepted.

Decoding never raises. The structure is optional data, so anything that can't
be read is logged and treated as an empty structure.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

from chemtrade.lib.exceptions import DecodeError

from .data import CategoryStructure

log = logging.getLogger(__name__)

CATEGORY_STRUCTURE_KEY = "category_structure"
SCHEMA_VERSION = 1


def encode(categories: Iterable[str], sub_categories: Mapping[str, Iterable[str]]) -> str:
    """
    Serialize categories and their sub-categories to the stored JSON format.

    Every category in ``categories`` is written, even with no sub-categories.
    Sub-category lists are sorted so the same structure always encodes the same
    way.
    """
    structure = {
        name: sorted(sub_categories.get(name, ()))
        for name in categories
    }
    return json.dumps({"schema_version": SCHEMA_VERSION, "categories": structure})


def _parse(raw: str) -> CategoryStructure:
    try:
        data: Any = json.loads(raw)
    except ValueError as e:
        raise DecodeError("category structure is not valid JSON") from e

    if not isinstance(data, dict):
        raise DecodeError("category structure must be a JSON object")

    if "schema_version" in data:
        if data["schema_version"] != SCHEMA_VERSION:
            raise DecodeError(f"unsupported category structure version {data['schema_version']!r}")
        data = data.get("categories")
        if not isinstance(data, dict):
            raise DecodeError("category structure has no categories object")

    structure: CategoryStructure = {}
    for name, subs in data.items():
        if subs is None:
            subs = []
        if not isinstance(subs, list) or not all(isinstance(sub, str) for sub in subs):
            raise DecodeError(f"sub-categories of {name!r} must be a list of strings")
        structure[name] = set(subs)
    return structure


def decode(raw: str | None) -> CategoryStructure:
    """
    Parse a stored category structure.

    Returns ``{}`` if ``raw`` is missing, empty or can't be decoded.
    """
    if not raw:
        return {}
    try:
        return _parse(raw)
    except DecodeError:
        log.warning("Ignoring unreadable category structure", exc_info=True)
        return {}
