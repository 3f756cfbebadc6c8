"""
Storage backends for site content and products.

The backend is chosen once per process from the ``CHEMTRADE["STORAGE"]``
setting::

    CHEMTRADE = {
        "STORAGE": {
            "BACKEND": "chemtrade.core.storage.memory.MemoryRepository",
            "OPTIONS": {"data_file": "/var/lib/chemtrade/storage.json"},
        },
    }

``BACKEND`` is a dotted path to a Repository subclass, and ``OPTIONS`` are the
keyword arguments it is constructed with. With no setting at all you get a
MemoryRepository that does not write to disk.
"""
from __future__ import annotations

from django.conf import settings
from django.utils.module_loading import import_string

from chemtrade.lib.cache import lru_cache

from .base import Repository

DEFAULT_BACKEND = "chemtrade.core.storage.memory.MemoryRepository"


@lru_cache(maxsize=None)
def get_repository() -> Repository:
    """
    Return the process-wide Repository configured in settings.
    """
    storage_settings = getattr(settings, "CHEMTRADE", {}).get("STORAGE") or {}
    backend_cls = import_string(storage_settings.get("BACKEND") or DEFAULT_BACKEND)
    if not issubclass(backend_cls, Repository):
        raise TypeError(f"{backend_cls!r} is not a Repository")
    return backend_cls(**storage_settings.get("OPTIONS", {}))
