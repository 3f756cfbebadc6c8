"""
Site Content API

Anyone using the content app should use these functions instead of going to a
Repository or the models directly.

No permissions are enforced here -- that is the job of the views.

The model is deliberately simple: every key has a live value and an optional
draft. Admin edits only ever change drafts. ``publish_all_drafts`` promotes all
drafts at once, and only published entries are visible through
``get_published_content``.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future
from datetime import datetime, timezone

from attrs import frozen
from django.utils.translation import gettext as _

from chemtrade.core.storage import get_repository
from chemtrade.core.storage.data import ContentEntryData
from chemtrade.lib.exceptions import NotFoundError
from chemtrade.lib.validators import validate_required_name, validate_utc_datetime

from .signals import CONTENT_PUBLISHED

log = logging.getLogger(__name__)


@frozen
class PublishResult:
    """
    What a call to ``publish_all_drafts`` did.

    ``write`` resolves when the promoted values are durable. Callers that are
    happy with write-behind semantics can ignore it.
    """
    keys: list[str]
    published_at: datetime
    write: Future


def get_all_content() -> dict[str, ContentEntryData]:
    """
    Return every content entry, drafts and unpublished entries included.

    This is the admin view of site content.
    """
    return get_repository().list_content()


def get_published_content() -> dict[str, str]:
    """
    Return ``{key: live_value}`` for every entry that has been published.

    This is what anonymous visitors get. Entries that were created but never
    published are left out entirely, and drafts are never exposed.
    """
    return {
        key: entry.live_value
        for key, entry in get_repository().list_content().items()
        if entry.is_published
    }


def get_content_entry(key: str) -> ContentEntryData:
    """
    Get a single content entry.

    Raises NotFoundError if there is no entry with that key.
    """
    entry = get_repository().get_content(key)
    if entry is None:
        raise NotFoundError(_("Content key {key} not found").format(key=key))
    return entry


def update_draft(key: str, value: str, updated: datetime | None = None) -> ContentEntryData:
    """
    Set the draft value for ``key``, creating the entry if it doesn't exist.

    The live value is not changed. A brand new entry is created with the same
    live and draft value, but stays invisible to the public until published.

    Errors that can be raised:

    * django.core.exceptions.ValidationError (empty key, non-UTC time)
    * chemtrade.lib.exceptions.PersistenceError
    """
    key = validate_required_name(key, "key")
    if updated is None:
        updated = datetime.now(tz=timezone.utc)
    validate_utc_datetime(updated)
    return get_repository().upsert_draft(key, value, updated)


def publish_all_drafts(published_at: datetime | None = None) -> PublishResult:
    """
    Promote every draft to be the live value.

    Every entry with a draft (even one identical to the live value) gets its
    live value replaced, is marked published and gets ``published_at`` as its
    last publish time. Drafts are left in place afterwards.
    """
    if published_at is None:
        published_at = datetime.now(tz=timezone.utc)
    validate_utc_datetime(published_at)

    repository = get_repository()
    keys = repository.publish_all(published_at)
    write = repository.persist()
    log.info("Published %d content entries", len(keys))

    CONTENT_PUBLISHED.send(
        sender=publish_all_drafts,
        keys=keys,
        published_at=published_at,
        write=write,
    )
    return PublishResult(keys=keys, published_at=published_at, write=write)


def has_unpublished_changes(entry: ContentEntryData) -> bool:
    """
    True if ``entry`` would look different to visitors after a publish.
    """
    return entry.has_unpublished_changes


def get_keys_with_unpublished_changes() -> list[str]:
    return sorted(
        key for key, entry in get_repository().list_content().items()
        if entry.has_unpublished_changes
    )
