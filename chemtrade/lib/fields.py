"""
Convenience functions to make consistent field conventions easier.

We follow the MySQL-friendly convention of an integer primary key plus a
separate UUID column for anything that is referenced from outside the process
(like products in REST URLs).
"""
from __future__ import annotations

import uuid

from django.db import models

from .validators import validate_utc_datetime


def immutable_uuid_field() -> models.UUIDField:
    """
    Stable, randomly-generated UUIDs.

    These are what the REST API and the in-memory repository use as identifiers,
    so both storage backends agree on what a product "id" looks like.
    """
    return models.UUIDField(
        default=uuid.uuid4,
        blank=False,
        null=False,
        editable=False,
        unique=True,
        verbose_name="UUID",  # Just makes the Django admin output properly capitalized
    )


def key_field(**kwargs) -> models.CharField:
    """
    Externally created identifier fields, like content keys ("home.hero_title").
    """
    final_kwargs = {
        "max_length": 255,
        "blank": False,
        "null": False,
    }
    final_kwargs.update(kwargs)
    return models.CharField(**final_kwargs)


def name_field(**kwargs) -> models.CharField:
    """
    Free-text, human-entered names (product names, category names).

    Category names are not foreign keys to anything: they are matched by value,
    which is why these are plain CharFields.
    """
    final_kwargs = {
        "max_length": 255,
        "blank": False,
        "null": False,
    }
    final_kwargs.update(kwargs)
    return models.CharField(**final_kwargs)


def manual_date_time_field(**kwargs) -> models.DateTimeField:
    """
    DateTimeField that does not auto-generate values.

    The datetimes entered for this field *must be UTC* or it will raise a
    ValidationError.

    Callers pick a single timestamp up front and pass it in, so that every row
    touched by one operation (e.g. all the entries promoted by one publish) gets
    exactly the same time.
    """
    final_kwargs = {
        "auto_now": False,
        "auto_now_add": False,
        "null": False,
        "validators": [
            validate_utc_datetime,
        ],
    }
    final_kwargs.update(kwargs)
    return models.DateTimeField(**final_kwargs)
