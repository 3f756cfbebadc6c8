"""
Useful validation methods
"""
from __future__ import annotations

from datetime import datetime, timezone

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _


def validate_utc_datetime(dt: datetime):
    if dt.tzinfo != timezone.utc:
        raise ValidationError(
            _("The timezone for %(datetime)s is not UTC."),
            params={"datetime": dt},
        )


def validate_required_name(value: str | None, field_name: str) -> str:
    """
    Strip a user-supplied name and reject it if nothing is left.

    Returns the stripped value.
    """
    value = (value or "").strip()
    if not value:
        raise ValidationError(
            _("%(field)s is required."),
            params={"field": field_name},
            code="required",
        )
    return value
