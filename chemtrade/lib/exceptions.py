"""
Error types shared by the chemtrade apps.

Missing or empty required values are reported with Django's own
``django.core.exceptions.ValidationError``, the same as ``full_clean()`` does.
The types here cover the remaining failure kinds.
"""
from django.core.exceptions import ObjectDoesNotExist


class NotFoundError(ObjectDoesNotExist):
    """
    A content key, product id, category or sub-category does not exist.
    """


class DuplicateError(ValueError):
    """
    A name (category, sub-category, SKU) collides with an existing one.
    """


class ProtectedError(ValueError):
    """
    The operation targets something that is configured as undeletable.
    """


class PersistenceError(Exception):
    """
    The underlying store failed to read or write.

    Callers should log these and report a generic failure; the message may hold
    internal details that must not reach API clients.
    """


class DecodeError(ValueError):
    """
    Stored JSON could not be decoded into the expected structure.

    This never escapes the codec: decoding falls back to an empty structure.
    """
