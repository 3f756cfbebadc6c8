"""
Utilities for the API
"""
from __future__ import annotations

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from edx_rest_framework_extensions.auth.jwt.authentication import JwtAuthentication  # type: ignore[import]
from edx_rest_framework_extensions.auth.session.authentication import (  # type: ignore[import]
    SessionAuthenticationAllowInactiveUser,
)
from rest_framework import status
from rest_framework.response import Response

from chemtrade.lib.exceptions import DuplicateError, NotFoundError, PersistenceError, ProtectedError

log = logging.getLogger(__name__)


def view_auth_classes(func_or_class):
    """
    Function and class decorator that abstracts the authentication classes for api views.
    """
    def _decorator(func_or_class):
        """
        Requires either JWT or Session-based authentication.
        """
        func_or_class.authentication_classes = (
            JwtAuthentication,
            SessionAuthenticationAllowInactiveUser,
        )
        return func_or_class
    return _decorator(func_or_class)


class APIErrorsMixin:
    """
    Turns chemtrade API errors into ``{"message": ...}`` responses.

    Mix into any APIView/ViewSet that calls the chemtrade api modules, ahead of
    the DRF base class.
    """

    def handle_exception(self, exc):
        if isinstance(exc, DjangoValidationError):
            return Response({"message": " ".join(exc.messages)}, status=status.HTTP_400_BAD_REQUEST)
        if isinstance(exc, (DuplicateError, ProtectedError)):
            return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        if isinstance(exc, NotFoundError):
            return Response({"message": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        if isinstance(exc, PersistenceError):
            # Details stay in the log; they can include paths and SQL.
            log.exception("Storage failure in %s", type(self).__name__)
            return Response(
                {"message": "Internal server error"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return super().handle_exception(exc)  # type: ignore[misc]
