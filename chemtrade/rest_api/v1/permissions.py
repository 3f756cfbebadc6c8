"""
Chemtrade REST API permissions
"""
from rest_framework.permissions import BasePermission


class MethodPermissions(BasePermission):
    """
    Checks the rules permission that the view maps to the request method.

    Views set ``perms_map`` to ``{"GET": "app_label.perm_name", ...}``. Methods
    missing from the map are denied, except OPTIONS.
    """

    def has_permission(self, request, view):
        if request.method == "OPTIONS":
            return True
        perm = getattr(view, "perms_map", {}).get(request.method)
        if perm is None:
            return False
        return request.user.has_perm(perm)
