"""
Convenience utilities for the Django Admin.
"""
from django.contrib import admin


class ReadOnlyModelAdmin(admin.ModelAdmin):
    """
    ModelAdmin subclass that removes any editing ability.

    The Django Admin is handy for looking at stored rows, but edits have to go
    through the api.py modules: publishing must promote every draft at once,
    and taxonomy edits must cascade into products. Editing rows here would skip
    all of that, so chemtrade admin classes should subclass this one.
    """

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
