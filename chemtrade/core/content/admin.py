"""
Django admin for site content models
"""
from __future__ import annotations

from django.contrib import admin

from chemtrade.lib.admin_utils import ReadOnlyModelAdmin

from .models import ContentEntry


@admin.register(ContentEntry)
class ContentEntryAdmin(ReadOnlyModelAdmin):
    """
    Read-only admin for ContentEntry model
    """
    fields = ["key", "live_value", "draft_value", "is_published", "last_published_at", "updated"]
    readonly_fields = fields
    list_display = ["key", "is_published", "dirty", "last_published_at", "updated"]
    list_filter = ["is_published"]
    search_fields = ["key"]

    @admin.display(boolean=True, description="Unpublished changes")
    def dirty(self, entry: ContentEntry):
        return not entry.is_published or (
            entry.draft_value is not None and entry.draft_value != entry.live_value
        )
