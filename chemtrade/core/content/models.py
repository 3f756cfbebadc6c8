"""
Site content that the storefront admin edits and publishes.

Each ContentEntry is a key (like "home.hero_title" or "category_structure")
with a live value that every visitor sees, and a draft value that only admins
see until the next publish.

These models are only used when the relational storage backend is configured.
Nothing outside ``chemtrade.core.storage.relational`` should query them
directly; go through ``chemtrade.core.content.api`` instead.
"""
from django.db import models

from chemtrade.lib.fields import key_field, manual_date_time_field


class ContentEntry(models.Model):
    """
    One editable piece of site content.

    Publishing copies ``draft_value`` into ``live_value`` but does not clear the
    draft, so after a publish the two are equal. Whether there are unpublished
    changes is decided by comparing them.
    """
    key = key_field(unique=True)

    live_value = models.TextField(blank=True, default="")
    draft_value = models.TextField(blank=True, null=True)

    # False until the first publish that included this key.
    is_published = models.BooleanField(default=False)
    last_published_at = manual_date_time_field(null=True, blank=True)

    updated = manual_date_time_field()

    def __str__(self):
        return f"{self.key}"

    class Meta:
        verbose_name = "Content Entry"
        verbose_name_plural = "Content Entries"
