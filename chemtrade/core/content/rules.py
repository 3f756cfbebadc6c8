"""
Django rules-based permissions for site content
"""
from __future__ import annotations

from typing import Callable, Union

import django.contrib.auth.models
# typing support in rules depends on https://github.com/dfunckt/django-rules/pull/177
import rules  # type: ignore[import]

UserType = Union[
    django.contrib.auth.models.User, django.contrib.auth.models.AnonymousUser
]


# Global staff are storefront admins.
# (Superusers can already do anything)
is_store_admin: Callable[[UserType], bool] = rules.is_staff


# Anyone can read published content. Drafts and unpublished entries are only
# visible to admins, as is everything that changes content.
rules.add_perm("chemtrade_content.view_contententry", rules.always_allow)
rules.add_perm("chemtrade_content.view_draft_contententry", is_store_admin)
rules.add_perm("chemtrade_content.change_contententry", is_store_admin)
rules.add_perm("chemtrade_content.publish_contententry", is_store_admin)
