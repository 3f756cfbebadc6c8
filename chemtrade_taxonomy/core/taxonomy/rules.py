"""
Django rules-based permissions for the catalog taxonomy
"""
# typing support in rules depends on https://github.com/dfunckt/django-rules/pull/177
import rules  # type: ignore[import]

from chemtrade.core.content.rules import is_store_admin

# The working set includes unpublished structure and inactive products'
# categories, so even viewing it is admin-only. Visitors read the published
# structure through the public content endpoint instead.
rules.add_perm("chemtrade_taxonomy.view_taxonomy", is_store_admin)
rules.add_perm("chemtrade_taxonomy.change_taxonomy", is_store_admin)
