"""
Django rules-based permissions for the product catalog
"""
# typing support in rules depends on https://github.com/dfunckt/django-rules/pull/177
import rules  # type: ignore[import]

from chemtrade.core.content.rules import is_store_admin

# Product
rules.add_perm("chemtrade_catalog.view_product", rules.always_allow)
rules.add_perm("chemtrade_catalog.add_product", is_store_admin)
rules.add_perm("chemtrade_catalog.change_product", is_store_admin)
rules.add_perm("chemtrade_catalog.delete_product", is_store_admin)
