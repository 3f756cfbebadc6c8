"""
Tests for the taxonomy editing API
"""
import json
from unittest import mock

import pytest
from django.core.exceptions import ValidationError
from django.test import override_settings

from chemtrade.core.catalog import api as catalog_api
from chemtrade.core.content import api as content_api
from chemtrade.lib.exceptions import DuplicateError, NotFoundError, PersistenceError, ProtectedError
from chemtrade.lib.test_utils import TestCase
from chemtrade_taxonomy.core.taxonomy import api
from chemtrade_taxonomy.core.taxonomy.codec import CATEGORY_STRUCTURE_KEY, decode


def published_structure():
    return decode(content_api.get_published_content().get(CATEGORY_STRUCTURE_KEY))


class TestTaxonomyMixin:
    """
    Seeds a stored structure and a few products.
    """

    def setUp(self):
        super().setUp()
        content_api.update_draft(CATEGORY_STRUCTURE_KEY, json.dumps({"acids": ["strong"]}))
        content_api.publish_all_drafts()
        self.acetone = catalog_api.create_product(
            name="Acetone", sku="ACE-001", category="solvents", sub_category="ketones",
        )
        self.hcl = catalog_api.create_product(
            name="Hydrochloric acid", sku="HCL-001", category="acids", sub_category="strong",
        )


class WorkingSetTestCase(TestTaxonomyMixin, TestCase):
    """
    Tests for reading the working set.
    """

    def test_working_set(self):
        working_set = api.get_working_set()
        assert working_set.categories == ["acids", "solvents"]
        assert working_set.sub_categories == {"acids": {"strong"}, "solvents": {"ketones"}}

    def test_inactive_products_count(self):
        catalog_api.create_product(name="Benzene", sku="BEN-001", category="aromatics", is_active=False)
        assert "aromatics" in api.get_working_set().categories

    def test_draft_structure_wins(self):
        content_api.update_draft(CATEGORY_STRUCTURE_KEY, json.dumps({"bases": []}))
        assert api.get_category_structure() == {"bases": set()}

    def test_unreadable_structure(self):
        content_api.update_draft(CATEGORY_STRUCTURE_KEY, "not valid json")
        assert api.get_category_structure() == {}
        # Product categories still show up.
        assert api.get_working_set().categories == ["solvents", "acids"]


class CategoryTestCase(TestTaxonomyMixin, TestCase):
    """
    Tests for adding, renaming and deleting categories.
    """

    def test_add_category(self):
        change = api.add_category("  Bases ")
        assert change.working_set.categories == ["acids", "solvents", "bases"]
        assert change.products_changed == 0
        assert change.write.result(timeout=5) is None
        assert published_structure()["bases"] == set()

    def test_add_duplicate_any_case(self):
        api.add_category("Bases")
        with pytest.raises(DuplicateError):
            api.add_category("bases")
        with pytest.raises(DuplicateError):
            api.add_category("ACIDS")

    def test_add_blank(self):
        with pytest.raises(ValidationError):
            api.add_category("   ")

    def test_rename_cascades_to_products(self):
        change = api.rename_category("solvents", "Organics")

        assert change.products_changed == 1
        assert "organics" in change.working_set.categories
        assert "solvents" not in change.working_set.categories
        assert change.working_set.sub_categories["organics"] == {"ketones"}
        assert catalog_api.get_product(self.acetone.id).category == "organics"
        assert catalog_api.get_product(self.hcl.id).category == "acids"

        structure = published_structure()
        assert "organics" in structure
        assert "solvents" not in structure
        # Rebuilding from products doesn't bring the old name back.
        assert "solvents" not in api.get_working_set().categories

    def test_rename_keeps_position(self):
        change = api.rename_category("acids", "mineral acids")
        assert change.working_set.categories == ["mineral acids", "solvents"]

    def test_rename_to_existing(self):
        with pytest.raises(DuplicateError):
            api.rename_category("solvents", "Acids")

    def test_rename_case_only(self):
        change = api.rename_category("acids", "ACIDS")
        assert change.working_set.categories == ["acids", "solvents"]

    def test_rename_missing(self):
        with pytest.raises(NotFoundError):
            api.rename_category("bases", "alkalis")

    def test_delete_unused_category(self):
        api.add_category("bases")
        change = api.delete_category("Bases")
        assert "bases" not in change.working_set.categories
        assert "bases" not in published_structure()

    def test_delete_used_category_comes_back(self):
        change = api.delete_category("solvents")
        assert "solvents" not in change.working_set.categories
        assert "solvents" not in published_structure()
        # The product still says "solvents", so the next rebuild finds it.
        assert catalog_api.get_product(self.acetone.id).category == "solvents"
        assert "solvents" in api.get_working_set().categories

    def test_delete_missing(self):
        with pytest.raises(NotFoundError):
            api.delete_category("bases")

    @override_settings(CHEMTRADE={"PROTECTED_CATEGORIES": ["Acids"]})
    def test_delete_protected(self):
        with pytest.raises(ProtectedError):
            api.delete_category("acids")
        assert "acids" in api.get_working_set().categories


class SubCategoryTestCase(TestTaxonomyMixin, TestCase):
    """
    Tests for adding, renaming and deleting sub-categories.
    """

    def test_add_sub_category(self):
        change = api.add_sub_category("Acids", "weak")
        assert change.working_set.sub_categories["acids"] == {"strong", "weak"}
        assert published_structure()["acids"] == {"strong", "weak"}

    def test_add_keeps_case(self):
        change = api.add_sub_category("acids", "Weak")
        assert "Weak" in change.working_set.sub_categories["acids"]

    def test_add_duplicate_any_case(self):
        with pytest.raises(DuplicateError):
            api.add_sub_category("acids", "STRONG")

    def test_add_to_missing_category(self):
        with pytest.raises(NotFoundError):
            api.add_sub_category("bases", "weak")

    def test_add_blank(self):
        with pytest.raises(ValidationError):
            api.add_sub_category("acids", "")

    def test_rename_cascades_to_products(self):
        other = catalog_api.create_product(
            name="Sodium hydroxide", sku="NAOH-001", category="bases", sub_category="strong",
        )
        change = api.rename_sub_category("acids", "Strong", "mineral")

        assert change.products_changed == 1
        assert change.working_set.sub_categories["acids"] == {"mineral"}
        assert catalog_api.get_product(self.hcl.id).sub_category == "mineral"
        assert catalog_api.get_product(other.id).sub_category == "strong"
        assert published_structure()["acids"] == {"mineral"}

    def test_rename_to_existing(self):
        api.add_sub_category("acids", "weak")
        with pytest.raises(DuplicateError):
            api.rename_sub_category("acids", "strong", "Weak")

    def test_rename_missing(self):
        with pytest.raises(NotFoundError):
            api.rename_sub_category("acids", "weak", "dilute")

    def test_delete_sub_category(self):
        api.add_sub_category("acids", "weak")
        change = api.delete_sub_category("acids", "WEAK")
        assert change.working_set.sub_categories["acids"] == {"strong"}
        assert published_structure()["acids"] == {"strong"}

    def test_delete_missing(self):
        with pytest.raises(NotFoundError):
            api.delete_sub_category("acids", "weak")


class AutoPublishTestCase(TestCase):
    """
    Taxonomy edits are published right away.
    """

    def test_structure_only_scenario(self):
        content_api.update_draft(CATEGORY_STRUCTURE_KEY, json.dumps({"acids": ["strong"]}))
        content_api.publish_all_drafts()

        api.add_sub_category("acids", "weak")

        assert published_structure() == {"acids": {"strong", "weak"}}
        assert content_api.get_keys_with_unpublished_changes() == []

    def test_other_drafts_are_published_too(self):
        content_api.update_draft("home.hero_title", "Pending headline")
        assert "home.hero_title" not in content_api.get_published_content()

        api.add_category("acids")

        assert content_api.get_published_content()["home.hero_title"] == "Pending headline"

    def test_first_edit_creates_entry(self):
        assert content_api.get_all_content() == {}
        api.add_category("acids")
        entry = content_api.get_content_entry(CATEGORY_STRUCTURE_KEY)
        assert entry.is_published
        assert decode(entry.live_value) == {"acids": set()}


@override_settings(CHEMTRADE={"STORAGE": {"BACKEND": "chemtrade.core.storage.relational.RelationalRepository"}})
class RelationalTaxonomyTestCase(TestTaxonomyMixin, TestCase):
    """
    Product rewrites and the publish commit or roll back together.
    """

    def test_rename_cascades_to_products(self):
        change = api.rename_category("solvents", "organics")
        assert change.products_changed == 1
        assert catalog_api.get_product(self.acetone.id).category == "organics"
        assert "organics" in published_structure()

    def test_failed_publish_keeps_category(self):
        with mock.patch(
            "chemtrade.core.storage.relational.RelationalRepository.publish_all",
            side_effect=PersistenceError("database is gone"),
        ):
            with pytest.raises(PersistenceError):
                api.rename_category("solvents", "organics")

        assert catalog_api.get_product(self.acetone.id).category == "solvents"
        assert published_structure() == {"acids": {"strong"}}
        assert content_api.get_keys_with_unpublished_changes() == []
        assert api.get_working_set().sub_categories == {"acids": {"strong"}, "solvents": {"ketones"}}

    def test_failed_publish_keeps_sub_category(self):
        with mock.patch(
            "chemtrade.core.storage.relational.RelationalRepository.publish_all",
            side_effect=PersistenceError("database is gone"),
        ):
            with pytest.raises(PersistenceError):
                api.rename_sub_category("acids", "strong", "mineral")

        assert catalog_api.get_product(self.hcl.id).sub_category == "strong"
        assert published_structure() == {"acids": {"strong"}}
