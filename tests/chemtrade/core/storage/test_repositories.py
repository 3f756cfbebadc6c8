"""
Tests for the Repository implementations.

The same behavior is checked against both the in-memory and the relational
backend.
"""
from __future__ import annotations

import json
import tempfile
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest
from django.test import override_settings

from chemtrade.core.storage import get_repository
from chemtrade.core.storage.base import Repository
from chemtrade.core.storage.memory import MemoryRepository
from chemtrade.core.storage.relational import RelationalRepository
from chemtrade.core.storage.signals import PERSIST_FAILED
from chemtrade.lib.exceptions import PersistenceError
from chemtrade.lib.test_utils import TestCase

T0 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 3, 2, 12, 0, 0, tzinfo=timezone.utc)


class RepositoryBehaviorMixin:
    """
    Checks every Repository backend has to pass.
    """
    repository: Repository

    def make_repository(self) -> Repository:
        raise NotImplementedError  # pragma: no cover

    def setUp(self) -> None:
        super().setUp()  # type: ignore[misc]
        self.repository = self.make_repository()

    def _create(self, sku: str, category: str, sub_category: str | None = None, **extra):
        return self.repository.create_product(
            {"name": f"Product {sku}", "sku": sku, "category": category, "sub_category": sub_category, **extra},
            T0,
        )

    def test_new_draft_is_unpublished(self) -> None:
        entry = self.repository.upsert_draft("home.hero_title", "Hello", T0)
        assert entry.live_value == "Hello"
        assert entry.draft_value == "Hello"
        assert entry.is_published is False
        assert entry.last_published_at is None
        assert entry.has_unpublished_changes

    def test_draft_never_touches_live_value(self) -> None:
        self.repository.upsert_draft("home.hero_title", "Hello", T0)
        self.repository.publish_all(T0)
        entry = self.repository.upsert_draft("home.hero_title", "Goodbye", T1)
        assert entry.live_value == "Hello"
        assert entry.draft_value == "Goodbye"
        assert entry.is_published is True
        assert entry.updated == T1

    def test_publish_promotes_and_keeps_draft(self) -> None:
        self.repository.upsert_draft("a", "1", T0)
        self.repository.upsert_draft("b", "2", T0)
        promoted = self.repository.publish_all(T1)
        assert sorted(promoted) == ["a", "b"]

        entry = self.repository.get_content("a")
        assert entry is not None
        assert entry.live_value == "1"
        assert entry.draft_value == "1"  # retained, not cleared
        assert entry.is_published is True
        assert entry.last_published_at == T1
        assert not entry.has_unpublished_changes

    def test_setting_draft_back_to_live_value_is_clean(self) -> None:
        self.repository.upsert_draft("a", "1", T0)
        self.repository.publish_all(T0)
        self.repository.upsert_draft("a", "2", T0)
        assert self.repository.get_content("a").has_unpublished_changes
        self.repository.upsert_draft("a", "1", T1)
        assert not self.repository.get_content("a").has_unpublished_changes

    def test_empty_draft_is_promoted(self) -> None:
        self.repository.upsert_draft("a", "1", T0)
        self.repository.publish_all(T0)
        self.repository.upsert_draft("a", "", T1)
        self.repository.publish_all(T1)
        assert self.repository.get_content("a").live_value == ""

    def test_missing_rows(self) -> None:
        assert self.repository.get_content("nope") is None
        assert self.repository.get_product("nope") is None
        assert self.repository.get_product_by_sku("nope") is None
        assert self.repository.update_product("nope", {"name": "x"}, T0) is None
        assert self.repository.delete_product("nope") is False

    def test_product_lifecycle(self) -> None:
        product = self._create("ACE-1", "solvents", "ketones", price=Decimal("12.50"))
        assert self.repository.get_product(product.id) == product
        assert self.repository.get_product_by_sku("ACE-1") == product
        assert product.price == Decimal("12.50")

        updated = self.repository.update_product(product.id, {"is_active": False}, T1)
        assert updated is not None
        assert updated.is_active is False
        assert updated.updated == T1
        assert self.repository.list_products() == []
        assert self.repository.list_products(include_inactive=True) == [updated]

        assert self.repository.delete_product(product.id) is True
        assert self.repository.get_product(product.id) is None

    def test_rename_category(self) -> None:
        solvent = self._create("S-1", "Solvents")
        other = self._create("A-1", "acids")
        assert self.repository.rename_category("solvents", "organics", T1) == 1
        assert self.repository.get_product(solvent.id).category == "organics"
        assert self.repository.get_product(other.id).category == "acids"

    def test_rename_sub_category(self) -> None:
        strong = self._create("A-1", "acids", "strong")
        weak = self._create("A-2", "acids", "weak")
        elsewhere = self._create("B-1", "bases", "strong")
        assert self.repository.rename_sub_category("acids", "Strong", "mineral", T1) == 1
        assert self.repository.get_product(strong.id).sub_category == "mineral"
        assert self.repository.get_product(weak.id).sub_category == "weak"
        assert self.repository.get_product(elsewhere.id).sub_category == "strong"

    def test_persist_resolves(self) -> None:
        self.repository.upsert_draft("a", "1", T0)
        assert self.repository.persist().result(timeout=5) is None


class MemoryRepositoryTestCase(RepositoryBehaviorMixin, TestCase):
    """
    In-memory backend without a data file.
    """
    def make_repository(self) -> Repository:
        return MemoryRepository()


class RelationalRepositoryTestCase(RepositoryBehaviorMixin, TestCase):
    """
    Django ORM backend.
    """
    def make_repository(self) -> Repository:
        return RelationalRepository()


class MemoryRepositoryFileTestCase(TestCase):
    """
    In-memory backend saving to a JSON file.
    """
    def setUp(self) -> None:
        super().setUp()
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.data_file = Path(self.tmp_dir.name) / "data" / "storage.json"

    def tearDown(self) -> None:
        self.tmp_dir.cleanup()
        super().tearDown()

    def test_round_trip_through_file(self) -> None:
        repository = MemoryRepository(data_file=self.data_file)
        repository.upsert_draft("home.hero_title", "Hello", T0)
        repository.publish_all(T1)
        product = repository.create_product(
            {"name": "Acetone", "sku": "ACE-1", "category": "solvents", "price": Decimal("9.99")},
            T0,
        )
        repository.persist().result(timeout=5)
        repository.close()

        reloaded = MemoryRepository(data_file=self.data_file)
        entry = reloaded.get_content("home.hero_title")
        assert entry is not None
        assert entry.live_value == "Hello"
        assert entry.last_published_at == T1
        assert reloaded.get_product(product.id) == product
        reloaded.close()

    def test_corrupt_file_starts_empty(self) -> None:
        self.data_file.parent.mkdir(parents=True)
        self.data_file.write_text("{not json", encoding="utf-8")
        repository = MemoryRepository(data_file=self.data_file)
        assert repository.list_content() == {}
        assert repository.list_products(include_inactive=True) == []
        repository.close()

    def test_write_failure_is_reported(self) -> None:
        # A directory where the file should be makes every write fail.
        self.data_file.mkdir(parents=True)
        received = []

        def handler(sender, **kwargs):
            received.append(kwargs["exception"])

        PERSIST_FAILED.connect(handler)
        try:
            repository = MemoryRepository(data_file=self.data_file)
            repository.upsert_draft("a", "1", T0)
            write = repository.persist()
            with pytest.raises(PersistenceError):
                write.result(timeout=5)
            repository.close()
        finally:
            PERSIST_FAILED.disconnect(handler)

        assert len(received) == 1
        assert isinstance(received[0], PersistenceError)

    def test_file_contents(self) -> None:
        repository = MemoryRepository(data_file=self.data_file)
        repository.upsert_draft("a", "1", T0)
        repository.persist().result(timeout=5)
        repository.close()
        data = json.loads(self.data_file.read_text(encoding="utf-8"))
        assert data["content"][0]["key"] == "a"
        assert data["content"][0]["updated"] == T0.isoformat()
        assert data["products"] == []


class GetRepositoryTestCase(TestCase):
    """
    Backend selection from settings.
    """
    def test_default_is_memory(self) -> None:
        assert isinstance(get_repository(), MemoryRepository)

    def test_same_instance_per_process(self) -> None:
        assert get_repository() is get_repository()

    @override_settings(CHEMTRADE={"STORAGE": {"BACKEND": "chemtrade.core.storage.relational.RelationalRepository"}})
    def test_relational_from_settings(self) -> None:
        assert isinstance(get_repository(), RelationalRepository)

    @override_settings(CHEMTRADE={"STORAGE": {"BACKEND": "chemtrade.lib.exceptions.NotFoundError"}})
    def test_backend_must_be_repository(self) -> None:
        with pytest.raises(TypeError):
            get_repository()
