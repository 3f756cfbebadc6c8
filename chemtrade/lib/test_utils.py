"""
Test utilities for chemtrade.

Every test should start from an empty store. The storage Repository is built
once per process through ``chemtrade.lib.cache.lru_cache``, so the test case
classes here clear those caches around each test, which gives every test a
freshly built Repository.

Because the in-memory Repository is not rolled back with the database
transaction, put fixture data in ``setUp`` rather than ``setUpTestData``.
"""
import django.test
from django.contrib.auth import get_user_model
from rest_framework import test as drf_test

from .cache import clear_lru_caches


class TestCase(django.test.TestCase):
    """
    Subclass of Django's TestCase that knows how to reset caching we might use.
    """
    def setUp(self) -> None:
        clear_lru_caches()
        super().setUp()

    def tearDown(self) -> None:
        clear_lru_caches()
        super().tearDown()


class APITestCase(drf_test.APITestCase):
    """
    DRF APITestCase with a fresh Repository plus a plain user and a staff user.

    Staff users are store admins.
    """
    def setUp(self) -> None:
        clear_lru_caches()
        super().setUp()

        User = get_user_model()  # pylint: disable=invalid-name
        self.user = User.objects.create(
            username="user",
            email="user@example.com",
        )
        self.staff = User.objects.create(
            username="staff",
            email="staff@example.com",
            is_staff=True,
        )

    def tearDown(self) -> None:
        clear_lru_caches()
        super().tearDown()
