"""
Django management command to import products from a JSON file.

The file holds a list of product objects using the same field names as the
catalog API (name, sku, category, sub_category, price, ...). Products whose SKU
is already in the catalog are skipped, so re-running an import is safe.

New categories and sub-categories need no extra step: the admin taxonomy is
rebuilt from products every time it is loaded.
"""
import json
import logging
import time

from django.core.exceptions import ValidationError
from django.core.management import CommandError
from django.core.management.base import BaseCommand

from chemtrade.core.catalog import api as catalog_api
from chemtrade.core.storage import get_repository
from chemtrade.core.storage.data import PRODUCT_FIELDS
from chemtrade.lib.exceptions import DuplicateError, PersistenceError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Load catalog products from a JSON file.
    """
    help = 'Import products from a JSON file, skipping SKUs that already exist.'

    def add_arguments(self, parser):
        parser.add_argument('file_name', type=str, help='Path of the JSON file with a list of products.')

    def handle(self, *args, **options):
        file_name = options['file_name']
        start_time = time.time()
        try:
            with open(file_name, encoding="utf-8") as f:
                rows = json.load(f)
        except FileNotFoundError as exc:
            raise CommandError(f"Catalog file {file_name} not found: {exc}") from exc
        except ValueError as exc:
            raise CommandError(f"Catalog file {file_name} is not valid JSON: {exc}") from exc

        if not isinstance(rows, list):
            raise CommandError("Catalog file must contain a JSON list of products")

        created = skipped = 0
        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                logger.warning("Skipping row %d of %s: not a JSON object", index, file_name)
                skipped += 1
                continue
            fields = {name: value for name, value in row.items() if name in PRODUCT_FIELDS}
            try:
                catalog_api.create_product(**fields)
                created += 1
            except DuplicateError:
                skipped += 1
            except ValidationError as exc:
                logger.warning("Skipping row %d of %s: %s", index, file_name, exc)
                skipped += 1

        # Don't report success until the write has actually landed.
        try:
            get_repository().persist().result()
        except PersistenceError as exc:
            raise CommandError(f"Imported products could not be saved: {exc}") from exc

        duration = time.time() - start_time
        self.stdout.write(self.style.SUCCESS(
            f"{created} products imported, {skipped} skipped (duration: {duration:.2f} seconds)"
        ))
