import pytest

from django.core.management import call_command

from modules.products.management.commands.seed_products import SEED_PRODUCTS
from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestSeedProducts:
    def test_seeds_catalogue(self):
        call_command("seed_products")
        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert all(product.availability for product in Product.objects.all())

    def test_is_idempotent(self):
        call_command("seed_products")
        call_command("seed_products")
        assert Product.objects.count() == len(SEED_PRODUCTS)
