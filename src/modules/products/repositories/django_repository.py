"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
(or ``False``) instead of raising -- the Service Layer decides how to
translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction
from django.db.models import Case, Value, When
from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

# Largest key a BigAutoField can hold.
MAX_ID = 2**63 - 1


def _storable(id: int) -> bool:
    return 0 < id <= MAX_ID


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key; ``None`` when absent."""
        if not _storable(id):
            return None
        return Product.objects.filter(pk=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    @transaction.atomic
    def create(self, name: str, price: float) -> Product:
        product = Product.objects.create(name=name, price=price)
        logger.info("product.saved", product_id=product.pk)
        return product

    @transaction.atomic
    def replace(
        self, id: int, name: str, price: float, availability: bool
    ) -> Optional[Product]:
        if not _storable(id):
            return None
        updated = Product.objects.filter(pk=id).update(
            name=name,
            price=price,
            availability=availability,
            updated_at=timezone.now(),
        )
        if not updated:
            return None
        logger.info("product.saved", product_id=id)
        return Product.objects.get(pk=id)

    @transaction.atomic
    def toggle_availability(self, id: int) -> Optional[Product]:
        """Flip ``availability`` in a single UPDATE so concurrent toggles never
        read a stale value."""
        if not _storable(id):
            return None
        updated = Product.objects.filter(pk=id).update(
            availability=Case(
                When(availability=True, then=Value(False)),
                default=Value(True),
            ),
            updated_at=timezone.now(),
        )
        if not updated:
            return None
        return Product.objects.get(pk=id)

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a product; ``False`` when no row matched."""
        if not _storable(id):
            return False
        deleted, _ = Product.objects.filter(pk=id).delete()
        return deleted > 0
