"""Product model.

Invariants enforced by the store:
- ``name`` is never empty.
- ``price`` is strictly greater than zero.
- ``availability`` defaults to ``True`` on creation.

Deletion is physical; ids are never reused by the store.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Product(TimestampedModel):
    name = models.CharField(max_length=255)
    price = models.FloatField()
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="products_name_not_empty",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.pk} - {self.name}"
