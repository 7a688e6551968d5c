"""Product repository interface.

Extends ``IRepository[Product]`` with the write operations of the
Product resource.  Every operation is one atomic store call; look-ups
and writes against a missing id return ``None`` instead of raising.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def create(self, name: str, price: float) -> "Product":
        """Persist a new product; the store assigns ``id`` and ``availability``."""

    @abstractmethod
    def replace(
        self, id: int, name: str, price: float, availability: bool
    ) -> Optional["Product"]:
        """Overwrite every mutable field of a product."""

    @abstractmethod
    def toggle_availability(self, id: int) -> Optional["Product"]:
        """Flip ``availability`` leaving the other fields untouched."""
