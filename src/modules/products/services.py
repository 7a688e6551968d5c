"""Product service layer (Use Cases).

Orchestrates the Product resource, delegating persistence to the
injected ``IProductRepository``.  Every operation on an existing product
looks it up first and raises ``ProductNotFound`` when it is absent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        product = self._repo.create(name=dto.name, price=dto.price)
        logger.info("product.created", product_id=product.id)
        return product

    def replace_product(self, id: int, dto: ReplaceProductDTO) -> Product:
        """Overwrite name, price and availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self.get_product(id)
        product = self._repo.replace(
            id,
            name=dto.name,
            price=dto.price,
            availability=dto.availability,
        )
        # Deleted between the look-up and the write.
        if product is None:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.replaced", product_id=id)
        return product

    def toggle_availability(self, id: int) -> Product:
        """Flip the availability flag of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self.get_product(id)
        product = self._repo.toggle_availability(id)
        if product is None:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info(
            "product.availability_toggled",
            product_id=id,
            availability=product.availability,
        )
        return product

    def delete_product(self, id: int) -> None:
        """Permanently remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self.get_product(id)
        if not self._repo.delete(id):
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        return product
