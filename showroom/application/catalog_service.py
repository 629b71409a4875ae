"""Catalog application service.

Product listing and admin CRUD over the product store.
"""

from typing import Any

import structlog

from showroom.application.store_calls import call_store
from showroom.domain.entities import Product
from showroom.domain.exceptions import ProductNotFoundError, ValidationFailedError
from showroom.infrastructure.product_store import ProductStore, get_product_store

logger = structlog.get_logger()


def _require_name(name: Any) -> None:
    if name is None or not str(name).strip():
        raise ValidationFailedError("Missing required fields: name", fields=["name"])


class CatalogService:
    """Service for catalog operations."""

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    async def list_products(self) -> list[Product]:
        """List every product with its reviews."""
        return await call_store("list_products", self.store.list_products())

    async def get_product(self, product_id: int) -> Product:
        """Get a product or raise ProductNotFoundError."""
        product = await call_store(
            "find_by_numeric_id",
            self.store.find_by_numeric_id(product_id),
        )
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def add_product(self, fields: dict[str, Any]) -> Product:
        """Create a product with a store-assigned id and empty reviews/tokens.

        Raises:
            ValidationFailedError: If the name is missing.
        """
        _require_name(fields.get("name"))

        product = await call_store(
            "create_product",
            self.store.create_product(Product.create(fields)),
        )
        logger.info("Product created", product_id=product.id, name=product.name)
        return product

    async def update_product(self, product_id: int, fields: dict[str, Any]) -> Product:
        """Replace some or all catalog fields of a product.

        Raises:
            ValidationFailedError: If the update clears the name.
            ProductNotFoundError: If the product does not exist.
        """
        if "name" in fields:
            _require_name(fields["name"])

        product = await call_store(
            "update_product",
            self.store.update_product(product_id, fields),
        )
        if product is None:
            raise ProductNotFoundError(product_id)
        logger.info("Product updated", product_id=product_id, fields=sorted(fields))
        return product

    async def delete_product(self, product_id: int) -> None:
        """Delete a product with its reviews and tokens."""
        deleted = await call_store(
            "delete_product",
            self.store.delete_product(product_id),
        )
        if not deleted:
            raise ProductNotFoundError(product_id)
        logger.info("Product deleted", product_id=product_id)


def get_catalog_service() -> CatalogService:
    """Get catalog service bound to the current product store."""
    return CatalogService(get_product_store())
