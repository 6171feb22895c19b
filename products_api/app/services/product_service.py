"""
Service layer for the product catalog.

``ProductService`` translates between the API schemas and the
``ProductStore`` records and logs every mutation.  Lookups that miss
return ``None`` (or ``False`` for deletes) and the endpoints turn
that into a 404.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from products_api.app.core.store import Product, ProductStore
from products_api.app.schemas.product import ProductRead, ProductWrite

logger = logging.getLogger(__name__)


class ProductService:
    """CRUD operations over a single ``ProductStore``."""

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    def create_product(self, data: ProductWrite) -> ProductRead:
        product = self.store.create(name=data.name, price=data.price)
        logger.info("Created product %s", product.id)
        return self._to_read(product)

    def get_product(self, product_id: int) -> Optional[ProductRead]:
        product = self.store.get(product_id)
        if product is None:
            return None
        return self._to_read(product)

    def update_product(self, product_id: int, data: ProductWrite) -> Optional[ProductRead]:
        """Replace name and price of an existing product.

        This is a full replacement, not a merge: fields missing from
        the request take their defaults.
        """
        product = self.store.replace(product_id, name=data.name, price=data.price)
        if product is None:
            return None
        logger.info("Updated product %s", product_id)
        return self._to_read(product)

    def delete_product(self, product_id: int) -> bool:
        deleted = self.store.delete(product_id)
        if deleted:
            logger.info("Deleted product %s", product_id)
        return deleted

    def list_products(self) -> List[ProductRead]:
        return [self._to_read(product) for product in self.store.list()]

    @staticmethod
    def _to_read(product: Product) -> ProductRead:
        return ProductRead.model_validate(product)
