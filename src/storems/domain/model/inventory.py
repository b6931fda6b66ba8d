"""Inventory aggregate: the session's product catalog.

The Inventory is the sole owner of every Product.  Each product gets a
serial key on ``add`` that is never reused; bill items keep that key and
resolve it here, so a deleted product simply stops resolving.

Ids are assigned by the caller and are not required to be unique.  Every
lookup returns the *first* product with a matching id.
"""

from __future__ import annotations

import itertools
import logging

from storems.domain.model.product import Product
from storems.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class Inventory:
    """Ordered collection of products, insertion order preserved.

    Operations report their outcome through the return value; none of
    them raise for a missing id.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = []
        self._keys = itertools.count(1)
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> bool:
        """Append *product* and give it a fresh key.  Always succeeds."""
        product.key = next(self._keys)
        self._products.append(product)
        logger.debug("Added product id=%s name=%r", product.id, product.name)
        return True

    def find_by_id(self, product_id: int) -> Product | None:
        """Return the first product with *product_id*, or None."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def find_by_key(self, key: int) -> Product | None:
        """Return the product holding *key*, or None once it was deleted."""
        for product in self._products:
            if product.key == key:
                return product
        return None

    def update(self, product_id: int, name: str, price: Money, quantity: int) -> bool:
        """Overwrite name/price/quantity of the first match.

        Returns False (and leaves the inventory untouched) if no product
        has *product_id*.
        """
        product = self.find_by_id(product_id)
        if product is None:
            logger.debug("Update skipped, id=%s not found", product_id)
            return False
        product.update(name, price, quantity)
        logger.debug("Updated product id=%s", product_id)
        return True

    def delete(self, product_id: int) -> bool:
        """Remove the first product with *product_id*; later entries shift."""
        for index, product in enumerate(self._products):
            if product.id == product_id:
                del self._products[index]
                logger.debug("Deleted product id=%s name=%r", product_id, product.name)
                return True
        logger.debug("Delete skipped, id=%s not found", product_id)
        return False

    def list_all(self) -> list[Product]:
        """Return the products in insertion order."""
        return list(self._products)

    @property
    def is_empty(self) -> bool:
        return not self._products

    def __len__(self) -> int:
        return len(self._products)
