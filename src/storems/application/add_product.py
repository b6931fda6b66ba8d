"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from storems.domain.model.inventory import Inventory
from storems.domain.model.product import Product
from storems.domain.model.value_objects import Money, Percentage


class AddProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        product_id: int,
        name: str,
        price: str | Decimal,
        quantity: int,
        discount: str | Decimal | None = None,
    ) -> Product:
        """Add a regular product, or a discounted one when *discount* is given.

        The id is taken as-is; an id already in the inventory is accepted
        and shadowed by the earlier product on lookup.
        """
        if discount is None:
            product = Product.regular(product_id, name, Money.of(price), quantity)
        else:
            product = Product.discounted(
                product_id, name, Money.of(price), quantity, Percentage.of(discount)
            )
        self._inventory.add(product)
        return product
