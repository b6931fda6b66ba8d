"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

from storems.domain.exceptions import EntityNotFoundError
from storems.domain.model.inventory import Inventory
from storems.domain.model.value_objects import Money


class UpdateProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        product_id: int,
        name: str,
        price: str | Decimal,
        quantity: int,
    ) -> None:
        """Overwrite a product's name, price and quantity.

        Bills that already list the product pick up the new price the
        next time they are totalled.
        """
        if not self._inventory.update(product_id, name, Money.of(price), quantity):
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
