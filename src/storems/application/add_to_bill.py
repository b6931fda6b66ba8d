"""Application service: Add Product to Bill use case.

Stock is only *checked* here, never reserved or deducted: billing three
pens out of five leaves five pens in the inventory.
"""

from __future__ import annotations

from storems.domain.exceptions import EntityNotFoundError, InsufficientStockError
from storems.domain.model.bill import Bill
from storems.domain.model.inventory import Inventory


class AddToBillHandler:

    def __init__(self, inventory: Inventory, bill: Bill) -> None:
        self._inventory = inventory
        self._bill = bill

    def handle(self, product_id: int, quantity: int) -> None:
        product = self._inventory.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        if quantity > product.quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(need {quantity}, have {product.quantity})"
            )

        self._bill.add_item(product, quantity)
