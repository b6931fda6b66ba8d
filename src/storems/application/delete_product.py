"""Application service: Delete Product use case."""

from __future__ import annotations

from storems.domain.exceptions import EntityNotFoundError
from storems.domain.model.inventory import Inventory


class DeleteProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, product_id: int) -> None:
        if not self._inventory.delete(product_id):
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
