"""Application service: Show Products use case (query)."""

from __future__ import annotations

from storems.application.dto import ProductLineDTO
from storems.domain.exceptions import EntityNotFoundError
from storems.domain.model.inventory import Inventory
from storems.domain.model.product import Product


class ShowProductsHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> list[ProductLineDTO]:
        """Every product in insertion order; an empty list means no products."""
        return [self._to_dto(p) for p in self._inventory.list_all()]

    @staticmethod
    def _to_dto(product: Product) -> ProductLineDTO:
        return ProductLineDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            quantity=product.quantity,
            discount=str(product.discount) if product.is_discounted else None,
        )


class FindProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, product_id: int) -> ProductLineDTO:
        product = self._inventory.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return ShowProductsHandler._to_dto(product)
