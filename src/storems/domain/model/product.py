"""Product entity.

A product is a catalog entry with a stock count.  Pricing is a tagged
variant: REGULAR products charge ``price * qty``, DISCOUNTED products
take a percentage off that total.  Both variants share one storage layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from storems.domain.model.value_objects import Money, Percentage


class PricingKind(Enum):
    REGULAR = "REGULAR"
    DISCOUNTED = "DISCOUNTED"


@dataclass
class Product:
    """A product in the inventory.

    Mutable in place: name, price and quantity change through ``update``
    (or the individual setters).  The id and the pricing kind never change
    after construction.  Use the ``regular()`` / ``discounted()`` factories
    rather than passing ``kind`` by hand.
    """

    id: int
    name: str
    price: Money
    quantity: int
    kind: PricingKind = PricingKind.REGULAR
    discount: Percentage = field(default_factory=lambda: Percentage(Decimal("0")))
    # assigned by Inventory.add; unlike ids, never repeated
    key: int | None = field(default=None, compare=False)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def regular(id: int, name: str, price: Money, quantity: int) -> Product:
        return Product(id=id, name=name, price=price, quantity=quantity)

    @staticmethod
    def discounted(
        id: int,
        name: str,
        price: Money,
        quantity: int,
        discount: Percentage,
    ) -> Product:
        return Product(
            id=id,
            name=name,
            price=price,
            quantity=quantity,
            kind=PricingKind.DISCOUNTED,
            discount=discount,
        )

    # --- Mutators -------------------------------------------------------------

    def rename(self, new_name: str) -> None:
        self.name = new_name

    def reprice(self, new_price: Money) -> None:
        self.price = new_price

    def restock(self, new_quantity: int) -> None:
        self.quantity = new_quantity

    def update(self, name: str, price: Money, quantity: int) -> None:
        """Overwrite name, price and quantity in place."""
        self.rename(name)
        self.reprice(price)
        self.restock(quantity)

    # --- Pricing --------------------------------------------------------------

    @property
    def is_discounted(self) -> bool:
        return self.kind == PricingKind.DISCOUNTED

    def calculate_total(self, qty: int) -> Money:
        """Total charged for *qty* units of this product.

        The discount percentage is not range-checked, so a discount above
        100% gives a negative total.
        """
        total = self.price * qty
        if self.kind == PricingKind.DISCOUNTED:
            return total - self.discount.of_amount(total)
        return total
