"""Bill aggregate: a customer's line items for one billing session.

A BillItem stores the product's inventory *key*, never the product itself.  Prices and
discounts are read from the Inventory every time a total is computed, so
editing a product after billing it changes the bill.  An item whose
product has since been deleted is *stale*: it contributes nothing to the
totals and is shown as unavailable.

Adding to the bill never touches stock.  Checking that the requested
quantity is on hand is the caller's job (see ``AddToBillHandler``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from storems.domain.model.inventory import Inventory
from storems.domain.model.product import Product
from storems.domain.model.value_objects import Money, Percentage

logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Percentage(Decimal("5.0"))


@dataclass(frozen=True)
class BillItem:
    product_key: int | None
    product_id: int  # kept for display once the product is gone
    quantity: int


@dataclass(frozen=True)
class BillLine:
    """A bill item resolved against the inventory."""

    product_id: int
    product_name: str | None
    quantity: int
    line_total: Money

    @property
    def is_stale(self) -> bool:
        return self.product_name is None


class Bill:
    """Items plus a fixed tax rate.

    All derived values (subtotal, tax, grand total) are recomputed on
    every call.
    """

    def __init__(
        self,
        inventory: Inventory,
        tax_rate: Percentage = DEFAULT_TAX_RATE,
    ) -> None:
        self._inventory = inventory
        self._tax_rate = tax_rate
        self._items: list[BillItem] = []

    @property
    def tax_rate(self) -> Percentage:
        return self._tax_rate

    @property
    def items(self) -> list[BillItem]:
        return list(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    # --- Mutators -------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> None:
        self._items.append(
            BillItem(product_key=product.key, product_id=product.id, quantity=quantity)
        )
        logger.debug("Billed product id=%s qty=%s", product.id, quantity)

    def clear(self) -> None:
        self._items.clear()
        logger.debug("Bill cleared")

    # --- Computed values ------------------------------------------------------

    def item_total(self, item: BillItem) -> Money:
        product = self._resolve(item)
        if product is None:
            return Money.zero()
        return product.calculate_total(item.quantity)

    def _resolve(self, item: BillItem) -> Product | None:
        if item.product_key is None:
            return None
        return self._inventory.find_by_key(item.product_key)

    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + self.item_total(item)
        return result

    def tax(self) -> Money:
        return self._tax_rate.of_amount(self.subtotal())

    def grand_total(self) -> Money:
        return self.subtotal() + self.tax()

    def lines(self) -> list[BillLine]:
        """Resolve every item against the inventory, in billing order."""
        result: list[BillLine] = []
        for item in self._items:
            product = self._resolve(item)
            if product is None:
                logger.warning(
                    "Bill references product id=%s which is no longer in inventory",
                    item.product_id,
                )
                result.append(
                    BillLine(item.product_id, None, item.quantity, Money.zero())
                )
                continue
            result.append(
                BillLine(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=item.quantity,
                    line_total=product.calculate_total(item.quantity),
                )
            )
        return result
