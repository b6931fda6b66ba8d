"""Command values accepted by the CommandDispatcher.

One command per menu action.  Values arrive already typed: the menu
shell parses text, the dispatcher never sees raw input.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AddProduct:
    product_id: int
    name: str
    price: Decimal
    quantity: int
    discount: Decimal | None = None  # None -> regular product


@dataclass(frozen=True)
class UpdateProduct:
    product_id: int
    name: str
    price: Decimal
    quantity: int


@dataclass(frozen=True)
class DeleteProduct:
    product_id: int


@dataclass(frozen=True)
class ViewProducts:
    pass


@dataclass(frozen=True)
class LookupProduct:
    product_id: int


@dataclass(frozen=True)
class StartBilling:
    pass


@dataclass(frozen=True)
class AddToBill:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class ViewBill:
    pass


@dataclass(frozen=True)
class ClearBill:
    pass


@dataclass(frozen=True)
class EndBilling:
    pass


@dataclass(frozen=True)
class Exit:
    pass
