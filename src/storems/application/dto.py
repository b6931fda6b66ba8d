"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry already-formatted values from the application layer to the
dispatcher and the menu shell without exposing the domain model.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: one product as listed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "Rs.10.00"
    quantity: int
    discount: str | None  # e.g. "10%", None for regular products


@dataclass(frozen=True)
class BillLineDTO:
    """Output: one bill line as displayed to the user."""

    product_id: int
    product_name: str | None  # None when the product was deleted
    quantity: int
    line_total: str


@dataclass(frozen=True)
class BillDTO:
    """Output: the whole bill with its derived totals."""

    lines: list[BillLineDTO]
    subtotal: str
    tax_rate: str
    tax: str
    grand_total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines
