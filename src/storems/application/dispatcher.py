"""Command dispatcher: the menu's logic without the terminal.

``CommandDispatcher.dispatch`` takes a command value, runs the matching
use case against the session and returns a ``CommandResult`` holding the
text to show.  Domain errors are reported as failed results; nothing
raised by a use case escapes ``dispatch``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from storems.application import commands
from storems.application.add_product import AddProductHandler
from storems.application.add_to_bill import AddToBillHandler
from storems.application.clear_bill import ClearBillHandler
from storems.application.delete_product import DeleteProductHandler
from storems.application.dto import BillDTO, ProductLineDTO
from storems.application.show_bill import ShowBillHandler
from storems.application.show_products import FindProductHandler, ShowProductsHandler
from storems.application.update_product import UpdateProductHandler
from storems.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
)
from storems.domain.model.bill import DEFAULT_TAX_RATE, Bill
from storems.domain.model.inventory import Inventory
from storems.domain.model.value_objects import Percentage

logger = logging.getLogger(__name__)

MSG_PRODUCT_ADDED = "Product added successfully!"
MSG_PRODUCT_UPDATED = "Product updated successfully!"
MSG_PRODUCT_DELETED = "Product deleted successfully!"
MSG_PRODUCT_NOT_FOUND = "Product not found!"
MSG_NO_PRODUCTS = "No products in inventory."
MSG_ADDED_TO_BILL = "Product added to bill!"
MSG_INSUFFICIENT_STOCK = "Insufficient stock!"
MSG_EMPTY_BILL = "No items in the bill!"
MSG_BILL_CLEARED = "Bill cleared!"
MSG_BILLING_STARTED = "Billing session started."
MSG_NO_BILLING = "No billing session in progress."
MSG_RETURNING = "Returning to Main Menu..."
MSG_GOODBYE = "Exiting... Goodbye!"
MSG_INVALID_CHOICE = "Invalid choice!"


@dataclass
class Session:
    """State of one application run.

    The inventory lives for the whole run; ``bill`` exists only while a
    billing session is open.
    """

    inventory: Inventory = field(default_factory=Inventory)
    tax_rate: Percentage = DEFAULT_TAX_RATE
    bill: Bill | None = None


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    message: str = ""
    lines: list[str] = field(default_factory=list)
    done: bool = False

    @property
    def output(self) -> list[str]:
        """Everything to print, in order."""
        return self.lines + ([self.message] if self.message else [])


class CommandDispatcher:

    def __init__(self, session: Session) -> None:
        self._session = session
        self._routes = {
            commands.AddProduct: self._add_product,
            commands.UpdateProduct: self._update_product,
            commands.DeleteProduct: self._delete_product,
            commands.ViewProducts: self._view_products,
            commands.LookupProduct: self._lookup_product,
            commands.StartBilling: self._start_billing,
            commands.AddToBill: self._add_to_bill,
            commands.ViewBill: self._view_bill,
            commands.ClearBill: self._clear_bill,
            commands.EndBilling: self._end_billing,
            commands.Exit: self._exit,
        }

    @property
    def session(self) -> Session:
        return self._session

    def dispatch(self, command: object) -> CommandResult:
        route = self._routes.get(type(command))
        if route is None:
            return CommandResult(ok=False, message=MSG_INVALID_CHOICE)

        try:
            return route(command)
        except EntityNotFoundError as exc:
            logger.info("%s", exc)
            return CommandResult(ok=False, message=MSG_PRODUCT_NOT_FOUND)
        except InsufficientStockError as exc:
            logger.info("%s", exc)
            return CommandResult(ok=False, message=MSG_INSUFFICIENT_STOCK)
        except DomainException as exc:
            logger.info("Command %s rejected: %s", type(command).__name__, exc)
            return CommandResult(ok=False, message=str(exc))

    # --- Inventory commands ---------------------------------------------------

    def _add_product(self, command: commands.AddProduct) -> CommandResult:
        handler = AddProductHandler(self._session.inventory)
        handler.handle(
            product_id=command.product_id,
            name=command.name,
            price=command.price,
            quantity=command.quantity,
            discount=command.discount,
        )
        return CommandResult(ok=True, message=MSG_PRODUCT_ADDED)

    def _update_product(self, command: commands.UpdateProduct) -> CommandResult:
        handler = UpdateProductHandler(self._session.inventory)
        handler.handle(
            product_id=command.product_id,
            name=command.name,
            price=command.price,
            quantity=command.quantity,
        )
        return CommandResult(ok=True, message=MSG_PRODUCT_UPDATED)

    def _delete_product(self, command: commands.DeleteProduct) -> CommandResult:
        DeleteProductHandler(self._session.inventory).handle(command.product_id)
        return CommandResult(ok=True, message=MSG_PRODUCT_DELETED)

    def _view_products(self, command: commands.ViewProducts) -> CommandResult:
        products = ShowProductsHandler(self._session.inventory).handle()
        if not products:
            return CommandResult(ok=True, message=MSG_NO_PRODUCTS)
        return CommandResult(ok=True, lines=_format_products(products))

    def _lookup_product(self, command: commands.LookupProduct) -> CommandResult:
        product = FindProductHandler(self._session.inventory).handle(command.product_id)
        return CommandResult(ok=True, lines=[_format_product(product)])

    # --- Billing commands -----------------------------------------------------

    def _start_billing(self, command: commands.StartBilling) -> CommandResult:
        self._session.bill = Bill(self._session.inventory, self._session.tax_rate)
        return CommandResult(ok=True, message=MSG_BILLING_STARTED)

    def _add_to_bill(self, command: commands.AddToBill) -> CommandResult:
        bill = self._session.bill
        if bill is None:
            return CommandResult(ok=False, message=MSG_NO_BILLING)
        AddToBillHandler(self._session.inventory, bill).handle(
            command.product_id, command.quantity
        )
        return CommandResult(ok=True, message=MSG_ADDED_TO_BILL)

    def _view_bill(self, command: commands.ViewBill) -> CommandResult:
        bill = self._session.bill
        if bill is None:
            return CommandResult(ok=False, message=MSG_NO_BILLING)
        dto = ShowBillHandler(bill).handle()
        if dto.is_empty:
            return CommandResult(ok=True, message=MSG_EMPTY_BILL)
        return CommandResult(ok=True, lines=_format_bill(dto))

    def _clear_bill(self, command: commands.ClearBill) -> CommandResult:
        bill = self._session.bill
        if bill is None:
            return CommandResult(ok=False, message=MSG_NO_BILLING)
        ClearBillHandler(bill).handle()
        return CommandResult(ok=True, message=MSG_BILL_CLEARED)

    def _end_billing(self, command: commands.EndBilling) -> CommandResult:
        self._session.bill = None
        return CommandResult(ok=True, message=MSG_RETURNING)

    def _exit(self, command: commands.Exit) -> CommandResult:
        self._session.bill = None
        return CommandResult(ok=True, message=MSG_GOODBYE, done=True)


# --- Formatting ---------------------------------------------------------------


def _format_products(products: list[ProductLineDTO]) -> list[str]:
    return ["=== PRODUCTS ==="] + [_format_product(p) for p in products]


def _format_product(product: ProductLineDTO) -> str:
    text = (
        f"ID: {product.id} | Name: {product.name} | Price: {product.price}"
        f" | Quantity: {product.quantity}"
    )
    if product.discount is not None:
        text += f" | Discount: {product.discount}"
    return text


def _format_bill(dto: BillDTO) -> list[str]:
    lines = ["=== CUSTOMER BILL ==="]
    for line in dto.lines:
        name = line.product_name
        if name is None:
            name = f"[product {line.product_id} no longer available]"
        lines.append(f"{name} x {line.quantity} = {line.line_total}")
    lines.append(f"Subtotal: {dto.subtotal}")
    lines.append(f"GST ({dto.tax_rate}): {dto.tax}")
    lines.append(f"Grand Total: {dto.grand_total}")
    return lines

