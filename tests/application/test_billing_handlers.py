"""Integration tests for the billing use cases."""

import pytest

from storems.application.add_product import AddProductHandler
from storems.application.add_to_bill import AddToBillHandler
from storems.application.clear_bill import ClearBillHandler
from storems.application.show_bill import ShowBillHandler
from storems.domain.exceptions import EntityNotFoundError, InsufficientStockError
from storems.domain.model.bill import Bill
from storems.domain.model.inventory import Inventory


def _setup() -> tuple[Inventory, Bill]:
    inv = Inventory()
    AddProductHandler(inv).handle(1, "Pen", "10.0", 5)
    AddProductHandler(inv).handle(2, "Mug", "20.0", 10, discount="10")
    return inv, Bill(inv)


class TestAddToBill:

    def test_quantity_within_stock_allowed(self):
        inv, bill = _setup()
        AddToBillHandler(inv, bill).handle(1, 3)
        assert len(bill) == 1

    def test_quantity_equal_to_stock_allowed(self):
        inv, bill = _setup()
        AddToBillHandler(inv, bill).handle(1, 5)
        assert len(bill) == 1

    def test_quantity_above_stock_rejected(self):
        inv, bill = _setup()
        with pytest.raises(InsufficientStockError, match="need 6, have 5"):
            AddToBillHandler(inv, bill).handle(1, 6)
        assert bill.is_empty

    def test_unknown_product_rejected(self):
        inv, bill = _setup()
        with pytest.raises(EntityNotFoundError):
            AddToBillHandler(inv, bill).handle(42, 1)

    def test_stock_is_checked_not_reserved(self):
        inv, bill = _setup()
        handler = AddToBillHandler(inv, bill)
        handler.handle(1, 5)
        handler.handle(1, 5)
        assert inv.find_by_id(1).quantity == 5
        assert len(bill) == 2


class TestShowBill:

    def test_totals_formatted(self):
        inv, bill = _setup()
        AddToBillHandler(inv, bill).handle(1, 3)

        dto = ShowBillHandler(bill).handle()
        assert not dto.is_empty
        assert dto.lines[0].product_name == "Pen"
        assert dto.lines[0].line_total == "Rs.30.00"
        assert (dto.subtotal, dto.tax_rate, dto.tax, dto.grand_total) == (
            "Rs.30.00", "5%", "Rs.1.50", "Rs.31.50",
        )

    def test_empty_bill(self):
        _, bill = _setup()
        assert ShowBillHandler(bill).handle().is_empty


class TestClearBill:

    def test_clear(self):
        inv, bill = _setup()
        AddToBillHandler(inv, bill).handle(2, 2)
        ClearBillHandler(bill).handle()
        assert ShowBillHandler(bill).handle().subtotal == "Rs.0.00"
