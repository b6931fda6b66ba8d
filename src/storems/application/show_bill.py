"""Application service: Show Bill use case (query)."""

from __future__ import annotations

from storems.application.dto import BillDTO, BillLineDTO
from storems.domain.model.bill import Bill


class ShowBillHandler:

    def __init__(self, bill: Bill) -> None:
        self._bill = bill

    def handle(self) -> BillDTO:
        return BillDTO(
            lines=[
                BillLineDTO(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    line_total=str(line.line_total),
                )
                for line in self._bill.lines()
            ],
            subtotal=str(self._bill.subtotal()),
            tax_rate=str(self._bill.tax_rate),
            tax=str(self._bill.tax()),
            grand_total=str(self._bill.grand_total()),
        )
