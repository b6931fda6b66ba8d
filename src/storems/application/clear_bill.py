"""Application service: Clear Bill use case."""

from __future__ import annotations

from storems.domain.model.bill import Bill


class ClearBillHandler:

    def __init__(self, bill: Bill) -> None:
        self._bill = bill

    def handle(self) -> None:
        self._bill.clear()
