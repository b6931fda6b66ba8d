"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
Amounts are kept as exact Decimals and only rounded for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storems.domain.exceptions import ValidationError

CURRENCY_SYMBOL = "Rs."


def _coerce_decimal(value: str | float | int | Decimal, what: str) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {what}: {value!r}") from exc


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal so that ``price * qty`` is exact.  Negative amounts are
    allowed: a discount above 100% legitimately yields a negative total.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        return Money(self.amount - other.amount)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{CURRENCY_SYMBOL}{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_coerce_decimal(amount, "money amount"))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Percentage:
    """A percentage such as a discount or a tax rate.

    Range is deliberately not checked: 150% or -10% are representable.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Percentage must be a Decimal, got {type(self.value).__name__}"
            )

    def of_amount(self, money: Money) -> Money:
        """Return this percentage of *money*."""
        return Money(money.amount * self.value / Decimal(100))

    def __str__(self) -> str:
        # 10.0 -> "10%", 12.5 -> "12.5%"
        text = format(self.value.normalize(), "f")
        return f"{text}%"

    @staticmethod
    def of(value: str | float | int | Decimal) -> Percentage:
        return Percentage(_coerce_decimal(value, "percentage"))
