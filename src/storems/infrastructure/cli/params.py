"""Custom click parameter types."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click


class DecimalParamType(click.ParamType):
    """Parse a plain decimal number such as ``10`` or ``19.99``."""

    name = "decimal"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid number.", param, ctx)
        if not result.is_finite():
            self.fail(f"{value!r} is not a valid number.", param, ctx)
        return result


DECIMAL = DecimalParamType()
