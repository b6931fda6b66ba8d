"""Unit tests for the Product entity and its two pricing variants."""

from decimal import Decimal

from storems.domain.model.product import PricingKind, Product
from storems.domain.model.value_objects import Money, Percentage


def _pen(price: str = "10.0", qty: int = 5) -> Product:
    return Product.regular(1, "Pen", Money.of(price), qty)


def _mug(discount: str = "10") -> Product:
    return Product.discounted(2, "Mug", Money.of("20.0"), 10, Percentage.of(discount))


class TestRegularPricing:

    def test_total_is_price_times_qty(self):
        assert _pen().calculate_total(3) == Money.of("30.00")

    def test_total_is_exact(self):
        assert _pen(price="0.10").calculate_total(3).amount == Decimal("0.30")

    def test_zero_quantity(self):
        assert _pen().calculate_total(0) == Money.zero()

    def test_kind(self):
        assert _pen().kind == PricingKind.REGULAR
        assert not _pen().is_discounted


class TestDiscountedPricing:

    def test_discount_applied(self):
        assert _mug("10").calculate_total(2) == Money.of("36.00")

    def test_zero_discount_matches_regular(self):
        mug = _mug("0")
        regular = Product.regular(2, "Mug", Money.of("20.0"), 10)
        assert mug.calculate_total(4) == regular.calculate_total(4)

    def test_full_discount_is_free(self):
        assert _mug("100").calculate_total(7) == Money.zero()

    def test_discount_above_100_goes_negative(self):
        assert _mug("150").calculate_total(1) == Money.of("-10")

    def test_negative_discount_raises_total(self):
        assert _mug("-10").calculate_total(1) == Money.of("22")


class TestProductMutation:

    def test_update_overwrites_fields(self):
        pen = _pen()
        pen.update("Gel Pen", Money.of("12.5"), 8)
        assert (pen.name, pen.price, pen.quantity) == ("Gel Pen", Money.of("12.5"), 8)

    def test_update_keeps_id_and_kind(self):
        mug = _mug()
        mug.update("Big Mug", Money.of("25"), 3)
        assert mug.id == 2
        assert mug.is_discounted
        assert mug.calculate_total(1) == Money.of("22.5")

    def test_individual_setters(self):
        pen = _pen()
        pen.rename("Marker")
        pen.reprice(Money.of("3"))
        pen.restock(0)
        assert (pen.name, pen.price, pen.quantity) == ("Marker", Money.of("3"), 0)
