"""Unit tests for the Inventory aggregate."""

from storems.domain.model.inventory import Inventory
from storems.domain.model.product import Product
from storems.domain.model.value_objects import Money


def _product(product_id: int, name: str = "Pen", price: str = "10.0", qty: int = 5) -> Product:
    return Product.regular(product_id, name, Money.of(price), qty)


class TestInventoryAdd:

    def test_starts_empty(self):
        inv = Inventory()
        assert inv.is_empty
        assert len(inv) == 0
        assert inv.list_all() == []

    def test_add_then_find_returns_same_fields(self):
        inv = Inventory()
        assert inv.add(_product(1, "Pen", "10.0", 5)) is True

        found = inv.find_by_id(1)
        assert found is not None
        assert (found.id, found.name, found.price, found.quantity) == (
            1, "Pen", Money.of("10.0"), 5,
        )

    def test_insertion_order_preserved(self):
        inv = Inventory()
        for pid in (3, 1, 2):
            inv.add(_product(pid))
        assert [p.id for p in inv.list_all()] == [3, 1, 2]

    def test_duplicate_ids_accepted_first_match_wins(self):
        inv = Inventory()
        inv.add(_product(1, "First"))
        inv.add(_product(1, "Second"))
        assert len(inv) == 2
        assert inv.find_by_id(1).name == "First"


class TestInventoryFind:

    def test_unknown_id_returns_none(self):
        inv = Inventory([_product(1)])
        assert inv.find_by_id(99) is None


class TestInventoryUpdate:

    def test_update_existing(self):
        inv = Inventory([_product(1)])
        assert inv.update(1, "Marker", Money.of("4.5"), 9) is True
        p = inv.find_by_id(1)
        assert (p.name, p.price, p.quantity) == ("Marker", Money.of("4.5"), 9)

    def test_update_missing_leaves_inventory_unchanged(self):
        inv = Inventory([_product(1)])
        assert inv.update(2, "Ghost", Money.of("1"), 1) is False
        assert len(inv) == 1
        assert inv.find_by_id(1).name == "Pen"

    def test_update_touches_only_first_duplicate(self):
        inv = Inventory([_product(1, "First"), _product(1, "Second")])
        inv.update(1, "Changed", Money.of("1"), 1)
        assert [p.name for p in inv.list_all()] == ["Changed", "Second"]


class TestInventoryDelete:

    def test_delete_existing(self):
        inv = Inventory([_product(1), _product(2)])
        assert inv.delete(1) is True
        assert inv.find_by_id(1) is None
        assert len(inv) == 1

    def test_delete_shifts_later_entries(self):
        inv = Inventory([_product(1), _product(2), _product(3)])
        inv.delete(2)
        assert [p.id for p in inv.list_all()] == [1, 3]

    def test_delete_missing(self):
        inv = Inventory([_product(1)])
        assert inv.delete(7) is False
        assert len(inv) == 1

    def test_delete_first_duplicate_exposes_second(self):
        inv = Inventory([_product(1, "First"), _product(1, "Second")])
        inv.delete(1)
        assert inv.find_by_id(1).name == "Second"

    def test_list_all_is_a_copy(self):
        inv = Inventory([_product(1)])
        inv.list_all().clear()
        assert len(inv) == 1


class TestInventoryKeys:

    def test_add_assigns_distinct_keys_to_duplicate_ids(self):
        first, second = _product(1, "First"), _product(1, "Second")
        inv = Inventory([first, second])
        assert first.key is not None
        assert first.key != second.key
        assert inv.find_by_key(second.key) is second

    def test_deleted_key_no_longer_resolves(self):
        first, second = _product(1, "First"), _product(1, "Second")
        inv = Inventory([first, second])
        inv.delete(1)
        assert inv.find_by_key(first.key) is None

    def test_keys_are_not_reused_after_delete(self):
        first = _product(1)
        inv = Inventory([first])
        inv.delete(1)
        again = _product(1)
        inv.add(again)
        assert again.key != first.key
