"""
Tests for selection & pricing.

Tests:
- round_price half-up rounding
- derive() selected subset and total
- select-all tri-state
"""
from decimal import Decimal

import pytest

from cartflow.cart import LineItem, SelectAll, derive, round_price, select_all_state


def item(item_id: str, price: str, qty: int, selected: bool = False) -> LineItem:
    return LineItem(id=item_id, name=item_id, unit_price=Decimal(price), quantity=qty, selected=selected)


class TestRoundPrice:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("7.005", "7.01"),
            ("7.004", "7.00"),
            ("0.125", "0.13"),
            ("20", "20.00"),
        ],
    )
    def test_half_up(self, value, expected):
        assert round_price(Decimal(value)) == Decimal(expected)

    def test_other_precision(self):
        assert round_price(Decimal("1.2345"), places=3) == Decimal("1.235")


class TestDerive:
    def test_scenario_single_selected(self):
        """A(10 x 2, selected) + B(5 x 1) → 20.00, only A selected."""
        a = item("A", "10", 2, selected=True)
        b = item("B", "5", 1)

        state = derive([a, b])

        assert state.total == Decimal("20.00")
        assert state.selected == (a,)
        assert state.selected_ids == ("A",)

    def test_nothing_selected_is_zero(self):
        state = derive([item("A", "10", 2), item("B", "5", 1)])

        assert state.total == Decimal("0.00")
        assert state.selected == ()

    def test_empty_cart(self):
        state = derive([])

        assert state.is_empty
        assert state.total == Decimal(0)
        assert state.select_all is SelectAll.NONE

    def test_total_rounds_the_sum(self):
        state = derive([item("A", "2.335", 3, selected=True), item("B", "0.001", 1, selected=True)])

        # 7.005 + 0.001 = 7.006
        assert state.total == Decimal("7.01")

    def test_keeps_item_order(self):
        items = [item("C", "1", 1, True), item("A", "1", 1), item("B", "1", 1, True)]

        state = derive(items)

        assert [i.id for i in state.items] == ["C", "A", "B"]
        assert [i.id for i in state.selected] == ["C", "B"]

    def test_rows_are_copies(self):
        a = item("A", "10", 2, selected=True)

        state = derive([a])
        a.selected = False
        a.quantity = 5

        assert state.items[0] is not a
        assert state.selected[0] is state.items[0]
        assert state.selected[0].quantity == 2
        assert state.total == Decimal("20.00")


class TestSelectAllState:
    def test_none_selected(self):
        state = select_all_state([item("A", "1", 1), item("B", "1", 1)])

        assert state is SelectAll.NONE
        assert not state.checked
        assert not state.indeterminate

    def test_some_selected(self):
        state = select_all_state([item("A", "1", 1, True), item("B", "1", 1)])

        assert state is SelectAll.SOME
        assert not state.checked
        assert state.indeterminate

    def test_all_selected(self):
        state = select_all_state([item("A", "1", 1, True), item("B", "1", 1, True)])

        assert state is SelectAll.ALL
        assert state.checked
        assert not state.indeterminate
