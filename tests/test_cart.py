"""
Tests for CartViewModel.

Tests:
- load (success, failure, selection on reload)
- selection and select-all
- quantity edits and validation
- delete selected (success, failure, nothing selected)
"""
from decimal import Decimal

import pytest
from kungfu import Error, Ok

from cartflow.cart import CartViewModel, LineItem, SelectAll, coerce_quantity
from cartflow.errors import CartErrorKind
from cartflow.notify import Notice, Severity
from cartflow.policy import policy

# ============= Load =============


class TestLoad:
    @pytest.mark.asyncio
    async def test_load_decodes_products(self, cart, check_invariants):
        result = await cart.load()

        assert isinstance(result, Ok)
        state = cart.state
        assert [i.id for i in state.items] == ["A", "B", "C"]
        assert state.items[0] == LineItem(
            id="A",
            name="Espresso cup",
            unit_price=Decimal("10.00"),
            quantity=2,
            picture_url="https://img.example/a.png",
            selected=False,
        )
        assert state.selected == ()
        assert state.total == Decimal("0.00")
        check_invariants(state)

    @pytest.mark.asyncio
    async def test_load_failure_keeps_prior_state(self, cart, backend, notifier):
        await cart.load()
        cart.toggle_select("A")
        before = cart.state

        backend.fail("fetch_products", "Session expired")
        result = await cart.load()

        match result:
            case Error(e):
                assert e.kind is CartErrorKind.FETCH
                assert e.message == "Session expired"
            case Ok(_):
                pytest.fail("load should have failed")
        assert cart.state is before
        assert notifier.last == Notice("Error Fetching Products", "Session expired", Severity.ERROR)

    @pytest.mark.asyncio
    async def test_malformed_record_is_fetch_error(self, cart, backend):
        backend.seed([{"Id": "X", "Name": "No price", "Quantity__c": 1}])

        result = await cart.load()

        assert isinstance(result, Error)
        assert cart.state.is_empty

    @pytest.mark.asyncio
    async def test_reload_resets_selection(self, cart):
        await cart.load()
        cart.set_select_all(True)

        await cart.load()

        assert cart.state.selected == ()
        assert cart.state.select_all is SelectAll.NONE

    @pytest.mark.asyncio
    async def test_reload_keeps_selection_when_configured(self, backend, notifier):
        cart = CartViewModel(backend, notifier, policy(keep_selection_on_reload=True))
        await cart.load()
        cart.toggle_select("B")

        await cart.load()

        assert cart.state.selected_ids == ("B",)
        assert cart.state.total == Decimal("5.00")

    @pytest.mark.asyncio
    async def test_load_success_does_not_notify(self, cart, notifier):
        await cart.load()

        assert notifier.notices == []


# ============= Selection =============


class TestSelection:
    @pytest.mark.asyncio
    async def test_toggle_updates_total(self, cart, check_invariants):
        await cart.load()

        state = cart.toggle_select("A")
        assert state.total == Decimal("20.00")
        assert state.select_all is SelectAll.SOME
        check_invariants(state)

        state = cart.toggle_select("C")
        assert state.total == Decimal("27.01")
        check_invariants(state)

        state = cart.toggle_select("A")
        assert state.selected_ids == ("C",)
        assert state.total == Decimal("7.01")
        check_invariants(state)

    @pytest.mark.asyncio
    async def test_toggle_unknown_id_is_noop(self, cart):
        await cart.load()
        cart.toggle_select("A")

        state = cart.toggle_select("missing")

        assert state.selected_ids == ("A",)

    @pytest.mark.asyncio
    async def test_select_all(self, cart, check_invariants):
        await cart.load()

        state = cart.set_select_all(True)
        assert state.select_all is SelectAll.ALL
        assert state.total == Decimal("32.01")
        check_invariants(state)

        state = cart.set_select_all(False)
        assert state.select_all is SelectAll.NONE
        assert state.total == Decimal("0.00")
        check_invariants(state)

    @pytest.mark.asyncio
    async def test_selected_lines_are_copies(self, cart):
        await cart.load()
        cart.toggle_select("A")

        lines = cart.selected_lines()
        cart.set_quantity("A", 9)

        assert lines[0].quantity == 2
        cart.debouncer.cancel()

    @pytest.mark.asyncio
    async def test_earlier_state_survives_later_edits(self, cart, check_invariants):
        await cart.load()
        first = cart.toggle_select("A")

        cart.toggle_select("A")
        cart.set_select_all(True)
        cart.set_quantity("A", 7)
        cart.debouncer.cancel()

        assert first.selected_ids == ("A",)
        assert first.selected[0].selected
        assert first.selected[0].quantity == 2
        assert first.total == Decimal("20.00")
        check_invariants(first)

    @pytest.mark.asyncio
    async def test_editing_state_rows_does_not_reach_cart(self, cart, check_invariants):
        await cart.load()
        state = cart.state

        state.items[0].selected = True
        state.items[1].quantity = 50

        assert cart.toggle_select("C").selected_ids == ("C",)
        assert cart.item("B").quantity == 1
        check_invariants(cart.state)


# ============= Quantity =============


class TestQuantity:
    @pytest.mark.asyncio
    async def test_quantity_change_updates_total(self, cart, check_invariants):
        await cart.load()
        cart.toggle_select("A")

        result = cart.set_quantity("A", 5)

        match result:
            case Ok(state):
                assert state.total == Decimal("50.00")
                check_invariants(state)
            case Error(e):
                pytest.fail(f"unexpected error {e}")
        cart.debouncer.cancel()

    @pytest.mark.asyncio
    async def test_quantity_of_unselected_item_keeps_total(self, cart):
        await cart.load()
        cart.toggle_select("A")

        cart.set_quantity("B", 10)

        assert cart.state.total == Decimal("20.00")
        assert cart.item("B").quantity == 10
        cart.debouncer.cancel()

    @pytest.mark.asyncio
    async def test_numeric_string_accepted(self, cart):
        await cart.load()

        result = cart.set_quantity("A", " 4 ")

        assert isinstance(result, Ok)
        assert cart.item("A").quantity == 4
        cart.debouncer.cancel()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad", [-1, "abc", "2.5", True, None, 1.5])
    async def test_invalid_quantity_rejected(self, cart, notifier, bad):
        await cart.load()

        result = cart.set_quantity("A", bad)

        match result:
            case Error(e):
                assert e.kind is CartErrorKind.INVALID_QUANTITY
            case Ok(_):
                pytest.fail("quantity should be rejected")
        assert cart.item("A").quantity == 2
        assert not cart.debouncer.pending
        assert notifier.last.title == "Error Updating Quantity"
        assert notifier.last.severity is Severity.ERROR

    @pytest.mark.asyncio
    async def test_unknown_id_is_noop(self, cart):
        await cart.load()

        result = cart.set_quantity("missing", 3)

        assert isinstance(result, Ok)
        assert not cart.debouncer.pending

    def test_coerce_zero(self):
        result = coerce_quantity(0)

        assert isinstance(result, Ok)
        assert result.value == 0


# ============= Delete =============


class TestDeleteSelected:
    @pytest.mark.asyncio
    async def test_delete_removes_selected(self, cart, backend, notifier, check_invariants):
        await cart.load()
        cart.toggle_select("A")

        result = await cart.delete_selected()

        assert isinstance(result, Ok)
        state = cart.state
        assert [i.id for i in state.items] == ["B", "C"]
        assert state.selected == ()
        assert state.total == Decimal("0.00")
        check_invariants(state)
        assert backend.calls_to("delete_products")[0].args == (("A",),)
        assert backend.product("A") is None
        assert notifier.last == Notice("Success", "Selected products have been deleted.", Severity.SUCCESS)

    @pytest.mark.asyncio
    async def test_delete_is_one_batch_call(self, cart, backend):
        await cart.load()
        cart.toggle_select("A")
        cart.toggle_select("C")

        await cart.delete_selected()

        calls = backend.calls_to("delete_products")
        assert len(calls) == 1
        assert calls[0].args == (("A", "C"),)
        assert [i.id for i in cart.state.items] == ["B"]

    @pytest.mark.asyncio
    async def test_delete_failure_leaves_list(self, cart, backend, notifier):
        await cart.load()
        cart.toggle_select("A")
        cart.toggle_select("B")

        backend.fail("delete_products", "Record is locked")
        result = await cart.delete_selected()

        match result:
            case Error(e):
                assert e.kind is CartErrorKind.DELETE
            case Ok(_):
                pytest.fail("delete should have failed")
        assert [i.id for i in cart.state.items] == ["A", "B", "C"]
        assert cart.state.selected_ids == ("A", "B")
        assert cart.state.total == Decimal("25.00")
        assert notifier.last == Notice("Error Deleting Products", "Record is locked", Severity.ERROR)

    @pytest.mark.asyncio
    async def test_nothing_selected_skips_backend(self, cart, backend):
        await cart.load()

        result = await cart.delete_selected()

        assert isinstance(result, Ok)
        assert backend.calls_to("delete_products") == []
