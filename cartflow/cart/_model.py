"""
Cart view-model: owns the line items and keeps derived state current.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from kungfu import Result, Ok, Error

from cartflow._types import ItemId
from cartflow.backend import CartBackend, Record
from cartflow.cart._debounce import Debouncer
from cartflow.cart._pricing import derive
from cartflow.cart._records import ProductRecord
from cartflow.cart._types import LineItem, CheckoutLine, CartState
from cartflow.errors import CartError, CartErrorKind
from cartflow.lift import remote
from cartflow.notify import Notifier, Severity
from cartflow.policy import CartPolicy

logger = structlog.get_logger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Notice Titles
# ═══════════════════════════════════════════════════════════════════════════════

FETCH_FAILED = "Error Fetching Products"
DELETE_FAILED = "Error Deleting Products"
QUANTITY_FAILED = "Error Updating Quantity"
SUCCESS = "Success"
DELETED_MESSAGE = "Selected products have been deleted."
QUANTITY_MESSAGE = "Quantity updated successfully."


# ═══════════════════════════════════════════════════════════════════════════════
# Quantity Input
# ═══════════════════════════════════════════════════════════════════════════════


def coerce_quantity(value: object) -> Result[int, CartError]:
    """
    Accept non-negative ints and numeric strings ("3", " 12 ").

    bool, negative and non-numeric input is INVALID_QUANTITY.
    """
    match value:
        case bool():
            quantity = None
        case int():
            quantity = value
        case str():
            try:
                quantity = int(value.strip())
            except ValueError:
                quantity = None
        case _:
            quantity = None

    if quantity is None:
        return Error(CartError(CartErrorKind.INVALID_QUANTITY, f"Not a quantity: {value!r}"))
    if quantity < 0:
        return Error(CartError(CartErrorKind.INVALID_QUANTITY, f"Quantity must not be negative: {quantity}"))
    return Ok(quantity)


# ═══════════════════════════════════════════════════════════════════════════════
# CartViewModel
# ═══════════════════════════════════════════════════════════════════════════════


class CartViewModel:
    """
    Authoritative in-memory cart.

    Every mutating call re-derives selection and total before it returns,
    so `state` is never stale. Backend failures are notified, logged and
    returned as Error(CartError); prior state is kept.

    Example:
        cart = CartViewModel(backend, notifier)
        await cart.load()
        cart.toggle_select("A")
        cart.set_quantity("A", 3)      # persisted after the debounce delay
        await cart.delete_selected()
    """

    def __init__(
        self,
        backend: CartBackend,
        notifier: Notifier,
        policy: CartPolicy = CartPolicy(),
    ) -> None:
        self._backend = backend
        self._notifier = notifier
        self._policy = policy
        self._items: list[LineItem] = []
        self._state = derive((), policy.price_places)
        self._debouncer = Debouncer(policy.debounce_seconds)

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    def item(self, item_id: ItemId) -> LineItem | None:
        """Row of the current state, a copy of the live line."""
        for item in self._state.items:
            if item.id == item_id:
                return item
        return None

    def selected_lines(self) -> tuple[CheckoutLine, ...]:
        """Frozen copies of the selected lines."""
        return tuple(i.freeze() for i in self._state.selected)

    # ── Load ────────────────────────────────────────────────────────────────

    async def load(self) -> Result[CartState, CartError]:
        """Replace the items with a fresh fetch."""
        result = await remote(self._fetch_items, CartErrorKind.FETCH)
        match result:
            case Ok(items):
                if self._policy.keep_selection_on_reload:
                    keep = set(self._state.selected_ids)
                    for item in items:
                        item.selected = item.id in keep
                self._items = items
                state = self._recompute()
                logger.info("cart_loaded", count=len(items), selected=len(state.selected))
                return Ok(state)
            case Error(e):
                self._report(FETCH_FAILED, e)
                return Error(e)

    async def _fetch_items(self) -> list[LineItem]:
        records: Sequence[Record] = await self._backend.fetch_products()
        return [ProductRecord.parse(r).to_domain() for r in records]

    # ── Selection ───────────────────────────────────────────────────────────

    def toggle_select(self, item_id: ItemId) -> CartState:
        """Flip selection of one line. Unknown ids are ignored."""
        item = self._find(item_id)
        if item is not None:
            item.selected = not item.selected
        return self._recompute()

    def set_select_all(self, selected: bool) -> CartState:
        for item in self._items:
            item.selected = selected
        return self._recompute()

    # ── Quantity ────────────────────────────────────────────────────────────

    def set_quantity(self, item_id: ItemId, quantity: object) -> Result[CartState, CartError]:
        """
        Update one line's quantity and schedule debounced persistence.

        Unknown ids are ignored (Ok with unchanged state).
        """
        match coerce_quantity(quantity):
            case Error(e):
                self._report(QUANTITY_FAILED, e)
                return Error(e)
            case Ok(value):
                pass

        item = self._find(item_id)
        if item is None:
            return Ok(self._state)

        item.quantity = value
        state = self._recompute()
        self._debouncer.schedule(lambda: self._persist_quantity(item))
        return Ok(state)

    async def _persist_quantity(self, item: LineItem) -> None:
        record = ProductRecord.from_domain(item).to_backend()
        result = await remote(
            lambda: self._backend.update_product_quantity(record),
            CartErrorKind.QUANTITY_UPDATE,
        )
        match result:
            case Ok(_):
                logger.info("quantity_persisted", item_id=item.id, quantity=record["Quantity__c"])
                self._notifier.notify(SUCCESS, QUANTITY_MESSAGE, Severity.SUCCESS)
            case Error(e):
                self._report(QUANTITY_FAILED, e, item_id=item.id)

    # ── Delete ──────────────────────────────────────────────────────────────

    async def delete_selected(self) -> Result[CartState, CartError]:
        """Delete every selected line in one backend call, all or nothing."""
        ids = self._state.selected_ids
        if not ids:
            return Ok(self._state)

        result = await remote(
            lambda: self._backend.delete_products(list(ids)),
            CartErrorKind.DELETE,
        )
        match result:
            case Ok(_):
                removed = set(ids)
                self._items = [i for i in self._items if i.id not in removed]
                for item in self._items:
                    item.selected = False
                state = self._recompute()
                logger.info("cart_items_deleted", ids=list(ids), remaining=len(self._items))
                self._notifier.notify(SUCCESS, DELETED_MESSAGE, Severity.SUCCESS)
                return Ok(state)
            case Error(e):
                self._report(DELETE_FAILED, e, ids=list(ids))
                return Error(e)

    # ── Internals ───────────────────────────────────────────────────────────

    def _find(self, item_id: ItemId) -> LineItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def _recompute(self) -> CartState:
        self._state = derive(self._items, self._policy.price_places)
        return self._state

    def _report(self, title: str, error: CartError, **context: object) -> None:
        logger.warning("cart_operation_failed", kind=error.kind.name, message=error.message, **context)
        self._notifier.notify(title, error.message, Severity.ERROR)


__all__ = ("coerce_quantity", "CartViewModel")
