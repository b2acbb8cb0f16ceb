"""
Selection & pricing: pure functions of the item list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP

from cartflow.cart._types import LineItem, CheckoutLine, SelectAll, CartState


def round_price(value: Decimal, places: int = 2) -> Decimal:
    """Round half up to `places` decimals: 0.005 → 0.01."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def total_of(items: Iterable[LineItem | CheckoutLine], places: int = 2) -> Decimal:
    """Rounded sum of unit_price * quantity."""
    return round_price(sum((i.subtotal for i in items), Decimal(0)), places)


def select_all_state(items: Sequence[LineItem]) -> SelectAll:
    """Tri-state from count(selected) against 0 and len(items)."""
    count = sum(1 for i in items if i.selected)
    if count == 0:
        return SelectAll.NONE
    if count < len(items):
        return SelectAll.SOME
    return SelectAll.ALL


def derive(items: Sequence[LineItem], places: int = 2) -> CartState:
    """
    Recompute selected subset, total and select-all state.

    Called after every mutation; carts are small enough that nothing
    is cached between calls. The state holds copies of the rows, so it
    stays consistent after the live items change.
    """
    snapshot = tuple(replace(i) for i in items)
    selected = tuple(i for i in snapshot if i.selected)
    return CartState(
        items=snapshot,
        selected=selected,
        total=total_of(selected, places),
        select_all=select_all_state(snapshot),
    )


__all__ = ("round_price", "total_of", "select_all_state", "derive")
