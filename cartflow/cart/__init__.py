"""
Cart: view-model, selection & pricing, debounced persistence.

    from cartflow import cart as C

    cart = C.CartViewModel(backend, notifier)
    await cart.load()
    cart.toggle_select("A")
    print(cart.state.total, cart.state.select_all.indeterminate)
"""

from __future__ import annotations

from cartflow.cart._types import LineItem, CheckoutLine, SelectAll, CartState
from cartflow.cart._pricing import round_price, total_of, select_all_state, derive
from cartflow.cart._debounce import Debouncer
from cartflow.cart._records import ProductRecord
from cartflow.cart._model import CartViewModel, coerce_quantity

__all__ = (
    "LineItem",
    "CheckoutLine",
    "SelectAll",
    "CartState",
    "round_price",
    "total_of",
    "select_all_state",
    "derive",
    "Debouncer",
    "ProductRecord",
    "CartViewModel",
    "coerce_quantity",
)
