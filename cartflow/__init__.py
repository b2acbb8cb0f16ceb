"""
cartflow: headless cart reconciliation and checkout hand-off.

    from cartflow import cart as C     # View-model, pricing, debounce
    from cartflow import bus as M      # Channels and checkout hand-off
    from cartflow import wizard as W   # Step navigation
    from cartflow import order as O    # Order submission
"""

from cartflow import cart
from cartflow import bus
from cartflow import wizard
from cartflow import order
from cartflow import backend
from cartflow import notify
from cartflow import lift
from cartflow.component import OrderComponent
from cartflow.errors import CartError, CartErrorKind
from cartflow.policy import CartPolicy
from cartflow._logging import configure_logging
from cartflow._types import (
    Remote,
    ItemId,
    OrderId,
)

__version__ = "0.1.0"

__all__ = (
    "cart",
    "bus",
    "wizard",
    "order",
    "backend",
    "notify",
    "lift",
    "OrderComponent",
    "CartError",
    "CartErrorKind",
    "CartPolicy",
    "configure_logging",
    "Remote",
    "ItemId",
    "OrderId",
)
