"""
Bus: cross-component messaging and the checkout hand-off.

    from cartflow import bus as M

    bus = M.LocalBus()
    handoff = M.CheckoutHandoff(bus, cart)
    handoff.subscribe()
    bus.publish(M.Channel.CART_UPDATED)   # cart reloads
"""

from __future__ import annotations

from cartflow.bus._types import (
    Channel,
    Handler,
    Subscription,
    MessageBus,
    CheckoutPayload,
)
from cartflow.bus._local import LocalBus
from cartflow.bus._handoff import CheckoutHandoff, checkout_lines

__all__ = (
    "Channel",
    "Handler",
    "Subscription",
    "MessageBus",
    "CheckoutPayload",
    "LocalBus",
    "CheckoutHandoff",
    "checkout_lines",
)
