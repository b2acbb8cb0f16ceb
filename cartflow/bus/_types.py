"""
Bus types: channels, subscriptions, checkout payload.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from itertools import count
from typing import Protocol

from cartflow.cart import CheckoutLine, total_of

# ═══════════════════════════════════════════════════════════════════════════════
# Channels
# ═══════════════════════════════════════════════════════════════════════════════


class Channel(Enum):
    """Named message channels."""

    CART_UPDATED = "ShoppingCartUpdate"  # inbound signal, payload ignored
    CHECKOUT = "CheckoutMessageChannel"  # selected lines, see checkout_lines()


type Handler = Callable[[object], Awaitable[None] | None]
"""Receives one payload. May be sync or async."""

_subscription_ids = count(1)


@dataclass(eq=False, slots=True)
class Subscription:
    """Live registration of a handler on a channel."""

    channel: Channel
    handler: Handler
    id: int = field(default_factory=lambda: next(_subscription_ids))
    active: bool = True


# ═══════════════════════════════════════════════════════════════════════════════
# MessageBus Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class MessageBus(Protocol):
    """
    Publish/subscribe transport.

    At-most-once delivery per publish, fire-and-forget, nothing is
    delivered to a subscription after it is removed.
    """

    def subscribe(self, channel: Channel, handler: Handler) -> Subscription:
        ...

    def publish(self, channel: Channel, payload: object = None) -> None:
        ...

    def unsubscribe(self, subscription: Subscription) -> None:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Checkout Payload
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CheckoutPayload:
    """
    Immutable snapshot of the selected lines at checkout time.

    Lines are CheckoutLine copies, so editing the live cart afterwards
    cannot change a payload already published.
    """

    items: tuple[CheckoutLine, ...]
    total: Decimal

    @classmethod
    def of(cls, lines: tuple[CheckoutLine, ...], places: int = 2) -> CheckoutPayload:
        return cls(items=lines, total=total_of(lines, places))

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(line.id for line in self.items)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Channel",
    "Handler",
    "Subscription",
    "MessageBus",
    "CheckoutPayload",
)
