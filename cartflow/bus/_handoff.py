"""
Checkout hand-off: the component's side of both channels.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence

import structlog
from pydantic import ValidationError

from cartflow.bus._types import Channel, CheckoutPayload, MessageBus, Subscription
from cartflow.cart import CartViewModel, CheckoutLine, LineItem, ProductRecord

logger = structlog.get_logger(__name__)


def checkout_lines(payload: object) -> tuple[CheckoutLine, ...] | None:
    """
    Lines carried by a CHECKOUT payload, or None when it carries none.

    Accepts a CheckoutPayload, or a sequence whose elements are
    CheckoutLine, LineItem or product records with backend field names.
    A record that fails to decode makes the whole payload unreadable.
    """
    match payload:
        case CheckoutPayload(items=items):
            return items
        case str() | bytes():
            return None
        case Sequence():
            lines: list[CheckoutLine] = []
            for element in payload:
                match element:
                    case CheckoutLine():
                        lines.append(element)
                    case LineItem():
                        lines.append(element.freeze())
                    case Mapping():
                        try:
                            lines.append(ProductRecord.parse(element).to_domain().freeze())
                        except ValidationError:
                            return None
                    case _:
                        return None
            return tuple(lines)
        case _:
            return None


class CheckoutHandoff:
    """
    Subscriptions on CART_UPDATED and CHECKOUT for one component.

    CART_UPDATED → reload the cart, payload ignored.
    CHECKOUT     → whatever lines arrive replace the confirmation cart.
                   Nothing checks them against what this component
                   sent: any publisher on the channel can overwrite the
                   pending order.

    Reloads started by CART_UPDATED are tracked; close() cancels the
    ones still running.

    Example:
        handoff = CheckoutHandoff(bus, cart)
        handoff.subscribe()
        payload = handoff.request_checkout()
        await bus.settle()
        handoff.confirmation  # lines received back on CHECKOUT
        await handoff.close()
    """

    def __init__(self, bus: MessageBus, cart: CartViewModel, price_places: int = 2) -> None:
        self._bus = bus
        self._cart = cart
        self._price_places = price_places
        self._subscriptions: dict[Channel, Subscription] = {}
        self._confirmation: tuple[CheckoutLine, ...] = ()
        self._reloads: set[asyncio.Task[object]] = set()

    @property
    def subscribed(self) -> bool:
        return bool(self._subscriptions)

    @property
    def confirmation(self) -> tuple[CheckoutLine, ...]:
        """Confirmation-stage cart: last lines received on CHECKOUT."""
        return self._confirmation

    @property
    def reloading(self) -> bool:
        return bool(self._reloads)

    def subscribe(self) -> None:
        """Register both handlers. Channels already subscribed are skipped."""
        handlers = (
            (Channel.CART_UPDATED, self._on_cart_updated),
            (Channel.CHECKOUT, self._on_checkout),
        )
        for channel, handler in handlers:
            if channel not in self._subscriptions:
                self._subscriptions[channel] = self._bus.subscribe(channel, handler)

    def unsubscribe(self) -> None:
        for subscription in self._subscriptions.values():
            self._bus.unsubscribe(subscription)
        self._subscriptions.clear()

    async def close(self) -> int:
        """Unsubscribe and cancel reloads still in flight. Returns how many were cancelled."""
        self.unsubscribe()
        current = asyncio.current_task()
        running = tuple(t for t in self._reloads if t is not current)
        for task in running:
            task.cancel()
        if running:
            await asyncio.gather(*running, return_exceptions=True)
            logger.info("cart_reloads_cancelled", count=len(running))
        return len(running)

    def request_checkout(self) -> CheckoutPayload:
        """Publish a snapshot of the selected lines on CHECKOUT."""
        payload = CheckoutPayload.of(self._cart.selected_lines(), self._price_places)
        self._bus.publish(Channel.CHECKOUT, payload)
        logger.info("checkout_requested", items=list(payload.ids), total=str(payload.total))
        return payload

    async def _on_cart_updated(self, _payload: object) -> None:
        task = asyncio.current_task()
        if task is not None:
            self._reloads.add(task)
        try:
            await self._cart.load()
        finally:
            if task is not None:
                self._reloads.discard(task)

    def _on_checkout(self, payload: object) -> None:
        lines = checkout_lines(payload)
        if lines is None:
            logger.warning("checkout_payload_ignored", payload_type=type(payload).__name__)
            return
        self._confirmation = lines
        logger.info("confirmation_cart_replaced", items=[line.id for line in lines])


__all__ = ("checkout_lines", "CheckoutHandoff")
