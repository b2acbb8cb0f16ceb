"""
In-process message bus on the running event loop.
"""

from __future__ import annotations

import asyncio
import inspect
from collections import defaultdict
from collections.abc import Awaitable

import structlog

from cartflow.bus._types import Channel, Handler, Subscription

logger = structlog.get_logger(__name__)


class LocalBus:
    """
    MessageBus for components living on one event loop.

    publish() never calls handlers inline: each delivery is queued with
    loop.call_soon, in publish order. A subscription removed before its
    delivery runs gets nothing. Coroutine handlers run as tasks; handler
    errors are logged and never reach the publisher.

    Example:
        bus = LocalBus()
        sub = bus.subscribe(Channel.CART_UPDATED, on_update)
        bus.publish(Channel.CART_UPDATED)
        await bus.settle()
        bus.unsubscribe(sub)
    """

    def __init__(self) -> None:
        self._subscriptions: defaultdict[Channel, list[Subscription]] = defaultdict(list)
        self._queued = 0
        self._tasks: set[asyncio.Task[None]] = set()

    def subscribe(self, channel: Channel, handler: Handler) -> Subscription:
        subscription = Subscription(channel, handler)
        self._subscriptions[channel].append(subscription)
        logger.debug("bus_subscribed", channel=channel.value, subscription=subscription.id)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.active = False
        subscribers = self._subscriptions[subscription.channel]
        if subscription in subscribers:
            subscribers.remove(subscription)
            logger.debug("bus_unsubscribed", channel=subscription.channel.value, subscription=subscription.id)

    def subscribers(self, channel: Channel) -> tuple[Subscription, ...]:
        return tuple(self._subscriptions[channel])

    def publish(self, channel: Channel, payload: object = None) -> None:
        loop = asyncio.get_running_loop()
        targets = tuple(self._subscriptions[channel])
        logger.debug("bus_published", channel=channel.value, subscribers=len(targets))
        for subscription in targets:
            self._queued += 1
            loop.call_soon(self._deliver, loop, subscription, payload)

    async def settle(self) -> None:
        """Wait until queued deliveries and handler tasks are done."""
        while self._queued or self._tasks:
            if self._tasks:
                await asyncio.gather(*tuple(self._tasks), return_exceptions=True)
            else:
                await asyncio.sleep(0)

    def _deliver(
        self,
        loop: asyncio.AbstractEventLoop,
        subscription: Subscription,
        payload: object,
    ) -> None:
        self._queued -= 1
        if not subscription.active:
            logger.debug("bus_delivery_dropped", channel=subscription.channel.value, subscription=subscription.id)
            return
        try:
            outcome = subscription.handler(payload)
        except Exception:
            logger.exception("bus_handler_failed", channel=subscription.channel.value)
            return
        if inspect.isawaitable(outcome):
            task = loop.create_task(self._finish(subscription.channel, outcome))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    @staticmethod
    async def _finish(channel: Channel, outcome: Awaitable[None]) -> None:
        try:
            await outcome
        except Exception:
            logger.exception("bus_handler_failed", channel=channel.value)


__all__ = ("LocalBus",)
