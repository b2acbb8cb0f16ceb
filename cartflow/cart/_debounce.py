"""
Debouncer: delay-and-coalesce for quantity persistence.
"""

from __future__ import annotations

import asyncio

import structlog

from cartflow._types import Action

logger = structlog.get_logger(__name__)


class Debouncer:
    """
    Single-timer debounce on the running event loop.

    At most one timer is armed. schedule() cancels it and arms a new one,
    so only the last action inside the window runs. Once the timer fires
    the handle is consumed and the action runs as a task; later
    schedule() calls never cancel work already in flight.

    Example:
        debouncer = Debouncer(delay=0.8)
        debouncer.schedule(lambda: persist(item))
        debouncer.schedule(lambda: persist(item))  # first one dropped
    """

    __slots__ = ("_delay", "_handle", "_inflight")

    def __init__(self, delay: float) -> None:
        self._delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._inflight: set[asyncio.Task[None]] = set()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """True while a timer is armed and has not fired."""
        return self._handle is not None

    @property
    def in_flight(self) -> int:
        return len(self._inflight)

    def schedule(self, action: Action) -> None:
        """Cancel the armed timer (if any) and arm a new one for `action`."""
        loop = asyncio.get_running_loop()
        if self.cancel():
            logger.debug("debounce_coalesced")
        self._handle = loop.call_later(self._delay, self._fire, loop, action)

    def cancel(self) -> bool:
        """Drop the armed timer. Returns True if one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    async def drain(self) -> None:
        """Wait for actions that already fired."""
        while self._inflight:
            await asyncio.gather(*tuple(self._inflight), return_exceptions=True)

    def _fire(self, loop: asyncio.AbstractEventLoop, action: Action) -> None:
        self._handle = None
        task = loop.create_task(self._run(action))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    @staticmethod
    async def _run(action: Action) -> None:
        try:
            await action()
        except Exception:
            logger.exception("debounced_action_failed")


__all__ = ("Debouncer",)
