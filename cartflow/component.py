"""
Order component: one mounted instance of the checkout flow.

Holds every subscription and timer of the component, so mount/unmount
acquire and release all of them together.

    component = OrderComponent(backend, bus, notifier)
    async with component.mounted():
        component.toggle_select("A")
        component.request_checkout()
        ...
        await component.confirm_order()
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

import structlog
from kungfu import Result

from cartflow._types import ItemId, OrderId
from cartflow.backend import CartBackend
from cartflow.bus import CheckoutHandoff, CheckoutPayload, MessageBus
from cartflow.cart import CartState, CartViewModel
from cartflow.errors import CartError
from cartflow.notify import Notifier
from cartflow.order import OrderSubmitter
from cartflow.policy import CartPolicy
from cartflow.wizard import WizardController, WizardState

logger = structlog.get_logger(__name__)


class OrderComponent:
    """
    Cart view-model, hand-off, wizard and order submission of one instance.

    Example:
        component = OrderComponent(backend, bus, notifier, policy(debounce_ms=800))
        await component.mount()
        component.set_quantity("A", 3)
        await component.unmount()   # pending debounce timer is dropped
    """

    def __init__(
        self,
        backend: CartBackend,
        bus: MessageBus,
        notifier: Notifier,
        policy: CartPolicy = CartPolicy(),
    ) -> None:
        self.cart = CartViewModel(backend, notifier, policy)
        self.handoff = CheckoutHandoff(bus, self.cart, policy.price_places)
        self.wizard = WizardController()
        self.submitter = OrderSubmitter(backend, notifier)
        self._mounted = False

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def state(self) -> CartState:
        return self.cart.state

    @property
    def wizard_state(self) -> WizardState:
        return self.wizard.state

    # ── Lifecycle ───────────────────────────────────────────────────────────

    async def mount(self) -> Result[CartState, CartError]:
        """Reset the wizard, subscribe, run the initial load."""
        self.wizard.reset()
        self.handoff.subscribe()
        self._mounted = True
        logger.info("component_mounted")
        return await self.cart.load()

    async def unmount(self) -> None:
        """
        Drop the debounce timer, unsubscribe, cancel running reloads and
        wait for in-flight persistence.
        """
        dropped = self.cart.debouncer.cancel()
        self._mounted = False
        cancelled = await self.handoff.close()
        await self.cart.debouncer.drain()
        logger.info("component_unmounted", dropped_pending_quantity=dropped, cancelled_reloads=cancelled)

    @asynccontextmanager
    async def mounted(self) -> AsyncIterator[OrderComponent]:
        await self.mount()
        try:
            yield self
        finally:
            await self.unmount()

    # ── Cart ────────────────────────────────────────────────────────────────

    async def load(self) -> Result[CartState, CartError]:
        return await self.cart.load()

    def toggle_select(self, item_id: ItemId) -> CartState:
        return self.cart.toggle_select(item_id)

    def set_select_all(self, selected: bool) -> CartState:
        return self.cart.set_select_all(selected)

    def set_quantity(self, item_id: ItemId, quantity: object) -> Result[CartState, CartError]:
        return self.cart.set_quantity(item_id, quantity)

    async def delete_selected(self) -> Result[CartState, CartError]:
        return await self.cart.delete_selected()

    # ── Checkout ────────────────────────────────────────────────────────────

    def request_checkout(self) -> CheckoutPayload:
        return self.handoff.request_checkout()

    async def confirm_order(self) -> Result[OrderId, CartError]:
        return await self.submitter.confirm(self.handoff.confirmation)

    # ── Wizard ──────────────────────────────────────────────────────────────

    def next(self) -> WizardState:
        return self.wizard.next()

    def previous(self) -> WizardState:
        return self.wizard.previous()

    def set_date(self, selected: date | None) -> WizardState:
        return self.wizard.set_date(selected)


__all__ = ("OrderComponent",)
