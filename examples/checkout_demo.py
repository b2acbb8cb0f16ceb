"""
Checkout: cart review, hand-off, wizard, order.

Level 4: cartflow.component
Level 3: cartflow.cart / cartflow.bus / cartflow.wizard
Level 2: kungfu.Result
"""

import asyncio
from datetime import date

from kungfu import Ok, Error

from cartflow import OrderComponent, configure_logging
from cartflow.backend import MemoryBackend
from cartflow.bus import Channel, LocalBus
from cartflow.notify import LogNotifier
from cartflow.policy import policy


def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def seed(backend: MemoryBackend) -> None:
    backend.seed([
        {"Id": "CUP", "Name": "Espresso cup", "MSRP__c": "10.00", "Quantity__c": 2},
        {"Id": "POT", "Name": "Tea pot", "MSRP__c": "24.90", "Quantity__c": 1},
        {"Id": "SAUCER", "Name": "Saucer", "MSRP__c": "2.335", "Quantity__c": 3},
    ])


async def main() -> None:
    configure_logging()

    backend = MemoryBackend(latency=0.02)
    seed(backend)
    bus = LocalBus()
    component = OrderComponent(backend, bus, LogNotifier(), policy(debounce_ms=300))

    async with component.mounted():
        banner("Cart")
        for item in component.state.items:
            print(f"  {item.id:<8} {item.name:<14} {item.unit_price:>7} x {item.quantity}")

        banner("Select + edit quantity")
        component.toggle_select("CUP")
        component.toggle_select("SAUCER")
        for qty in (3, 4, 5):
            component.set_quantity("CUP", qty)
            await asyncio.sleep(0.05)
        print(f"  total: {component.state.total}  select-all: {component.state.select_all.name}")
        await asyncio.sleep(0.4)
        await component.cart.debouncer.drain()

        banner("Another component changed the cart")
        bus.publish(Channel.CART_UPDATED)
        await bus.settle()
        print(f"  reloaded {len(component.state.items)} items, selection reset")
        component.toggle_select("CUP")

        banner("Checkout")
        payload = component.request_checkout()
        await bus.settle()
        print(f"  published {payload.ids} total {payload.total}")

        component.next()
        print(f"  next without date → step {component.next().step.name}")
        component.set_date(date.today())
        print(f"  next with date    → step {component.next().step.name}")

        banner("Confirm")
        match await component.confirm_order():
            case Ok(order_id):
                print(f"\n✓ Order {order_id}: {backend.orders[order_id.value]}")
            case Error(e):
                print(f"\n✗ Failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
