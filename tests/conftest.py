"""Shared fixtures: seeded memory backend, collecting notifier, fast policy."""
from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

import pytest

from cartflow.backend import MemoryBackend
from cartflow.bus import LocalBus
from cartflow.cart import CartState, CartViewModel, round_price
from cartflow.component import OrderComponent
from cartflow.notify import MemoryNotifier
from cartflow.policy import CartPolicy, policy

PRODUCTS = [
    {
        "Id": "A",
        "Name": "Espresso cup",
        "MSRP__c": "10.00",
        "Quantity__c": 2,
        "PictureURL__c": "https://img.example/a.png",
    },
    {
        "Id": "B",
        "Name": "Tea pot",
        "MSRP__c": "5.00",
        "Quantity__c": 1,
        "PictureURL__c": "https://img.example/b.png",
    },
    {
        "Id": "C",
        "Name": "Saucer",
        "MSRP__c": "2.335",
        "Quantity__c": 3,
        "PictureURL__c": "https://img.example/c.png",
        "Description__c": "ignored by the codec",
    },
]


@pytest.fixture
def backend() -> MemoryBackend:
    b = MemoryBackend()
    b.seed(PRODUCTS)
    return b


@pytest.fixture
def notifier() -> MemoryNotifier:
    return MemoryNotifier()


@pytest.fixture
def fast_policy() -> CartPolicy:
    return policy(debounce_ms=50)


@pytest.fixture
def bus() -> LocalBus:
    return LocalBus()


@pytest.fixture
def cart(backend, notifier, fast_policy) -> CartViewModel:
    return CartViewModel(backend, notifier, fast_policy)


@pytest.fixture
def component(backend, bus, notifier, fast_policy) -> OrderComponent:
    return OrderComponent(backend, bus, notifier, fast_policy)


@pytest.fixture
def check_invariants() -> Callable[[CartState], None]:
    """Selected is the exact filter of items; total is the rounded sum over it."""

    def check(state: CartState) -> None:
        assert state.selected == tuple(i for i in state.items if i.selected)
        assert all(any(s is i for i in state.items) for s in state.selected)
        expected = round_price(sum((i.unit_price * i.quantity for i in state.selected), Decimal(0)))
        assert state.total == expected

    return check
