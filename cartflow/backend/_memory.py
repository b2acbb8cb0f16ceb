"""
In-memory backend: simulates the remote cart service.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog

from cartflow.backend._types import BackendError, Record

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Call:
    """One recorded backend call."""

    method: str
    args: tuple[Any, ...]


@dataclass
class MemoryBackend:
    """
    CartBackend kept in a dict, with a call log and injectable faults.

    Example:
        backend = MemoryBackend()
        backend.seed([{"Id": "A", "Name": "Mug", "MSRP__c": "10", "Quantity__c": 2}])
        backend.fail("delete_products", "Record is locked")
    """

    latency: float = 0.0
    _products: dict[str, dict[str, Any]] = field(default_factory=dict[str, dict[str, Any]])
    _orders: dict[str, list[dict[str, Any]]] = field(default_factory=dict[str, list[dict[str, Any]]])
    _failures: dict[str, str] = field(default_factory=dict[str, str])
    calls: list[Call] = field(default_factory=list[Call])

    def seed(self, products: Sequence[Record]) -> None:
        self._products = {str(p["Id"]): dict(p) for p in products}
        self._orders = {}

    def fail(self, method: str, message: str) -> None:
        """Make every call to `method` raise BackendError(message)."""
        self._failures[method] = message

    def recover(self, method: str | None = None) -> None:
        if method is None:
            self._failures.clear()
        else:
            self._failures.pop(method, None)

    def calls_to(self, method: str) -> list[Call]:
        return [c for c in self.calls if c.method == method]

    def product(self, product_id: str) -> dict[str, Any] | None:
        return self._products.get(product_id)

    @property
    def orders(self) -> dict[str, list[dict[str, Any]]]:
        return self._orders

    async def _enter(self, method: str, *args: Any) -> None:
        self.calls.append(Call(method, args))
        if self.latency:
            await asyncio.sleep(self.latency)
        if (message := self._failures.get(method)) is not None:
            logger.debug("backend_fault", method=method, message=message)
            raise BackendError(message)

    # ── CartBackend ─────────────────────────────────────────────────────────

    async def fetch_products(self) -> list[dict[str, Any]]:
        await self._enter("fetch_products")
        return [dict(p) for p in self._products.values()]

    async def delete_products(self, ids: Sequence[str]) -> None:
        await self._enter("delete_products", tuple(ids))
        missing = [i for i in ids if i not in self._products]
        if missing:
            raise BackendError(f"Unknown products: {', '.join(missing)}")
        for i in ids:
            del self._products[i]

    async def update_product_quantity(self, product: Record) -> None:
        await self._enter("update_product_quantity", dict(product))
        product_id = str(product["Id"])
        if product_id not in self._products:
            raise BackendError(f"Unknown product: {product_id}")
        self._products[product_id]["Quantity__c"] = product["Quantity__c"]

    async def create_order(self, lines: Sequence[Record]) -> str:
        await self._enter("create_order", tuple(dict(line) for line in lines))
        order_id = f"ORD-{len(self._orders) + 1:04d}"
        self._orders[order_id] = [dict(line) for line in lines]
        return order_id


__all__ = ("Call", "MemoryBackend")
