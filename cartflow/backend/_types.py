"""
Backend types: the remote contract the cart talks to.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

type Record = Mapping[str, Any]
"""Raw backend record, keyed by backend field names."""


class BackendError(Exception):
    """Backend fault with a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CartBackend(Protocol):
    """
    Product CRUD + order creation.

    Implement this for the real service. Faults raise; the cart catches
    every exception at the call site and turns it into a CartError.

    Example:
        class HttpBackend:
            def __init__(self, client: httpx.AsyncClient) -> None:
                self.client = client

            async def fetch_products(self) -> list[Record]:
                response = await self.client.get("/cart/products")
                response.raise_for_status()
                return response.json()

            # ... other methods
    """

    async def fetch_products(self) -> Sequence[Record]:
        """All cart products in display order."""
        ...

    async def delete_products(self, ids: Sequence[str]) -> None:
        """Delete all ids or none."""
        ...

    async def update_product_quantity(self, product: Record) -> None:
        """Persist one product record (quantity changed)."""
        ...

    async def create_order(self, lines: Sequence[Record]) -> str:
        """Create an order from order-line records. Returns the order id."""
        ...


__all__ = ("Record", "BackendError", "CartBackend")
