"""
Core types for cartflow.

Re-exports from kungfu + identity types shared across modules.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable
from dataclasses import dataclass

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Remote[T, E] = LazyCoroResult[T, E]
"""Lazy backend call that may fail with E."""

type Action = Callable[[], Awaitable[None]]
"""Deferred side effect (debounced persistence, bus handler body)."""

# ═══════════════════════════════════════════════════════════════════════════════
# Identity
# ═══════════════════════════════════════════════════════════════════════════════

type ItemId = str
"""Backend product id of a cart line."""


@dataclass(frozen=True, slots=True)
class OrderId:
    """Identifier returned by the backend for a created order."""

    value: str

    def __str__(self) -> str:
        return self.value


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Remote",
    "Action",
    # Identity
    "ItemId",
    "OrderId",
)
