"""
Lift: Helpers for lifting backend calls into kungfu results.

Built on combinators.lift.catching_async.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable

from combinators.lift import catching_async

from cartflow._types import Remote
from cartflow.errors import CartError, CartErrorKind, error_message


# ═══════════════════════════════════════════════════════════════════════════════
# remote()
# ═══════════════════════════════════════════════════════════════════════════════

def remote[T](
    call: Callable[[], Awaitable[T]],
    kind: CartErrorKind,
) -> Remote[T, CartError]:
    """
    Lift a backend coroutine into LazyCoroResult.

    Any exception raised by the call becomes CartError(kind, message).
    Nothing is awaited until the result is.

    Example:
        result = await remote(backend.fetch_products, CartErrorKind.FETCH)

        match result:
            case Ok(records):
                ...
            case Error(e):
                notify(e.message)
    """
    return catching_async(
        call,
        on_error=lambda e: CartError(kind, error_message(e)),
    )


__all__ = (
    "catching_async",
    "remote",
)
