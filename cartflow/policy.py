"""
Cart policy: component configuration.

    from cartflow.policy import policy

    cart_policy = policy(debounce_ms=50, keep_selection_on_reload=True)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

DEFAULT_DEBOUNCE = timedelta(milliseconds=800)


@dataclass(frozen=True, slots=True)
class CartPolicy:
    """
    Tunables of one order component.

    debounce: delay before a quantity edit is persisted; later edits restart it
    price_places: decimal places of the running total (ROUND_HALF_UP)
    keep_selection_on_reload: carry selection across a refetch by item id
    """

    debounce: timedelta = DEFAULT_DEBOUNCE
    price_places: int = 2
    keep_selection_on_reload: bool = False

    @property
    def debounce_seconds(self) -> float:
        return self.debounce.total_seconds()


def policy(
    debounce_ms: float | None = None,
    debounce: timedelta | None = None,
    price_places: int = 2,
    keep_selection_on_reload: bool = False,
) -> CartPolicy:
    """
    Build a CartPolicy.

    Example:
        policy(debounce_ms=800)
        policy(debounce=timedelta(seconds=1), keep_selection_on_reload=True)
    """
    if debounce is None:
        debounce = (
            timedelta(milliseconds=debounce_ms)
            if debounce_ms is not None
            else DEFAULT_DEBOUNCE
        )
    if debounce < timedelta(0):
        raise ValueError("debounce must not be negative")
    if price_places < 0:
        raise ValueError("price_places must not be negative")
    return CartPolicy(
        debounce=debounce,
        price_places=price_places,
        keep_selection_on_reload=keep_selection_on_reload,
    )


__all__ = ("DEFAULT_DEBOUNCE", "CartPolicy", "policy")
