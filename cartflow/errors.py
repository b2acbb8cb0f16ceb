"""
Cart errors.

Every backend failure becomes a CartError value inside a kungfu Result.
Nothing here is raised: callers match on Ok/Error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CartErrorKind(Enum):
    """Kinds of cart errors."""

    FETCH = auto()  # Product list could not be loaded
    DELETE = auto()  # Batch delete rejected
    QUANTITY_UPDATE = auto()  # Debounced quantity persistence failed
    ORDER_CREATION = auto()  # create_order rejected
    INVALID_QUANTITY = auto()  # Rejected before reaching the backend
    EMPTY_ORDER = auto()  # Nothing in the confirmation cart


@dataclass(frozen=True, slots=True)
class CartError:
    """Cart operation error carrying the backend's human-readable message."""

    kind: CartErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"


def error_message(exc: BaseException) -> str:
    """Backend message of an exception, falling back to its class name."""
    message = getattr(exc, "message", None) or str(exc)
    return message or type(exc).__name__


__all__ = ("CartErrorKind", "CartError", "error_message")
