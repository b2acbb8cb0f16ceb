"""
Cart types: line items and derived cart state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

# ═══════════════════════════════════════════════════════════════════════════════
# Line Item
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class LineItem:
    """
    One product row in the cart.

    Mutated in place by CartViewModel only (selection, quantity).
    Rows handed out of the view-model are copies: CartState rows or
    CheckoutLine snapshots.
    """

    id: str
    name: str
    unit_price: Decimal
    quantity: int
    picture_url: str = ""
    selected: bool = False

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    def freeze(self) -> CheckoutLine:
        """Immutable copy for hand-off."""
        return CheckoutLine(
            id=self.id,
            name=self.name,
            unit_price=self.unit_price,
            quantity=self.quantity,
            picture_url=self.picture_url,
        )


@dataclass(frozen=True, slots=True)
class CheckoutLine:
    """Frozen line of a checkout snapshot or of the confirmation cart."""

    id: str
    name: str
    unit_price: Decimal
    quantity: int
    picture_url: str = ""

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


# ═══════════════════════════════════════════════════════════════════════════════
# Select-All Tri-State
# ═══════════════════════════════════════════════════════════════════════════════


class SelectAll(Enum):
    """
    State of the "select all" checkbox.

    NONE  → unchecked
    SOME  → unchecked + indeterminate
    ALL   → checked
    """

    NONE = auto()
    SOME = auto()
    ALL = auto()

    @property
    def checked(self) -> bool:
        return self is SelectAll.ALL

    @property
    def indeterminate(self) -> bool:
        return self is SelectAll.SOME


# ═══════════════════════════════════════════════════════════════════════════════
# Cart State
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartState:
    """
    Items plus everything derived from them.

    Rows are copies taken at derive time; later edits to the cart
    produce a new state and leave this one as it was.

    Invariants:
        selected == tuple(i for i in items if i.selected)
        total == round(sum(i.subtotal for i in selected), places)
    """

    items: tuple[LineItem, ...]
    selected: tuple[LineItem, ...]
    total: Decimal
    select_all: SelectAll

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def selected_ids(self) -> tuple[str, ...]:
        return tuple(i.id for i in self.selected)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("LineItem", "CheckoutLine", "SelectAll", "CartState")
