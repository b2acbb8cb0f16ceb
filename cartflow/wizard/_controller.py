"""
Wizard: cart review → date selection → confirmation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import IntEnum

import structlog

logger = structlog.get_logger(__name__)


class Step(IntEnum):
    CART_REVIEW = 1
    DATE_SELECTION = 2
    CONFIRMATION = 3


@dataclass(frozen=True, slots=True)
class WizardState:
    step: Step = Step.CART_REVIEW
    selected_date: date | None = None

    @property
    def can_advance(self) -> bool:
        """False on the last step and on date selection without a date."""
        match self.step:
            case Step.CART_REVIEW:
                return True
            case Step.DATE_SELECTION:
                return self.selected_date is not None
            case Step.CONFIRMATION:
                return False

    @property
    def can_go_back(self) -> bool:
        return self.step > Step.CART_REVIEW


class WizardController:
    """
    Three-step navigation.

    Transitions:
        CART_REVIEW    → DATE_SELECTION   always
        DATE_SELECTION → CONFIRMATION     only with a date
        any step > 1   → previous step    always

    Blocked moves leave the state as is. Reaching CONFIRMATION does not
    submit anything; the order goes out only through an explicit confirm.
    """

    def __init__(self) -> None:
        self._state = WizardState()

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def step(self) -> Step:
        return self._state.step

    def next(self) -> WizardState:
        if self._state.can_advance:
            self._move(Step(self._state.step + 1))
        else:
            logger.debug("wizard_next_blocked", step=self._state.step.name)
        return self._state

    def previous(self) -> WizardState:
        if self._state.can_go_back:
            self._move(Step(self._state.step - 1))
        return self._state

    def set_date(self, selected: date | None) -> WizardState:
        self._state = replace(self._state, selected_date=selected)
        return self._state

    def reset(self) -> WizardState:
        self._state = WizardState()
        return self._state

    def _move(self, step: Step) -> None:
        logger.debug("wizard_moved", from_step=self._state.step.name, to_step=step.name)
        self._state = replace(self._state, step=step)


__all__ = ("Step", "WizardState", "WizardController")
