"""
Wizard: checkout step navigation.

    from cartflow import wizard as W

    wizard = W.WizardController()
    wizard.next()                    # DATE_SELECTION
    wizard.next()                    # blocked: no date
    wizard.set_date(date.today())
    wizard.next()                    # CONFIRMATION
"""

from __future__ import annotations

from cartflow.wizard._controller import Step, WizardState, WizardController

__all__ = ("Step", "WizardState", "WizardController")
