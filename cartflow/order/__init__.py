"""
Order: submit the confirmation cart.

    from cartflow import order as O

    submitter = O.OrderSubmitter(backend, notifier)
    result = await submitter.confirm(handoff.confirmation)
"""

from __future__ import annotations

from cartflow.order._records import OrderLineRecord
from cartflow.order._submit import OrderSubmitter

__all__ = ("OrderLineRecord", "OrderSubmitter")
