"""
Notify: user-facing notices (toasts).

    from cartflow import notify as N

    notifier = N.MemoryNotifier()
    notifier.notify("Success", "Order created successfully", N.Severity.SUCCESS)
"""

from __future__ import annotations

from cartflow.notify._types import Severity, Notifier, Notice
from cartflow.notify._impl import LogNotifier, MemoryNotifier

__all__ = (
    "Severity",
    "Notifier",
    "Notice",
    "LogNotifier",
    "MemoryNotifier",
)
