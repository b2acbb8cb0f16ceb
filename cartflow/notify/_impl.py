"""
Notifier implementations.
"""

from __future__ import annotations

import structlog

from cartflow.notify._types import Notice, Severity

logger = structlog.get_logger(__name__)


class LogNotifier:
    """Writes every notice to the structlog pipeline."""

    def notify(self, title: str, message: str, severity: Severity) -> None:
        if severity is Severity.ERROR:
            logger.warning("notice", title=title, message=message, severity=severity.value)
        else:
            logger.info("notice", title=title, message=message, severity=severity.value)


class MemoryNotifier:
    """
    Collects notices in order.

    Example:
        notifier = MemoryNotifier()
        ...
        assert notifier.last == Notice("Success", "Order created successfully", Severity.SUCCESS)
    """

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def notify(self, title: str, message: str, severity: Severity) -> None:
        self.notices.append(Notice(title, message, severity))

    @property
    def last(self) -> Notice | None:
        return self.notices[-1] if self.notices else None

    def of(self, severity: Severity) -> list[Notice]:
        return [n for n in self.notices if n.severity is severity]

    def clear(self) -> None:
        self.notices.clear()


__all__ = ("LogNotifier", "MemoryNotifier")
