"""
Notification types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

# ═══════════════════════════════════════════════════════════════════════════════
# Severity
# ═══════════════════════════════════════════════════════════════════════════════


class Severity(Enum):
    """Toast variant shown to the user."""

    SUCCESS = "success"
    ERROR = "error"


# ═══════════════════════════════════════════════════════════════════════════════
# Notifier Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class Notifier(Protocol):
    """
    User-facing notification surface.

    Fire-and-forget: no return value, purely presentational.

    Example:
        class ToastNotifier:
            def __init__(self, shell: Shell) -> None:
                self.shell = shell

            def notify(self, title: str, message: str, severity: Severity) -> None:
                self.shell.show_toast(title, message, variant=severity.value)
    """

    def notify(self, title: str, message: str, severity: Severity) -> None:
        """Show a notice."""
        ...


@dataclass(frozen=True, slots=True)
class Notice:
    """One delivered notification."""

    title: str
    message: str
    severity: Severity


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Severity", "Notifier", "Notice")
