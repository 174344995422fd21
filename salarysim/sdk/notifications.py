"""User-facing feedback emitted by the simulator.

The SDK only produces (message, severity) pairs. How long a message stays on
screen is up to the presentation layer; interactive displays dismiss them
after DISMISS_AFTER_SECONDS.
"""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["success", "error"]

DISMISS_AFTER_SECONDS = 3


@dataclass(frozen=True)
class Notification:
    """A transient message for the user."""
    message: str
    severity: Severity = "success"

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


def success(message: str) -> Notification:
    return Notification(message, "success")


def error(message: str) -> Notification:
    return Notification(message, "error")
