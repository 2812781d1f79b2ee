"""Port for reading the current time."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing the wall-clock time."""

    def now(self) -> datetime:
        """Return the current time."""


__all__ = ["ClockPort"]
