"""Clock adapters."""

from datetime import datetime

from src.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Clock reading the local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


__all__ = ["SystemClock"]
