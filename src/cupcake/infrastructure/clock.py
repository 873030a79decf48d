"""Concrete Clock implementations."""

from __future__ import annotations

from datetime import date, datetime, time

from cupcake.domain.clock import Clock


class SystemClock(Clock):
    """Local wall-clock time of the running process."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Always returns the same moment (``--today`` option, tests)."""

    def __init__(self, moment: datetime | date) -> None:
        if not isinstance(moment, datetime):
            moment = datetime.combine(moment, time())
        self._moment = moment

    def now(self) -> datetime:
        return self._moment
