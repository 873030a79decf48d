"""Abstract source of the "current moment".

Pickup date options are derived from it once per order, so tests and the
CLI can pin "today" by supplying their own implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current moment."""
