"""Injectable sources of the current time."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Optional, Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        ...


@dataclass(frozen=True)
class SystemClock:
    """Wall clock, optionally in a fixed timezone."""

    tz: Optional[tzinfo] = None

    def now(self) -> datetime:
        return datetime.now(self.tz)


@dataclass(frozen=True)
class FixedClock:
    """Clock frozen at one instant, for reproducible runs and tests."""

    moment: datetime

    def now(self) -> datetime:
        return self.moment
