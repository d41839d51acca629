"""
Project: GNSS Site Log Builder
Date: 10/17/26 9:12 AM

Closed time range used by every installation, firmware and session record.
All datetimes are naive and expressed in UTC.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional


def utc_now() -> datetime.datetime:
    """current time as a naive UTC datetime"""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class Interval:
    """
    Closed interval [start, end]. An end of None means the record is still open (equipment
    still installed, session still running) and compares as +infinity.

    An end before the start is kept as given and goes through the same overlap tests.
    """
    start: datetime.datetime
    end: Optional[datetime.datetime] = None

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def is_reversed(self) -> bool:
        return self._ends_before(self.start)

    def _ends_before(self, moment: datetime.datetime) -> bool:
        return self.end is not None and self.end < moment

    def overlaps(self, other: Interval) -> bool:
        """touching intervals (one's end equal to the other's start) overlap"""
        return not (self._ends_before(other.start) or other._ends_before(self.start))

    def contains(self, other: Interval) -> bool:
        if other.start < self.start:
            return False
        if self.end is None:
            return True
        return other.end is not None and other.end <= self.end

    def intersection(self, other: Interval) -> Optional[Interval]:
        """clip both intervals, None when they are disjoint"""
        if not self.overlaps(other):
            return None

        start = max(self.start, other.start)
        if self.end is None:
            end = other.end
        elif other.end is None:
            end = self.end
        else:
            end = min(self.end, other.end)

        return Interval(start, end)

    def is_past(self, now: datetime.datetime) -> bool:
        """True if the interval has a concrete end strictly before now"""
        return self._ends_before(now)

    def __str__(self) -> str:
        end = self.end.strftime('%Y-%m-%d %H:%M:%S') if self.end else 'open'
        return f'{self.start.strftime("%Y-%m-%d %H:%M:%S")} -> {end}'
