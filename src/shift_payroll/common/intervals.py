"""Half-open time intervals.

An interval includes its start and excludes its end. A missing end means the
interval extends forever into the future. Every boundary comparison in the
package goes through the functions below so the edge semantics stay uniform.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class Interval:
    start: datetime
    end: Optional[datetime] = None

    @property
    def is_bounded(self) -> bool:
        return self.end is not None


def _before_end(instant: datetime, interval: Interval) -> bool:
    # instant < effective_end(interval), with an open end treated as +inf
    return interval.end is None or instant < interval.end


def overlaps(a: Interval, b: Interval) -> bool:
    """True iff the two intervals share at least one instant.

    Touching boundaries (one ends where the other starts) do not overlap.
    """
    return _before_end(a.start, b) and _before_end(b.start, a)


def contains(outer: Interval, inner: Interval) -> bool:
    if inner.start < outer.start:
        return False
    if outer.end is None:
        return True
    if inner.end is None:
        return False
    return inner.end <= outer.end


def includes(interval: Interval, instant: datetime) -> bool:
    return interval.start <= instant and _before_end(instant, interval)


def duration(interval: Interval) -> timedelta:
    if not interval.is_bounded:
        raise ValueError("duration of an unbounded interval is undefined")
    return interval.end - interval.start
