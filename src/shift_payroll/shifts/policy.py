"""Duration caps for shifts and the windows the aggregate caps are summed over."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Mapping, Optional

from ..common.datetime_utils import calendar_day, calendar_week
from ..common.intervals import Interval
from ..core import constants
from ..core.enums import CapScope, ShiftCategory


def _default_category_caps() -> Mapping[ShiftCategory, timedelta]:
    return MappingProxyType(
        {
            ShiftCategory.WORK: timedelta(hours=constants.DEFAULT_MAX_WORK_SHIFT_HOURS),
            ShiftCategory.PAID_ABSENCE: timedelta(hours=constants.DEFAULT_MAX_PAID_ABSENCE_SHIFT_HOURS),
            ShiftCategory.UNPAID_ABSENCE: timedelta(hours=constants.DEFAULT_MAX_UNPAID_ABSENCE_SHIFT_HOURS),
        }
    )


@dataclass(frozen=True)
class AggregateWindow:
    period: Interval
    # None means shifts from every workplace count.
    workplace_id: Optional[int]


@dataclass(frozen=True)
class DurationPolicy:
    category_caps: Mapping[ShiftCategory, timedelta] = field(default_factory=_default_category_caps)
    max_daily_work: timedelta = timedelta(hours=constants.DEFAULT_MAX_DAILY_WORK_HOURS)
    max_weekly_work: timedelta = timedelta(hours=constants.DEFAULT_MAX_WEEKLY_WORK_HOURS)
    daily_scope: CapScope = CapScope.WORKPLACE
    weekly_scope: CapScope = CapScope.WORKER

    @classmethod
    def from_settings(cls, settings) -> "DurationPolicy":
        def hours(name: str, default: float) -> timedelta:
            return timedelta(hours=float(getattr(settings, name, default)))

        return cls(
            category_caps=MappingProxyType(
                {
                    ShiftCategory.WORK: hours("MAX_WORK_SHIFT_HOURS", constants.DEFAULT_MAX_WORK_SHIFT_HOURS),
                    ShiftCategory.PAID_ABSENCE: hours(
                        "MAX_PAID_ABSENCE_SHIFT_HOURS", constants.DEFAULT_MAX_PAID_ABSENCE_SHIFT_HOURS
                    ),
                    ShiftCategory.UNPAID_ABSENCE: hours(
                        "MAX_UNPAID_ABSENCE_SHIFT_HOURS", constants.DEFAULT_MAX_UNPAID_ABSENCE_SHIFT_HOURS
                    ),
                }
            ),
            max_daily_work=hours("MAX_DAILY_WORK_HOURS", constants.DEFAULT_MAX_DAILY_WORK_HOURS),
            max_weekly_work=hours("MAX_WEEKLY_WORK_HOURS", constants.DEFAULT_MAX_WEEKLY_WORK_HOURS),
        )

    def cap_for(self, category: ShiftCategory) -> timedelta:
        return self.category_caps[category]

    def daily_window(self, *, workplace_id: int, starts_at: datetime) -> AggregateWindow:
        return self._window(calendar_day(starts_at), self.daily_scope, workplace_id)

    def weekly_window(self, *, workplace_id: int, starts_at: datetime) -> AggregateWindow:
        return self._window(calendar_week(starts_at), self.weekly_scope, workplace_id)

    @staticmethod
    def _window(period: Interval, scope: CapScope, workplace_id: int) -> AggregateWindow:
        if scope == CapScope.WORKPLACE:
            return AggregateWindow(period=period, workplace_id=workplace_id)
        return AggregateWindow(period=period, workplace_id=None)
