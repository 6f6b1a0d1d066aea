from __future__ import annotations

from datetime import timedelta
from typing import Optional

from ..common.datetime_utils import as_datetime
from ..common.intervals import Interval, duration, includes
from ..common.validators import require_present
from ..core.enums import ShiftCategory, ViolationCode
from ..core.validation import Violation, end_before_start
from .model import ShiftDraft
from .policy import AggregateWindow, DurationPolicy
from .repository import ShiftRepository


class ShiftDurationValidator:
    """Checks one shift against the per-shift and per-day/per-week caps.

    Sibling shifts are read through the injected repository; the validator
    owns only the predicates and the window computation (via the policy).
    Every violated rule is reported. A missing or inverted period stops the
    cap checks since the duration is undefined.
    """

    def __init__(self, shifts: ShiftRepository, *, policy: Optional[DurationPolicy] = None):
        self._shifts = shifts
        self._policy = policy or DurationPolicy()

    @property
    def policy(self) -> DurationPolicy:
        return self._policy

    def validate(self, draft: ShiftDraft) -> list[Violation]:
        violations: list[Violation] = []
        category = ShiftCategory.parse(draft.category)
        for value, field in (
            (draft.workplace_id, "workplace_id"),
            (category, "category"),
            (draft.starts_at, "starts_at"),
            (draft.ends_at, "ends_at"),
        ):
            missing = require_present(value, field)
            if missing:
                violations.append(missing)

        if draft.starts_at is None or draft.ends_at is None:
            return violations

        period = Interval(as_datetime(draft.starts_at), as_datetime(draft.ends_at))
        if period.end <= period.start:
            violations.append(end_before_start())
            return violations

        length = duration(period)
        if category is not None and length > self._policy.cap_for(category):
            violations.append(
                Violation(
                    ViolationCode.SHIFT_TOO_LONG,
                    message=f"{category.value} shift longer than {self._policy.cap_for(category)}",
                )
            )

        # Aggregate caps only bind Work shifts that belong to someone.
        if category != ShiftCategory.WORK or draft.worker_id is None or draft.workplace_id is None:
            return violations

        daily = self._policy.daily_window(workplace_id=draft.workplace_id, starts_at=period.start)
        if self._work_total(daily, draft) + length > self._policy.max_daily_work:
            violations.append(
                Violation(
                    ViolationCode.MAX_DAILY_DURATION_EXCEEDED,
                    message=f"more than {self._policy.max_daily_work} of work on {period.start.date()}",
                )
            )

        weekly = self._policy.weekly_window(workplace_id=draft.workplace_id, starts_at=period.start)
        if self._work_total(weekly, draft) + length > self._policy.max_weekly_work:
            violations.append(
                Violation(
                    ViolationCode.MAX_WEEKLY_DURATION_EXCEEDED,
                    message=f"more than {self._policy.max_weekly_work} of work in week of {weekly.period.start.date()}",
                )
            )

        return violations

    def _work_total(self, window: AggregateWindow, draft: ShiftDraft) -> timedelta:
        siblings = self._shifts.list_for_worker(
            worker_id=draft.worker_id,
            workplace_id=window.workplace_id,
            categories=(ShiftCategory.WORK,),
            starting_within=window.period,
        )
        total = timedelta()
        for shift in siblings:
            if draft.shift_id is not None and shift.shift_id == draft.shift_id:
                continue
            if shift.category != ShiftCategory.WORK or not includes(window.period, shift.starts_at):
                continue
            if window.workplace_id is not None and shift.workplace_id != window.workplace_id:
                continue
            total += shift.duration
        return total
