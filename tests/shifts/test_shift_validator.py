from __future__ import annotations

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from shift_payroll.core.enums import CapScope, ShiftCategory, ViolationCode
from shift_payroll.shifts.model import ShiftDraft
from shift_payroll.shifts.policy import DurationPolicy
from shift_payroll.shifts.validator import ShiftDurationValidator


def d(value: str) -> datetime:
    return datetime.fromisoformat(value)


@pytest.fixture
def validator(shifts):
    return ShiftDurationValidator(shifts)


def codes(violations):
    return [v.code for v in violations]


@pytest.mark.parametrize(
    "category,cap_hours",
    [
        (ShiftCategory.WORK, 10),
        (ShiftCategory.PAID_ABSENCE, 12),
        (ShiftCategory.UNPAID_ABSENCE, 24),
    ],
)
def test_shift_length_cap_per_category(validator, shop, category, cap_hours):
    start = d("2019-02-04 00:00")
    at_cap = ShiftDraft(workplace_id=shop.workplace_id, category=category, starts_at=start, ends_at=start + timedelta(hours=cap_hours))
    too_long = ShiftDraft(
        workplace_id=shop.workplace_id,
        category=category,
        starts_at=start,
        ends_at=start + timedelta(hours=cap_hours, seconds=1),
    )

    assert validator.validate(at_cap) == []
    assert codes(validator.validate(too_long)) == [ViolationCode.SHIFT_TOO_LONG]


def test_long_work_shift_of_a_worker_also_breaks_daily_cap(validator, shop, worker):
    draft = ShiftDraft(
        workplace_id=shop.workplace_id,
        worker_id=worker.worker_id,
        starts_at=d("2019-02-04 08:00"),
        ends_at=d("2019-02-04 19:00"),
    )

    assert codes(validator.validate(draft)) == [ViolationCode.SHIFT_TOO_LONG, ViolationCode.MAX_DAILY_DURATION_EXCEEDED]


def test_end_before_start_is_the_only_violation(validator, shop, worker):
    draft = ShiftDraft(
        workplace_id=shop.workplace_id,
        worker_id=worker.worker_id,
        starts_at=d("2019-02-04 10:00"),
        ends_at=d("2019-02-04 10:00"),
    )

    violations = validator.validate(draft)

    assert codes(violations) == [ViolationCode.END_BEFORE_START]
    assert violations[0].field == "ends_at"


def test_missing_fields_are_all_reported(validator):
    violations = validator.validate(ShiftDraft(category=None))

    assert codes(violations) == [ViolationCode.MISSING_FIELD] * 4
    assert [v.field for v in violations] == ["workplace_id", "category", "starts_at", "ends_at"]


class TestWeeklyCap:
    @pytest.fixture(autouse=True)
    def full_week(self, shifts, shop, worker):
        for day in ("2019-02-04", "2019-02-05", "2019-02-06"):
            shifts.add(workplace_id=shop.workplace_id, worker_id=worker.worker_id, starts_at=f"{day} 10:00", ends_at=f"{day} 20:00")

    def draft(self, shop, worker, day):
        return ShiftDraft(
            workplace_id=shop.workplace_id,
            worker_id=worker.worker_id,
            starts_at=d(f"{day} 10:00"),
            ends_at=d(f"{day} 20:00"),
        )

    def test_fourth_long_day_breaks_weekly_cap(self, validator, shop, worker):
        assert codes(validator.validate(self.draft(shop, worker, "2019-02-07"))) == [
            ViolationCode.MAX_WEEKLY_DURATION_EXCEEDED
        ]

    def test_following_weeks_are_counted_separately(self, validator, shop, worker):
        assert validator.validate(self.draft(shop, worker, "2019-02-11")) == []
        assert validator.validate(self.draft(shop, worker, "2019-02-20")) == []

    def test_weekly_cap_counts_every_workplace(self, validator, workplaces, worker):
        other = workplaces.add("Five Guys")

        assert codes(validator.validate(self.draft(other, worker, "2019-02-07"))) == [
            ViolationCode.MAX_WEEKLY_DURATION_EXCEEDED
        ]

    def test_absences_do_not_count(self, validator, shop, worker):
        draft = ShiftDraft(
            workplace_id=shop.workplace_id,
            worker_id=worker.worker_id,
            category=ShiftCategory.PAID_ABSENCE,
            starts_at=d("2019-02-07 10:00"),
            ends_at=d("2019-02-07 20:00"),
        )

        assert validator.validate(draft) == []

    def test_unassigned_shift_is_not_capped_in_aggregate(self, validator, shop):
        draft = ShiftDraft(workplace_id=shop.workplace_id, starts_at=d("2019-02-07 10:00"), ends_at=d("2019-02-07 20:00"))

        assert validator.validate(draft) == []


class TestDailyCap:
    @pytest.fixture(autouse=True)
    def morning(self, shifts, shop, worker):
        return shifts.add(
            workplace_id=shop.workplace_id,
            worker_id=worker.worker_id,
            starts_at="2019-02-04 10:00",
            ends_at="2019-02-04 15:00",
        )

    def test_day_filled_exactly_to_the_cap(self, validator, shop, worker):
        draft = ShiftDraft(
            workplace_id=shop.workplace_id,
            worker_id=worker.worker_id,
            starts_at=d("2019-02-04 15:00"),
            ends_at=d("2019-02-04 20:00"),
        )

        assert validator.validate(draft) == []

    def test_one_second_over_the_cap(self, validator, shop, worker):
        draft = ShiftDraft(
            workplace_id=shop.workplace_id,
            worker_id=worker.worker_id,
            starts_at=d("2019-02-04 15:00"),
            ends_at=d("2019-02-04 20:00:01"),
        )

        assert codes(validator.validate(draft)) == [ViolationCode.MAX_DAILY_DURATION_EXCEEDED]

    def test_other_workplace_has_its_own_daily_total(self, validator, workplaces, worker):
        other = workplaces.add("Five Guys")
        draft = ShiftDraft(
            workplace_id=other.workplace_id,
            worker_id=worker.worker_id,
            starts_at=d("2019-02-04 15:00"),
            ends_at=d("2019-02-04 21:00"),
        )

        assert validator.validate(draft) == []

    def test_worker_wide_daily_scope(self, shifts, workplaces, worker):
        other = workplaces.add("Five Guys")
        validator = ShiftDurationValidator(shifts, policy=DurationPolicy(daily_scope=CapScope.WORKER))
        draft = ShiftDraft(
            workplace_id=other.workplace_id,
            worker_id=worker.worker_id,
            starts_at=d("2019-02-04 15:00"),
            ends_at=d("2019-02-04 21:00"),
        )

        assert codes(validator.validate(draft)) == [ViolationCode.MAX_DAILY_DURATION_EXCEEDED]

    def test_edited_shift_is_not_counted_twice(self, validator, shop, worker, morning):
        draft = ShiftDraft(
            shift_id=morning.shift_id,
            workplace_id=shop.workplace_id,
            worker_id=worker.worker_id,
            starts_at=d("2019-02-04 09:00"),
            ends_at=d("2019-02-04 19:00"),
        )

        assert validator.validate(draft) == []

    def test_next_day_starts_from_zero(self, validator, shop, worker):
        draft = ShiftDraft(
            workplace_id=shop.workplace_id,
            worker_id=worker.worker_id,
            starts_at=d("2019-02-05 08:00"),
            ends_at=d("2019-02-05 18:00"),
        )

        assert validator.validate(draft) == []


def test_policy_from_settings():
    settings = SimpleNamespace(MAX_WORK_SHIFT_HOURS=8, MAX_WEEKLY_WORK_HOURS="40")

    policy = DurationPolicy.from_settings(settings)

    assert policy.cap_for(ShiftCategory.WORK) == timedelta(hours=8)
    assert policy.cap_for(ShiftCategory.PAID_ABSENCE) == timedelta(hours=12)
    assert policy.max_daily_work == timedelta(hours=10)
    assert policy.max_weekly_work == timedelta(hours=40)


def test_stricter_policy_is_applied(shifts, shop):
    validator = ShiftDurationValidator(shifts, policy=DurationPolicy.from_settings(SimpleNamespace(MAX_WORK_SHIFT_HOURS=6)))
    draft = ShiftDraft(workplace_id=shop.workplace_id, starts_at=d("2019-02-04 10:00"), ends_at=d("2019-02-04 17:00"))

    assert codes(validator.validate(draft)) == [ViolationCode.SHIFT_TOO_LONG]
    assert validator.policy.cap_for(ShiftCategory.WORK) == timedelta(hours=6)


def test_category_given_as_stored_value(validator, shop):
    draft = ShiftDraft(workplace_id=shop.workplace_id, category="work", starts_at=d("2019-02-04 08:00"), ends_at=d("2019-02-04 19:00"))

    violations = validator.validate(draft)

    assert codes(violations) == [ViolationCode.SHIFT_TOO_LONG]
    assert violations[0].message.startswith("work shift longer than")


def test_unknown_category_is_reported_missing(validator, shop):
    draft = ShiftDraft(workplace_id=shop.workplace_id, category="overtime", starts_at=d("2019-02-04 08:00"), ends_at=d("2019-02-04 09:00"))

    violations = validator.validate(draft)

    assert [(v.code, v.field) for v in violations] == [(ViolationCode.MISSING_FIELD, "category")]
