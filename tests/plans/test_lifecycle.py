from datetime import date, datetime

import pytest

from src.gym_admin.gym_admin.core.enums import MembershipStatus
from src.gym_admin.gym_admin.core.exceptions import InvalidPlan, ValidationError
from src.gym_admin.gym_admin.plans.lifecycle import (
    classify_status,
    compute_expiration,
    days_until_expiration,
    get_plan,
    plan_price,
)


@pytest.mark.parametrize(
    "plan, expected",
    [
        ("Basic", date(2026, 3, 15)),
        ("Pro", date(2026, 7, 15)),
        ("Premium", date(2027, 1, 15)),
        ("One-Day Pass", date(2026, 1, 16)),
    ],
)
def test_compute_expiration_per_plan(plan, expected):
    assert compute_expiration(date(2026, 1, 15), plan) == expected


def test_month_end_is_clamped():
    assert compute_expiration(date(2023, 12, 31), "Basic") == date(2024, 2, 29)
    assert compute_expiration(date(2024, 1, 31), "Basic") == date(2024, 3, 31)
    assert compute_expiration(date(2025, 8, 31), "Pro") == date(2026, 2, 28)


def test_accepts_datetime_start():
    assert compute_expiration(datetime(2026, 1, 15, 22, 10), "One-Day Pass") == date(2026, 1, 16)


def test_unknown_plan_is_rejected():
    with pytest.raises(InvalidPlan) as exc:
        compute_expiration(date(2026, 1, 1), "Gold")
    assert "Gold" in str(exc.value)
    assert isinstance(exc.value, ValidationError)


def test_plan_prices():
    assert [plan_price(p) for p in ("Basic", "Pro", "Premium", "One-Day Pass")] == [1000, 4000, 7000, 200]
    assert get_plan(get_plan("Pro")).name == "Pro"


@pytest.mark.parametrize(
    "offset_days, expected",
    [
        (-1, MembershipStatus.EXPIRED),
        (0, MembershipStatus.EXPIRING_SOON),
        (7, MembershipStatus.EXPIRING_SOON),
        (8, MembershipStatus.ACTIVE),
    ],
)
def test_classify_status_boundaries(offset_days, expected):
    today = date(2026, 2, 2)
    expiration = date.fromordinal(today.toordinal() + offset_days)
    assert classify_status(expiration, today) == expected


def test_classify_status_ignores_time_of_day():
    assert classify_status(date(2026, 2, 2), datetime(2026, 2, 2, 23, 59)) == MembershipStatus.EXPIRING_SOON


def test_days_until_expiration_floors_at_zero():
    assert days_until_expiration(date(2026, 2, 10), date(2026, 2, 2)) == 8
    assert days_until_expiration(date(2026, 1, 10), date(2026, 2, 2)) == 0


@pytest.mark.parametrize("plan", ["Basic", "Pro", "Premium", "One-Day Pass"])
def test_compute_expiration_is_deterministic(plan):
    start = date(2024, 2, 29)
    assert compute_expiration(start, plan) == compute_expiration(start, plan)
