"""Subscription lifecycle: expiration arithmetic and derived status.

Everything here is a pure function of its arguments. Status is never read from
storage; callers recompute it from the expiration date on every read.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

from ..common.datetime_utils import add_months, as_date
from ..core.constants import EXPIRING_SOON_DAYS
from ..core.enums import MembershipStatus
from ..core.exceptions import InvalidPlan
from .model import SUBSCRIPTION_PLANS, Plan

PlanLike = Union[Plan, str]


def get_plan(name: PlanLike) -> Plan:
    if isinstance(name, Plan):
        return name
    for plan in SUBSCRIPTION_PLANS:
        if plan.name == name:
            return plan
    raise InvalidPlan(str(name))


def plan_price(plan: PlanLike) -> int:
    return get_plan(plan).price


def compute_expiration(start_date: date | datetime, plan: PlanLike) -> date:
    details = get_plan(plan)
    start = as_date(start_date)
    if details.duration_days:
        return start + timedelta(days=details.duration_days)
    return add_months(start, int(details.duration_months or 0))


def classify_status(expiration_date: date | datetime, now: date | datetime) -> MembershipStatus:
    """Expired before today, expiring-soon within 7 days (inclusive), else active."""
    expiration = as_date(expiration_date)
    today = as_date(now)

    if expiration < today:
        return MembershipStatus.EXPIRED
    if (expiration - today).days <= EXPIRING_SOON_DAYS:
        return MembershipStatus.EXPIRING_SOON
    return MembershipStatus.ACTIVE


def days_until_expiration(expiration_date: date | datetime, now: date | datetime) -> int:
    return max(0, (as_date(expiration_date) - as_date(now)).days)
