from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.validators import require_email, require_non_empty, require_positive_int
from ..core.enums import MembershipStatus
from ..core.exceptions import MemberNotFound, ValidationError
from ..plans.lifecycle import compute_expiration, get_plan
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewMember:
    name: str
    age: int
    address: str
    email: str
    phone: str
    registration_number: str
    membership_plan: str
    join_date: date


class MemberService:
    """Use cases: member CRUD and renewal."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def get_member(self, member_id: int) -> Member:
        member = self._members.get_by_id(int(member_id))
        if not member:
            raise MemberNotFound(member_id)
        return member

    def list_members(
        self,
        *,
        now: date | datetime | None = None,
        search: Optional[str] = None,
        status: Optional[MembershipStatus] = None,
    ) -> list[dict]:
        now = now or datetime.now()
        rows = [m.to_dict(now) for m in self._members.list_all(search=search)]
        if status is not None:
            rows = [r for r in rows if r["status"] == status.value]
        return rows

    def create_member(self, data: NewMember) -> int:
        name = require_non_empty(data.name, "Name")
        email = require_email(data.email)
        phone = require_non_empty(data.phone, "Phone")
        registration_number = require_non_empty(data.registration_number, "Registration number")
        age = require_positive_int(data.age, "Age")
        plan = get_plan(data.membership_plan)

        expiration_date = compute_expiration(data.join_date, plan)
        member_id = self._members.create_member(
            name=name,
            age=age,
            address=(data.address or "").strip(),
            email=email,
            phone=phone,
            registration_number=registration_number,
            membership_plan=plan.name,
            join_date=data.join_date,
            expiration_date=expiration_date,
        )
        logger.info("Created member %s on plan %s (expires %s)", member_id, plan.name, expiration_date)
        return member_id

    def update_member(self, member_id: int, *, name: str, age, address: str, email: str, phone: str) -> None:
        """Edit contact details. Plan and expiration only change through `renew`."""
        self.get_member(member_id)
        if not self._members.update_contact(
            int(member_id),
            name=require_non_empty(name, "Name"),
            age=require_positive_int(age, "Age"),
            address=(address or "").strip(),
            email=require_email(email),
            phone=require_non_empty(phone, "Phone"),
        ):
            logger.debug("Member %s contact update changed no rows", member_id)

    def delete_member(self, member_id: int) -> None:
        self.get_member(member_id)
        if not self._members.delete_by_id(int(member_id)):
            raise ValidationError("Failed to delete member")

    def renew(self, member_id: int, plan_name: str, *, today: date | None = None) -> date:
        """Start a new subscription period from today; returns the new expiration date."""
        plan = get_plan(plan_name)
        self.get_member(member_id)

        start = today or date.today()
        expiration_date = compute_expiration(start, plan)
        self._members.update_subscription(int(member_id), membership_plan=plan.name, expiration_date=expiration_date)
        logger.info("Renewed member %s on plan %s until %s", member_id, plan.name, expiration_date)
        return expiration_date

    def expiring_in(self, days: int, *, today: date | None = None) -> list[Member]:
        target = (today or date.today()) + timedelta(days=int(days))
        return list(self._members.list_expiring_on(target))
