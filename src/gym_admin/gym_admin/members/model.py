from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import MembershipStatus
from ..plans.lifecycle import classify_status, days_until_expiration


@dataclass(frozen=True)
class Member:
    """Domain entity: gym member.

    There is no stored status field; `status_on` derives it from expiration_date.
    """

    member_id: int
    name: str
    age: int
    address: str
    email: str
    phone: str
    registration_number: str
    membership_plan: str
    join_date: date
    expiration_date: date
    created_at: Optional[datetime] = None

    def status_on(self, now: date | datetime) -> MembershipStatus:
        return classify_status(self.expiration_date, now)

    def to_dict(self, now: date | datetime) -> dict:
        return {
            "id": self.member_id,
            "name": self.name,
            "age": self.age,
            "address": self.address,
            "email": self.email,
            "phone": self.phone,
            "registration_number": self.registration_number,
            "membership_plan": self.membership_plan,
            "join_date": self.join_date.strftime("%Y-%m-%d"),
            "expiration_date": self.expiration_date.strftime("%Y-%m-%d"),
            "status": self.status_on(now).value,
            "days_until_expiration": days_until_expiration(self.expiration_date, now),
        }
