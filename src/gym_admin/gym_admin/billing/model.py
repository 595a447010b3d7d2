from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Payment:
    payment_row_id: int
    member_id: int
    amount: int
    plan: str
    payment_date: date
    expiration_date: date
    payment_id: Optional[str] = None
    order_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.payment_row_id,
            "member_id": self.member_id,
            "amount": self.amount,
            "plan": self.plan,
            "payment_date": self.payment_date.strftime("%Y-%m-%d"),
            "expiration_date": self.expiration_date.strftime("%Y-%m-%d"),
            "payment_id": self.payment_id,
            "order_id": self.order_id,
        }
