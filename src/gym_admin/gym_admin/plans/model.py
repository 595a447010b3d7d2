from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Plan:
    """A subscription tier. Exactly one of duration_months / duration_days is set."""

    name: str
    price: int
    duration_months: Optional[int] = None
    duration_days: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "price": self.price,
            "duration_months": self.duration_months,
            "duration_days": self.duration_days,
        }


SUBSCRIPTION_PLANS: tuple[Plan, ...] = (
    Plan(name="Basic", price=1000, duration_months=2),
    Plan(name="Pro", price=4000, duration_months=6),
    Plan(name="Premium", price=7000, duration_months=12),
    Plan(name="One-Day Pass", price=200, duration_days=1),
)
