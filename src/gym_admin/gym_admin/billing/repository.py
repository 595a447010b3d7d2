from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Payment


class PaymentRepository(Protocol):
    def create_payment(
        self,
        *,
        member_id: int,
        amount: int,
        plan: str,
        payment_date: date,
        expiration_date: date,
        payment_id: Optional[str],
        order_id: Optional[str],
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, payment_row_id: int) -> Optional[Payment]:
        raise NotImplementedError

    def list_payments(self, *, member_id: Optional[int] = None, limit: int = 200) -> Sequence[Payment]:
        raise NotImplementedError

    def total_between(self, start: date, end: date) -> int:
        """Sum of amounts with start <= payment_date < end."""

        raise NotImplementedError
