from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_CURRENCY
from ..core.exceptions import MemberNotFound
from ..members.repository import MemberRepository
from ..plans.lifecycle import compute_expiration, get_plan
from .gateway import PaymentGateway
from .model import Payment
from .repository import PaymentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentConfirmation:
    order_id: str
    payment_id: str
    signature: str
    member_id: int
    plan: str
    is_renewal: bool = False


@dataclass(frozen=True)
class VerifiedPayment:
    payment: Payment
    renewed: bool

    @property
    def message(self) -> str:
        return "Membership renewed successfully" if self.renewed else "Payment recorded successfully"


class BillingService:
    """Use cases: create gateway orders and record verified payments."""

    def __init__(self, gateway: PaymentGateway, payments: PaymentRepository, members: MemberRepository):
        self._gateway = gateway
        self._payments = payments
        self._members = members

    def create_order(self, *, amount: int, currency: str = DEFAULT_CURRENCY, receipt: Optional[str] = None) -> str:
        return self._gateway.create_order(amount=int(amount), currency=currency, receipt=receipt)

    def create_order_for_plan(self, plan_name: str, *, receipt: Optional[str] = None) -> str:
        plan = get_plan(plan_name)
        return self._gateway.create_order(amount=plan.price, currency=DEFAULT_CURRENCY, receipt=receipt)

    def verify_payment(self, confirmation: PaymentConfirmation, *, today: date | None = None) -> VerifiedPayment:
        """Check the gateway signature, then record the payment and (optionally) renew.

        Every check runs before the first write, so a rejected payment leaves no trace.
        """
        self._gateway.verify_payment_signature(
            order_id=confirmation.order_id,
            payment_id=confirmation.payment_id,
            signature=confirmation.signature,
        )

        member = self._members.get_by_id(int(confirmation.member_id))
        if not member:
            raise MemberNotFound(confirmation.member_id)

        plan = get_plan(confirmation.plan)
        today = today or date.today()
        start = today if confirmation.is_renewal else member.join_date
        expiration_date = compute_expiration(start, plan)

        # Payment row first: payment_id is unique, so a replay fails before any renewal.
        row_id = self._payments.create_payment(
            member_id=member.member_id,
            amount=plan.price,
            plan=plan.name,
            payment_date=today,
            expiration_date=expiration_date,
            payment_id=confirmation.payment_id,
            order_id=confirmation.order_id,
        )
        if confirmation.is_renewal:
            self._members.update_subscription(
                member.member_id, membership_plan=plan.name, expiration_date=expiration_date
            )

        logger.info(
            "Verified payment %s (order %s) for member %s, renewal=%s",
            confirmation.payment_id,
            confirmation.order_id,
            member.member_id,
            confirmation.is_renewal,
        )
        payment = Payment(
            payment_row_id=row_id,
            member_id=member.member_id,
            amount=plan.price,
            plan=plan.name,
            payment_date=today,
            expiration_date=expiration_date,
            payment_id=confirmation.payment_id,
            order_id=confirmation.order_id,
        )
        return VerifiedPayment(payment=payment, renewed=confirmation.is_renewal)

    def list_payments(self, *, member_id: Optional[int] = None, limit: int = 200) -> list[dict]:
        return [p.to_dict() for p in self._payments.list_payments(member_id=member_id, limit=limit)]

    def monthly_revenue(self, year: int, month: int) -> int:
        start = date(year, month, 1)
        end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
        return self._payments.total_between(start, end)
