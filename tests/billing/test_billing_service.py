from datetime import date

import pytest

from src.gym_admin.gym_admin.billing.service import BillingService, PaymentConfirmation
from src.gym_admin.gym_admin.billing.signature import compute_signature
from src.gym_admin.gym_admin.core.exceptions import InvalidPlan, MemberNotFound, SignatureMismatch

TODAY = date(2026, 2, 2)


@pytest.fixture
def billing(gateway, payments_repo, members_repo):
    return BillingService(gateway, payments_repo, members_repo)


def _confirmation(member_id, plan="Pro", *, renewal=True, secret="test-secret", signature=None):
    return PaymentConfirmation(
        order_id="order_9",
        payment_id="pay_9",
        signature=signature or compute_signature("order_9", "pay_9", secret),
        member_id=member_id,
        plan=plan,
        is_renewal=renewal,
    )


def test_renewal_extends_from_today_and_records_payment(billing, active_member, members_repo, payments_repo):
    verified = billing.verify_payment(_confirmation(active_member.member_id), today=TODAY)

    assert verified.renewed is True
    assert verified.message == "Membership renewed successfully"
    assert verified.payment.expiration_date == date(2026, 8, 2)
    assert verified.payment.amount == 4000

    member = members_repo.get_by_id(active_member.member_id)
    assert member.membership_plan == "Pro"
    assert member.expiration_date == date(2026, 8, 2)

    (stored,) = payments_repo.payments
    assert (stored.order_id, stored.payment_id, stored.payment_date) == ("order_9", "pay_9", TODAY)


def test_first_payment_uses_join_date_and_keeps_subscription(billing, active_member, members_repo, payments_repo):
    verified = billing.verify_payment(_confirmation(active_member.member_id, "Basic", renewal=False), today=TODAY)

    assert verified.message == "Payment recorded successfully"
    assert verified.payment.expiration_date == date(2026, 3, 10)
    assert members_repo.subscription_updates == []
    assert len(payments_repo.payments) == 1


def test_bad_signature_changes_nothing(billing, active_member, members_repo, payments_repo):
    with pytest.raises(SignatureMismatch):
        billing.verify_payment(_confirmation(active_member.member_id, signature="0" * 64), today=TODAY)

    assert members_repo.subscription_updates == []
    assert payments_repo.payments == []
    assert members_repo.get_by_id(active_member.member_id) == active_member


def test_unknown_member_records_nothing(billing, payments_repo):
    with pytest.raises(MemberNotFound):
        billing.verify_payment(_confirmation(404), today=TODAY)
    assert payments_repo.payments == []


def test_unknown_plan_records_nothing(billing, active_member, payments_repo, members_repo):
    with pytest.raises(InvalidPlan):
        billing.verify_payment(_confirmation(active_member.member_id, "Gold"), today=TODAY)
    assert payments_repo.payments == []
    assert members_repo.subscription_updates == []


def test_order_for_plan_charges_plan_price(billing, gateway):
    order_id = billing.create_order_for_plan("Premium", receipt="rcpt-1")

    assert order_id == "order_1"
    assert gateway.orders == [{"amount": 7000, "currency": "INR", "receipt": "rcpt-1"}]


def test_monthly_revenue(billing, payments_repo):
    for day, amount in ((date(2026, 1, 31), 1000), (date(2026, 2, 1), 4000), (date(2026, 2, 28), 200), (date(2026, 3, 1), 7000)):
        payments_repo.create_payment(
            member_id=1, amount=amount, plan="Basic", payment_date=day, expiration_date=day, payment_id=None, order_id=None
        )
    assert billing.monthly_revenue(2026, 2) == 4200
    assert billing.monthly_revenue(2026, 12) == 0


class FailingPayments:
    def create_payment(self, **fields):
        raise RuntimeError("Duplicate entry 'pay_9' for key 'uq_payments_payment_id'")


def test_failed_payment_insert_leaves_member_unrenewed(gateway, members_repo, active_member):
    billing = BillingService(gateway, FailingPayments(), members_repo)

    with pytest.raises(RuntimeError):
        billing.verify_payment(_confirmation(active_member.member_id), today=TODAY)

    assert members_repo.subscription_updates == []
    assert members_repo.get_by_id(active_member.member_id) == active_member
