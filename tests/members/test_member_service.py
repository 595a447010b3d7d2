from datetime import date, timedelta

import pytest

from src.gym_admin.gym_admin.core.enums import MembershipStatus
from src.gym_admin.gym_admin.core.exceptions import InvalidPlan, MemberNotFound, ValidationError
from src.gym_admin.gym_admin.members.service import MemberService, NewMember


@pytest.fixture
def service(members_repo):
    return MemberService(members_repo)


def _new_member(**overrides):
    fields = dict(
        name="Riya",
        age=27,
        address="Mumbai",
        email="riya@example.com",
        phone="9000000009",
        registration_number="REG-0100",
        membership_plan="Premium",
        join_date=date(2026, 1, 31),
    )
    fields.update(overrides)
    return NewMember(**fields)


def test_create_member_derives_expiration(service, members_repo):
    member_id = service.create_member(_new_member())

    member = members_repo.get_by_id(member_id)
    assert member.expiration_date == date(2027, 1, 31)
    assert member.membership_plan == "Premium"


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"name": "  "}, ValidationError),
        ({"email": "not-an-email"}, ValidationError),
        ({"age": 0}, ValidationError),
        ({"membership_plan": "Gold"}, InvalidPlan),
    ],
)
def test_create_member_validation(service, members_repo, overrides, error):
    with pytest.raises(error):
        service.create_member(_new_member(**overrides))
    assert members_repo.list_all() == []


def test_list_members_filters_on_derived_status(service, members_repo, make_member, fixed_now):
    today = fixed_now.date()
    members_repo.add(make_member(1, name="Aarav", expiration_date=today + timedelta(days=40)))
    members_repo.add(make_member(2, name="Kabir", expiration_date=today + timedelta(days=3)))
    members_repo.add(make_member(3, name="Isha", expiration_date=today - timedelta(days=3)))

    rows = service.list_members(now=fixed_now, status=MembershipStatus.EXPIRING_SOON)

    assert [r["name"] for r in rows] == ["Kabir"]
    assert rows[0]["status"] == "expiring-soon"
    assert rows[0]["days_until_expiration"] == 3


def test_update_keeps_subscription(service, active_member, members_repo):
    service.update_member(
        active_member.member_id, name="Aarav S", age=31, address="Pune", email="aarav@example.com", phone="9000000001"
    )
    member = members_repo.get_by_id(active_member.member_id)
    assert member.name == "Aarav S"
    assert member.expiration_date == active_member.expiration_date


def test_renew_starts_from_today(service, expired_member, members_repo):
    new_expiration = service.renew(expired_member.member_id, "One-Day Pass", today=date(2026, 2, 2))

    assert new_expiration == date(2026, 2, 3)
    assert members_repo.get_by_id(expired_member.member_id).membership_plan == "One-Day Pass"


def test_missing_member(service):
    with pytest.raises(MemberNotFound):
        service.get_member(5)
    with pytest.raises(MemberNotFound):
        service.delete_member(5)


def test_expiring_in(service, members_repo, make_member):
    members_repo.add(make_member(1, expiration_date=date(2026, 2, 4)))
    members_repo.add(make_member(2, expiration_date=date(2026, 2, 5)))
    assert [m.member_id for m in service.expiring_in(2, today=date(2026, 2, 2))] == [1]
