from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Repository interface for members.

    Services depend on this protocol, not on a concrete database.
    """

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def list_all(self, *, search: Optional[str] = None) -> Sequence[Member]:
        raise NotImplementedError

    def list_expiring_on(self, expiration_date: date) -> Sequence[Member]:
        raise NotImplementedError

    def create_member(
        self,
        *,
        name: str,
        age: int,
        address: str,
        email: str,
        phone: str,
        registration_number: str,
        membership_plan: str,
        join_date: date,
        expiration_date: date,
    ) -> int:
        raise NotImplementedError

    def update_contact(
        self,
        member_id: int,
        *,
        name: str,
        age: int,
        address: str,
        email: str,
        phone: str,
    ) -> bool:
        raise NotImplementedError

    def update_subscription(self, member_id: int, *, membership_plan: str, expiration_date: date) -> bool:
        """Only called on renewal; expiration is never changed anywhere else."""

        raise NotImplementedError

    def delete_by_id(self, member_id: int) -> bool:
        raise NotImplementedError
