from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.models.common import utcnow
from rethinking_econ.models.membership import (
    FAQ,
    CollaborationCard,
    Membership,
    MembershipStatus,
    MembershipType,
)
from rethinking_econ.models.profile import Profile
from rethinking_econ.services.crud import ResourceInUseError, ResourceService


class MembershipError(Exception):
    """Base error for membership operations."""


class MembershipNotFoundError(MembershipError):
    """Raised when a membership or membership type does not exist."""


class MembershipPermissionError(MembershipError):
    """Raised when the caller may not act on a membership."""


class MembershipValidationError(MembershipError):
    """Raised when an application breaks a membership rule."""


def one_year_after(moment: datetime) -> datetime:
    try:
        return moment.replace(year=moment.year + 1)
    except ValueError:
        # 29 February
        return moment.replace(year=moment.year + 1, day=28)


async def ensure_type_unused(session: AsyncSession, membership_type: MembershipType) -> None:
    stmt = select(Membership.id).where(Membership.membership_type_id == membership_type.id).limit(1)
    if (await session.exec(stmt)).first() is not None:
        raise ResourceInUseError("Cannot delete a membership type that is in use")


async def list_all(
    session: AsyncSession,
) -> list[tuple[Membership, Optional[MembershipType], Optional[Profile]]]:
    stmt = (
        select(Membership, MembershipType, Profile)
        .join(MembershipType, MembershipType.id == Membership.membership_type_id, isouter=True)
        .join(Profile, Profile.id == Membership.user_id, isouter=True)
        .order_by(Membership.created_at.asc(), Membership.id.asc())
    )
    result = await session.exec(stmt)
    return [tuple(row) for row in result.all()]


async def list_for_user(
    session: AsyncSession, user_id: str
) -> list[tuple[Membership, Optional[MembershipType]]]:
    stmt = (
        select(Membership, MembershipType)
        .join(MembershipType, MembershipType.id == Membership.membership_type_id, isouter=True)
        .where(Membership.user_id == user_id)
        .order_by(Membership.created_at.asc(), Membership.id.asc())
    )
    result = await session.exec(stmt)
    return [tuple(row) for row in result.all()]


async def apply(session: AsyncSession, *, user_id: str, membership_type_id: int) -> Membership:
    """Apply for a membership type.

    Types that need no approval are granted immediately.
    """
    membership_type = await session.get(MembershipType, membership_type_id)
    if membership_type is None:
        raise MembershipNotFoundError("Membership type not found")

    stmt = select(Membership.id).where(
        Membership.user_id == user_id,
        Membership.membership_type_id == membership_type_id,
        Membership.status == MembershipStatus.approved,
    )
    if (await session.exec(stmt)).first() is not None:
        raise MembershipValidationError("You already have this membership")

    membership = Membership(user_id=user_id, membership_type_id=membership_type_id)
    if membership_type.requires_approval:
        membership.status = MembershipStatus.pending
    else:
        membership.status = MembershipStatus.approved
        membership.start_date = utcnow()
    session.add(membership)
    await session.flush()
    return membership


async def get_membership(session: AsyncSession, membership_id: int) -> Membership:
    membership = await session.get(Membership, membership_id)
    if membership is None:
        raise MembershipNotFoundError("Membership not found")
    return membership


async def set_status(session: AsyncSession, membership: Membership, status: MembershipStatus) -> Membership:
    """Approval starts a one-year term from now."""
    now = utcnow()
    membership.status = status
    if status == MembershipStatus.approved:
        membership.start_date = now
        membership.end_date = one_year_after(now)
    membership.updated_at = now
    session.add(membership)
    await session.flush()
    return membership


async def cancel(
    session: AsyncSession,
    membership: Membership,
    *,
    user_id: str,
    caller_is_admin: bool,
) -> Membership:
    """Owners and admins may cancel; the row is kept as rejected."""
    if membership.user_id != user_id and not caller_is_admin:
        raise MembershipPermissionError("You can only cancel your own memberships")
    now = utcnow()
    membership.status = MembershipStatus.rejected
    membership.end_date = now
    membership.updated_at = now
    session.add(membership)
    await session.flush()
    return membership


types = ResourceService(
    MembershipType,
    order_by=(MembershipType.id.asc(),),
    before_delete=ensure_type_unused,
)
faqs = ResourceService(FAQ)
collaboration_cards = ResourceService(CollaborationCard)
