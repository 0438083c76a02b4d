from __future__ import annotations

import secrets
import string
import time
from typing import Any, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.core.config import settings
from rethinking_econ.db.query import ilike_any
from rethinking_econ.models.common import utcnow
from rethinking_econ.models.profile import Profile

_ID_ALPHABET = string.ascii_lowercase + string.digits


class ProfileExistsError(Exception):
    """Raised when a profile with the requested id already exists."""


async def is_admin(session: AsyncSession, user_id: str) -> bool:
    """Configured admin ids and team members are administrators."""
    if user_id in settings.ADMIN_USER_IDS:
        return True
    profile = await session.get(Profile, user_id)
    return bool(profile and profile.is_team_member)


async def get_or_create_profile(
    session: AsyncSession,
    user_id: str,
    *,
    name: Optional[str] = None,
    avatar_url: Optional[str] = None,
) -> Profile:
    """Return the caller's profile, inserting one from token claims on first use."""
    profile = await session.get(Profile, user_id)
    if profile is not None:
        return profile
    profile = Profile(id=user_id, name=name, avatar_url=avatar_url, bio="", position="")
    session.add(profile)
    await session.flush()
    return profile


async def update_profile(session: AsyncSession, profile: Profile, data: dict[str, Any]) -> Profile:
    for field, value in data.items():
        setattr(profile, field, value)
    profile.updated_at = utcnow()
    session.add(profile)
    await session.flush()
    return profile


def generate_profile_id() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"auto_{int(time.time() * 1000)}_{suffix}"


async def create_profile(session: AsyncSession, data: dict[str, Any]) -> Profile:
    """Insert a profile on behalf of an admin, e.g. for a guest author."""
    profile_id = data.pop("id", None) or generate_profile_id()
    if await session.get(Profile, profile_id) is not None:
        raise ProfileExistsError("A profile with this ID already exists")

    profile = Profile(
        id=profile_id,
        name=data.get("name"),
        position=data.get("position") or "",
        bio=data.get("bio") or "",
        avatar_url=data.get("avatar_url"),
        is_team_member=bool(data.get("is_team_member")),
        team_role=data.get("team_role") or "",
        show_on_website=bool(data.get("show_on_website")),
    )
    session.add(profile)
    await session.flush()
    return profile


async def list_profiles(
    session: AsyncSession,
    *,
    search: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
) -> list[Profile]:
    stmt = select(Profile)
    if search:
        stmt = stmt.where(ilike_any([Profile.name], search))
    stmt = stmt.order_by(Profile.created_at.desc(), Profile.id.asc()).offset(offset).limit(limit)
    result = await session.exec(stmt)
    return list(result.all())
