from __future__ import annotations

import json
from typing import Any, Optional

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.core.text import slugify
from rethinking_econ.models.common import utcnow
from rethinking_econ.models.policy import (
    AdvocacyCampaign,
    CampaignStatus,
    CaseStudy,
    Policy,
    PolicyCategory,
    PolicyStatus,
)
from rethinking_econ.models.profile import Profile
from rethinking_econ.services.crud import ResourceService


class AuthorNotFoundError(Exception):
    """Raised when a brief or case study names an author without a profile."""


async def _delete_case_studies(session: AsyncSession, policy: Policy) -> None:
    await session.exec(delete(CaseStudy).where(CaseStudy.policy_id == policy.id))


policies = ResourceService(
    Policy,
    order_by=(Policy.published_at.desc().nulls_last(), Policy.display_order.asc(), Policy.id.asc()),
    before_delete=_delete_case_studies,
)
case_studies = ResourceService(
    CaseStudy,
    order_by=(CaseStudy.published_at.desc().nulls_last(), CaseStudy.display_order.asc(), CaseStudy.id.asc()),
)
campaigns = ResourceService(AdvocacyCampaign)


def _prepare_published(data: dict[str, Any], *, creating: bool) -> dict[str, Any]:
    """Derive the slug on create and stamp ``published_at`` on publish."""
    if creating and not data.get("slug"):
        data["slug"] = slugify(data["title"])
    if data.get("status") == PolicyStatus.published:
        data["published_at"] = utcnow()
    return data


async def _ensure_author(session: AsyncSession, data: dict[str, Any]) -> None:
    author_id = data.get("author_id")
    if author_id is not None and await session.get(Profile, author_id) is None:
        raise AuthorNotFoundError("Author not found")


async def list_policies(session: AsyncSession, category: Optional[PolicyCategory] = None) -> list[Policy]:
    return await policies.list(session, category=category)


async def get_by_slug(session: AsyncSession, slug: str) -> Optional[Policy]:
    return (await session.exec(select(Policy).where(Policy.slug == slug))).first()


async def create_policy(session: AsyncSession, data: dict[str, Any]) -> Policy:
    await _ensure_author(session, data)
    return await policies.create(session, _prepare_published(data, creating=True))


async def update_policy(session: AsyncSession, policy: Policy, data: dict[str, Any]) -> Policy:
    await _ensure_author(session, data)
    return await policies.update(session, policy, _prepare_published(data, creating=False))


async def list_case_studies(session: AsyncSession, policy_id: int) -> list[CaseStudy]:
    return await case_studies.list(session, policy_id=policy_id)


async def create_case_study(session: AsyncSession, policy_id: int, data: dict[str, Any]) -> CaseStudy:
    await _ensure_author(session, data)
    data["policy_id"] = policy_id
    return await case_studies.create(session, _prepare_published(data, creating=True))


async def update_case_study(session: AsyncSession, case_study: CaseStudy, data: dict[str, Any]) -> CaseStudy:
    await _ensure_author(session, data)
    return await case_studies.update(session, case_study, _prepare_published(data, creating=False))


def _encode_achievements(data: dict[str, Any]) -> dict[str, Any]:
    """Campaign achievements are stored as one JSON text value."""
    if "achievements" in data:
        achievements = data["achievements"]
        data["achievements"] = json.dumps(list(achievements)) if achievements is not None else None
    return data


async def list_campaigns(
    session: AsyncSession, status: Optional[CampaignStatus] = None
) -> list[AdvocacyCampaign]:
    return await campaigns.list(session, status=status)


async def create_campaign(session: AsyncSession, data: dict[str, Any]) -> AdvocacyCampaign:
    return await campaigns.create(session, _encode_achievements(data))


async def update_campaign(
    session: AsyncSession, campaign: AdvocacyCampaign, data: dict[str, Any]
) -> AdvocacyCampaign:
    return await campaigns.update(session, campaign, _encode_achievements(data))
