from __future__ import annotations

from collections import defaultdict
from typing import Optional

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.models.about import (
    AboutCard,
    AboutSection,
    HistoryMilestone,
    Partner,
    SectionType,
    TeamMember,
)
from rethinking_econ.services.crud import ResourceService


async def _delete_section_cards(session: AsyncSession, section: AboutSection) -> None:
    await session.exec(delete(AboutCard).where(AboutCard.section_id == section.id))


sections = ResourceService(AboutSection, before_delete=_delete_section_cards)
cards = ResourceService(AboutCard)
milestones = ResourceService(HistoryMilestone)
team_members = ResourceService(TeamMember)
partners = ResourceService(Partner)


async def cards_by_section(
    session: AsyncSession, section_ids: list[int]
) -> dict[int, list[AboutCard]]:
    grouped: dict[int, list[AboutCard]] = defaultdict(list)
    if not section_ids:
        return grouped
    stmt = (
        select(AboutCard)
        .where(AboutCard.section_id.in_(section_ids))
        .order_by(AboutCard.display_order.asc(), AboutCard.id.asc())
    )
    for card in (await session.exec(stmt)).all():
        grouped[card.section_id].append(card)
    return grouped


async def get_section_by_type(session: AsyncSession, section_type: SectionType) -> Optional[AboutSection]:
    stmt = (
        select(AboutSection)
        .where(AboutSection.section == section_type)
        .order_by(AboutSection.display_order.asc(), AboutSection.id.asc())
    )
    return (await session.exec(stmt)).first()
