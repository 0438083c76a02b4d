from typing import List

from fastapi import APIRouter, HTTPException, status

from rethinking_econ.api.crud import build_crud_router
from rethinking_econ.api.deps import AdminDep, SessionDep
from rethinking_econ.models.about import AboutCard, AboutSection, PartnerCategory, SectionType, TeamMemberCategory
from rethinking_econ.schemas.about import (
    AboutCardCreate,
    AboutCardRead,
    AboutCardUpdate,
    AboutSectionCreate,
    AboutSectionRead,
    AboutSectionUpdate,
    HistoryMilestoneCreate,
    HistoryMilestoneRead,
    HistoryMilestoneUpdate,
    PartnerCreate,
    PartnerRead,
    PartnerUpdate,
    TeamMemberCreate,
    TeamMemberRead,
    TeamMemberUpdate,
)
from rethinking_econ.schemas.common import DeleteResponse
from rethinking_econ.services import about as about_service

router = APIRouter()

milestones_router = build_crud_router(
    about_service.milestones,
    read_schema=HistoryMilestoneRead,
    create_schema=HistoryMilestoneCreate,
    update_schema=HistoryMilestoneUpdate,
    label="Milestone",
)
team_router = build_crud_router(
    about_service.team_members,
    read_schema=TeamMemberRead,
    create_schema=TeamMemberCreate,
    update_schema=TeamMemberUpdate,
    label="Team member",
    filter_field="category",
    filter_type=TeamMemberCategory,
)
partners_router = build_crud_router(
    about_service.partners,
    read_schema=PartnerRead,
    create_schema=PartnerCreate,
    update_schema=PartnerUpdate,
    label="Partner",
    filter_field="category",
    filter_type=PartnerCategory,
)

router.include_router(milestones_router, prefix="/milestones")
router.include_router(team_router, prefix="/team")
router.include_router(partners_router, prefix="/partners")


def _section_read(section: AboutSection, cards: List[AboutCard]) -> AboutSectionRead:
    data = AboutSectionRead.model_validate(section).model_dump(exclude={"cards"})
    return AboutSectionRead(**data, cards=[AboutCardRead.model_validate(card) for card in cards])


async def _get_section_or_404(session: SessionDep, section_id: int) -> AboutSection:
    section = await about_service.sections.get(session, section_id)
    if section is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Section not found")
    return section


async def _get_card_or_404(session: SessionDep, card_id: int) -> AboutCard:
    card = await about_service.cards.get(session, card_id)
    if card is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found")
    return card


@router.get("/sections", response_model=List[AboutSectionRead])
async def list_sections(session: SessionDep) -> List[AboutSectionRead]:
    """All overview sections with their cards."""
    sections = await about_service.sections.list(session)
    cards = await about_service.cards_by_section(session, [section.id for section in sections])
    return [_section_read(section, cards.get(section.id, [])) for section in sections]


@router.get("/sections/{section_type}", response_model=AboutSectionRead)
async def get_section(section_type: SectionType, session: SessionDep) -> AboutSectionRead:
    section = await about_service.get_section_by_type(session, section_type)
    if section is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Section not found")
    cards = await about_service.cards_by_section(session, [section.id])
    return _section_read(section, cards.get(section.id, []))


@router.post("/sections", response_model=AboutSectionRead, status_code=status.HTTP_201_CREATED)
async def create_section(
    section_in: AboutSectionCreate,
    session: SessionDep,
    admin: AdminDep,
) -> AboutSectionRead:
    section = await about_service.sections.create(session, section_in.model_dump())
    await session.commit()
    await session.refresh(section)
    return _section_read(section, [])


@router.patch("/sections/{section_id}", response_model=AboutSectionRead)
async def update_section(
    section_id: int,
    section_in: AboutSectionUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> AboutSectionRead:
    section = await _get_section_or_404(session, section_id)
    section = await about_service.sections.update(session, section, section_in.model_dump(exclude_unset=True))
    await session.commit()
    await session.refresh(section)
    cards = await about_service.cards_by_section(session, [section.id])
    return _section_read(section, cards.get(section.id, []))


@router.delete("/sections/{section_id}", response_model=DeleteResponse)
async def delete_section(section_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
    """Delete a section together with its cards."""
    section = await _get_section_or_404(session, section_id)
    await about_service.sections.delete(session, section)
    await session.commit()
    return DeleteResponse(id=section_id)


@router.post(
    "/sections/{section_id}/cards",
    response_model=AboutCardRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_card(
    section_id: int,
    card_in: AboutCardCreate,
    session: SessionDep,
    admin: AdminDep,
) -> AboutCard:
    await _get_section_or_404(session, section_id)
    card = await about_service.cards.create(session, {**card_in.model_dump(), "section_id": section_id})
    await session.commit()
    await session.refresh(card)
    return card


@router.patch("/cards/{card_id}", response_model=AboutCardRead)
async def update_card(
    card_id: int,
    card_in: AboutCardUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> AboutCard:
    card = await _get_card_or_404(session, card_id)
    card = await about_service.cards.update(session, card, card_in.model_dump(exclude_unset=True))
    await session.commit()
    await session.refresh(card)
    return card


@router.delete("/cards/{card_id}", response_model=DeleteResponse)
async def delete_card(card_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
    card = await _get_card_or_404(session, card_id)
    await about_service.cards.delete(session, card)
    await session.commit()
    return DeleteResponse(id=card_id)
