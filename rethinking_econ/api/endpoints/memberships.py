from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from rethinking_econ.api.crud import build_crud_router
from rethinking_econ.api.deps import AdminDep, CallerDep, SessionDep
from rethinking_econ.models.membership import FAQCategory, Membership, MembershipType
from rethinking_econ.models.profile import Profile
from rethinking_econ.schemas.membership import (
    CollaborationCardCreate,
    CollaborationCardRead,
    CollaborationCardUpdate,
    FAQCreate,
    FAQRead,
    FAQUpdate,
    MembershipApply,
    MembershipDetail,
    MembershipRead,
    MembershipStatusUpdate,
    MembershipTypeCreate,
    MembershipTypeRead,
    MembershipTypeUpdate,
)
from rethinking_econ.schemas.profile import ProfileSummary
from rethinking_econ.services import memberships as memberships_service
from rethinking_econ.services import profiles as profiles_service

router = APIRouter()

types_router = build_crud_router(
    memberships_service.types,
    read_schema=MembershipTypeRead,
    create_schema=MembershipTypeCreate,
    update_schema=MembershipTypeUpdate,
    label="Membership type",
)
faqs_router = build_crud_router(
    memberships_service.faqs,
    read_schema=FAQRead,
    create_schema=FAQCreate,
    update_schema=FAQUpdate,
    label="FAQ",
    filter_field="category",
    filter_type=FAQCategory,
)
collaboration_cards_router = build_crud_router(
    memberships_service.collaboration_cards,
    read_schema=CollaborationCardRead,
    create_schema=CollaborationCardCreate,
    update_schema=CollaborationCardUpdate,
    label="Collaboration card",
)

router.include_router(types_router, prefix="/types")
router.include_router(faqs_router, prefix="/faqs")
router.include_router(collaboration_cards_router, prefix="/collaboration-cards")


def _detail(
    membership: Membership,
    membership_type: Optional[MembershipType] = None,
    profile: Optional[Profile] = None,
) -> MembershipDetail:
    return MembershipDetail(
        **MembershipRead.model_validate(membership).model_dump(),
        membership_type=MembershipTypeRead.model_validate(membership_type) if membership_type else None,
        user=ProfileSummary.model_validate(profile) if profile else None,
    )


async def _get_membership_or_404(session: SessionDep, membership_id: int) -> Membership:
    try:
        return await memberships_service.get_membership(session, membership_id)
    except memberships_service.MembershipNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/", response_model=List[MembershipDetail])
async def list_memberships(session: SessionDep, admin: AdminDep) -> List[MembershipDetail]:
    """Every membership with its type and applicant."""
    rows = await memberships_service.list_all(session)
    return [_detail(membership, membership_type, profile) for membership, membership_type, profile in rows]


@router.get("/mine", response_model=List[MembershipDetail])
async def list_my_memberships(session: SessionDep, caller: CallerDep) -> List[MembershipDetail]:
    rows = await memberships_service.list_for_user(session, caller.user_id)
    return [_detail(membership, membership_type) for membership, membership_type in rows]


@router.post("/apply", response_model=MembershipRead, status_code=status.HTTP_201_CREATED)
async def apply_for_membership(
    apply_in: MembershipApply,
    session: SessionDep,
    caller: CallerDep,
) -> Membership:
    try:
        await profiles_service.get_or_create_profile(
            session, caller.user_id, name=caller.name, avatar_url=caller.picture
        )
        membership = await memberships_service.apply(
            session,
            user_id=caller.user_id,
            membership_type_id=apply_in.membership_type_id,
        )
    except memberships_service.MembershipNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except memberships_service.MembershipValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    await session.commit()
    await session.refresh(membership)
    return membership


@router.patch("/{membership_id}/status", response_model=MembershipRead)
async def update_membership_status(
    membership_id: int,
    status_in: MembershipStatusUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> Membership:
    membership = await _get_membership_or_404(session, membership_id)
    membership = await memberships_service.set_status(session, membership, status_in.status)
    await session.commit()
    await session.refresh(membership)
    return membership


@router.post("/{membership_id}/cancel", response_model=MembershipRead)
async def cancel_membership(membership_id: int, session: SessionDep, caller: CallerDep) -> Membership:
    """Cancel a membership; callers may cancel their own, admins any."""
    membership = await _get_membership_or_404(session, membership_id)
    caller_is_admin = await profiles_service.is_admin(session, caller.user_id)
    try:
        membership = await memberships_service.cancel(
            session,
            membership,
            user_id=caller.user_id,
            caller_is_admin=caller_is_admin,
        )
    except memberships_service.MembershipPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    await session.commit()
    await session.refresh(membership)
    return membership
