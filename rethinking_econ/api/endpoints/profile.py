from fastapi import APIRouter

from rethinking_econ.api.deps import CallerDep, SessionDep
from rethinking_econ.models.profile import Profile
from rethinking_econ.schemas.common import SuccessResponse
from rethinking_econ.schemas.profile import ProfileRead, ProfileUpdate
from rethinking_econ.services import profiles as profiles_service

router = APIRouter()


@router.get("/me", response_model=ProfileRead)
async def read_my_profile(session: SessionDep, caller: CallerDep) -> Profile:
    """Return the caller's profile, creating it on first access."""
    profile = await profiles_service.get_or_create_profile(
        session, caller.user_id, name=caller.name, avatar_url=caller.picture
    )
    await session.commit()
    await session.refresh(profile)
    return profile


@router.patch("/me", response_model=SuccessResponse)
async def update_my_profile(
    profile_in: ProfileUpdate,
    session: SessionDep,
    caller: CallerDep,
) -> SuccessResponse:
    profile = await profiles_service.get_or_create_profile(
        session, caller.user_id, name=caller.name, avatar_url=caller.picture
    )
    await profiles_service.update_profile(session, profile, profile_in.model_dump(exclude_unset=True))
    await session.commit()
    return SuccessResponse(success=True)
