from typing import List

from fastapi import APIRouter, HTTPException, status

from rethinking_econ.api.deps import CallerDep, SessionDep
from rethinking_econ.models.publication import Publication
from rethinking_econ.schemas.profile import ProfileSummary
from rethinking_econ.schemas.publication import (
    CategoryRead,
    PublicationDetail,
    PublicationRead,
    PublicationSubmit,
    TagRead,
)
from rethinking_econ.services import profiles as profiles_service
from rethinking_econ.services import publications as publications_service

router = APIRouter()


@router.post("/", response_model=PublicationRead, status_code=status.HTTP_201_CREATED)
async def submit_publication(
    publication_in: PublicationSubmit,
    session: SessionDep,
    caller: CallerDep,
) -> Publication:
    """Submit a publication for review; the caller becomes its author."""
    await profiles_service.get_or_create_profile(
        session, caller.user_id, name=caller.name, avatar_url=caller.picture
    )
    try:
        publication = await publications_service.submit(session, caller.user_id, publication_in.model_dump())
    except publications_service.PublicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except publications_service.PublicationConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await session.commit()
    await session.refresh(publication)
    return publication


@router.get("/", response_model=List[PublicationRead])
async def list_publications(session: SessionDep) -> List[Publication]:
    return await publications_service.list_published(session)


@router.get("/{slug}", response_model=PublicationDetail)
async def get_publication(slug: str, session: SessionDep) -> PublicationDetail:
    try:
        publication = await publications_service.get_published_by_slug(session, slug)
    except publications_service.PublicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    bundle = await publications_service.load_bundle(session, publication)
    return PublicationDetail(
        **PublicationRead.model_validate(publication).model_dump(),
        author=ProfileSummary.model_validate(bundle.author) if bundle.author else None,
        categories=[CategoryRead.model_validate(category) for category in bundle.categories],
        tags=[TagRead.model_validate(tag) for tag in bundle.tags],
    )
