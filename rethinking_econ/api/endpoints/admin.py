from typing import List, Literal, Optional

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import JSONResponse

from rethinking_econ.api.deps import AdminDep, OptionalCallerDep, SessionDep
from rethinking_econ.models.profile import Profile
from rethinking_econ.models.publication import Publication, PublicationStatus
from rethinking_econ.schemas.admin import AdminCheckResponse
from rethinking_econ.schemas.common import DeleteResponse
from rethinking_econ.schemas.profile import ProfileCreate, ProfileRead, ProfileSummary
from rethinking_econ.schemas.publication import (
    BulkDeleteRequest,
    BulkDeleteResponse,
    CategoryRead,
    PublicationAdminCreate,
    PublicationAdminUpdate,
    PublicationApprove,
    PublicationDetail,
    PublicationRead,
    PublicationReject,
    PublicationWithAuthor,
    TagRead,
)
from rethinking_econ.services import profiles as profiles_service
from rethinking_econ.services import publications as publications_service

router = APIRouter()

StatusFilter = Literal["all", "draft", "pending_review", "published", "rejected"]


def _with_author(publication: Publication, author: Optional[Profile]) -> PublicationWithAuthor:
    return PublicationWithAuthor(
        **PublicationRead.model_validate(publication).model_dump(),
        author=ProfileSummary.model_validate(author) if author else None,
    )


async def _detail(session: SessionDep, publication: Publication) -> PublicationDetail:
    bundle = await publications_service.load_bundle(session, publication)
    return PublicationDetail(
        **_with_author(bundle.publication, bundle.author).model_dump(),
        categories=[CategoryRead.model_validate(category) for category in bundle.categories],
        tags=[TagRead.model_validate(tag) for tag in bundle.tags],
    )


async def _get_publication_or_404(session: SessionDep, publication_id: int) -> Publication:
    try:
        return await publications_service.get_publication(session, publication_id)
    except publications_service.PublicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/check", response_model=AdminCheckResponse)
async def check_admin(session: SessionDep, caller: OptionalCallerDep):
    """Report whether the caller is an administrator."""
    if caller is None:
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"is_admin": False})
    return AdminCheckResponse(is_admin=await profiles_service.is_admin(session, caller.user_id))


@router.get("/publications", response_model=List[PublicationWithAuthor])
async def list_publications(
    session: SessionDep,
    admin: AdminDep,
    status_filter: StatusFilter = Query(default="all", alias="status"),
    search: Optional[str] = Query(default=None, max_length=256),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> List[PublicationWithAuthor]:
    rows = await publications_service.list_for_review(
        session,
        status=None if status_filter == "all" else PublicationStatus(status_filter),
        search=search,
        limit=limit,
        offset=offset,
    )
    return [_with_author(publication, author) for publication, author in rows]


@router.post("/publications", response_model=PublicationDetail, status_code=status.HTTP_201_CREATED)
async def create_publication(
    publication_in: PublicationAdminCreate,
    session: SessionDep,
    admin: AdminDep,
) -> PublicationDetail:
    """Create a publication on behalf of another author."""
    try:
        publication = await publications_service.create_as_author(session, publication_in.model_dump())
    except publications_service.PublicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except publications_service.PublicationConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await session.commit()
    await session.refresh(publication)
    return await _detail(session, publication)


@router.post("/publications/bulk-delete", response_model=BulkDeleteResponse)
async def bulk_delete_publications(
    delete_in: BulkDeleteRequest,
    session: SessionDep,
    admin: AdminDep,
) -> BulkDeleteResponse:
    deleted = await publications_service.delete_publications(session, delete_in.ids)
    await session.commit()
    return BulkDeleteResponse(deleted=deleted)


@router.get("/publications/{publication_id}", response_model=PublicationDetail)
async def get_publication(publication_id: int, session: SessionDep, admin: AdminDep) -> PublicationDetail:
    publication = await _get_publication_or_404(session, publication_id)
    return await _detail(session, publication)


@router.patch("/publications/{publication_id}", response_model=PublicationDetail)
async def update_publication(
    publication_id: int,
    publication_in: PublicationAdminUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> PublicationDetail:
    publication = await _get_publication_or_404(session, publication_id)
    try:
        publication = await publications_service.update_publication(
            session, publication, publication_in.model_dump(exclude_unset=True)
        )
    except publications_service.PublicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except publications_service.PublicationConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await session.commit()
    await session.refresh(publication)
    return await _detail(session, publication)


@router.post("/publications/{publication_id}/approve", response_model=PublicationDetail)
async def approve_publication(
    publication_id: int,
    approve_in: PublicationApprove,
    session: SessionDep,
    admin: AdminDep,
) -> PublicationDetail:
    """Publish a submission, applying any reviewer edits first."""
    publication = await _get_publication_or_404(session, publication_id)
    modifications = approve_in.modifications.model_dump(exclude_unset=True) if approve_in.modifications else None
    publication = await publications_service.approve(session, publication, modifications)
    await session.commit()
    await session.refresh(publication)
    return await _detail(session, publication)


@router.post("/publications/{publication_id}/reject", response_model=PublicationRead)
async def reject_publication(
    publication_id: int,
    reject_in: PublicationReject,
    session: SessionDep,
    admin: AdminDep,
) -> Publication:
    publication = await _get_publication_or_404(session, publication_id)
    publication = await publications_service.reject(
        session,
        publication,
        reject_in.rejection_reason.reason,
        reject_in.rejection_reason.details,
    )
    await session.commit()
    await session.refresh(publication)
    return publication


@router.delete("/publications/{publication_id}", response_model=DeleteResponse)
async def delete_publication(publication_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
    await _get_publication_or_404(session, publication_id)
    await publications_service.delete_publications(session, [publication_id])
    await session.commit()
    return DeleteResponse(id=publication_id)


@router.get("/users", response_model=List[ProfileRead])
async def list_users(
    session: SessionDep,
    admin: AdminDep,
    search: Optional[str] = Query(default=None, max_length=256),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> List[Profile]:
    return await profiles_service.list_profiles(session, search=search, limit=limit, offset=offset)


@router.post("/users", response_model=ProfileRead, status_code=status.HTTP_201_CREATED)
async def create_user(profile_in: ProfileCreate, session: SessionDep, admin: AdminDep) -> Profile:
    """Create a profile, e.g. for an author without an account."""
    try:
        profile = await profiles_service.create_profile(session, profile_in.model_dump())
    except profiles_service.ProfileExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await session.commit()
    await session.refresh(profile)
    return profile
