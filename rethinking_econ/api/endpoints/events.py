from typing import List

from fastapi import APIRouter, HTTPException, status

from rethinking_econ.api.crud import build_crud_router
from rethinking_econ.api.deps import AdminDep, SessionDep
from rethinking_econ.models.event import Event, EventMedia, InitiativeCategory
from rethinking_econ.schemas.common import DeleteResponse
from rethinking_econ.schemas.event import (
    EventCreate,
    EventMediaCreate,
    EventMediaRead,
    EventMediaUpdate,
    EventRead,
    EventUpdate,
    InitiativeCreate,
    InitiativeRead,
    InitiativeUpdate,
)
from rethinking_econ.services import events as events_service
from rethinking_econ.services.crud import ResourceConflictError

router = APIRouter()

initiatives_router = build_crud_router(
    events_service.initiatives,
    read_schema=InitiativeRead,
    create_schema=InitiativeCreate,
    update_schema=InitiativeUpdate,
    label="Initiative",
    filter_field="category",
    filter_type=InitiativeCategory,
)
router.include_router(initiatives_router, prefix="/initiatives")


async def _get_event_or_404(session: SessionDep, event_id: int) -> Event:
    event = await events_service.events.get(session, event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


async def _get_media_or_404(session: SessionDep, media_id: int) -> EventMedia:
    media = await events_service.media.get(session, media_id)
    if media is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Media not found")
    return media


@router.get("/", response_model=List[EventRead])
async def list_events(session: SessionDep) -> List[Event]:
    """All events, latest start date first."""
    return await events_service.events.list(session)


@router.get("/upcoming", response_model=List[EventRead])
async def list_upcoming_events(session: SessionDep) -> List[Event]:
    return await events_service.list_upcoming(session)


@router.get("/past", response_model=List[EventRead])
async def list_past_events(session: SessionDep) -> List[Event]:
    return await events_service.list_past(session)


@router.get("/by-slug/{slug}", response_model=EventRead)
async def get_event_by_slug(slug: str, session: SessionDep) -> Event:
    event = await events_service.get_by_slug(session, slug)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.patch("/media/{media_id}", response_model=EventMediaRead)
async def update_event_media(
    media_id: int,
    media_in: EventMediaUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> EventMedia:
    media = await _get_media_or_404(session, media_id)
    media = await events_service.media.update(session, media, media_in.model_dump(exclude_unset=True))
    await session.commit()
    await session.refresh(media)
    return media


@router.delete("/media/{media_id}", response_model=DeleteResponse)
async def delete_event_media(media_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
    media = await _get_media_or_404(session, media_id)
    await events_service.media.delete(session, media)
    await session.commit()
    return DeleteResponse(id=media_id)


@router.get("/{event_id}", response_model=EventRead)
async def get_event(event_id: int, session: SessionDep) -> Event:
    return await _get_event_or_404(session, event_id)


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(event_in: EventCreate, session: SessionDep, admin: AdminDep) -> Event:
    """Create an event; the slug is derived from the title when omitted."""
    try:
        event = await events_service.create_event(session, event_in.model_dump())
    except ResourceConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="An event with this slug already exists") from exc
    await session.commit()
    await session.refresh(event)
    return event


@router.patch("/{event_id}", response_model=EventRead)
async def update_event(
    event_id: int,
    event_in: EventUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> Event:
    event = await _get_event_or_404(session, event_id)
    try:
        event = await events_service.events.update(session, event, event_in.model_dump(exclude_unset=True))
    except ResourceConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="An event with this slug already exists") from exc
    await session.commit()
    await session.refresh(event)
    return event


@router.delete("/{event_id}", response_model=DeleteResponse)
async def delete_event(event_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
    """Delete an event and its media."""
    event = await _get_event_or_404(session, event_id)
    await events_service.events.delete(session, event)
    await session.commit()
    return DeleteResponse(id=event_id)


@router.get("/{event_id}/media", response_model=List[EventMediaRead])
async def list_event_media(event_id: int, session: SessionDep) -> List[EventMedia]:
    await _get_event_or_404(session, event_id)
    return await events_service.list_media(session, event_id)


@router.post(
    "/{event_id}/media",
    response_model=EventMediaRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_event_media(
    event_id: int,
    media_in: EventMediaCreate,
    session: SessionDep,
    admin: AdminDep,
) -> EventMedia:
    await _get_event_or_404(session, event_id)
    media = await events_service.media.create(session, {**media_in.model_dump(), "event_id": event_id})
    await session.commit()
    await session.refresh(media)
    return media
