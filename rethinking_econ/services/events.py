from __future__ import annotations

from typing import Any, Optional

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.core.text import slugify
from rethinking_econ.models.common import utcnow
from rethinking_econ.models.event import Event, EventMedia, EventStatus, Initiative
from rethinking_econ.services.crud import ResourceService


async def _delete_event_media(session: AsyncSession, event: Event) -> None:
    await session.exec(delete(EventMedia).where(EventMedia.event_id == event.id))


events = ResourceService(
    Event,
    order_by=(Event.start_date.desc(), Event.display_order.asc(), Event.id.asc()),
    before_delete=_delete_event_media,
)
media = ResourceService(EventMedia)
initiatives = ResourceService(Initiative)


async def create_event(session: AsyncSession, data: dict[str, Any]) -> Event:
    if not data.get("slug"):
        data["slug"] = slugify(data["title"])
    return await events.create(session, data)


async def list_upcoming(session: AsyncSession) -> list[Event]:
    stmt = (
        select(Event)
        .where(Event.status == EventStatus.upcoming, Event.start_date >= utcnow())
        .order_by(Event.start_date.asc(), Event.display_order.asc(), Event.id.asc())
    )
    return list((await session.exec(stmt)).all())


async def list_past(session: AsyncSession) -> list[Event]:
    stmt = (
        select(Event)
        .where(Event.start_date < utcnow())
        .order_by(Event.start_date.desc(), Event.display_order.asc(), Event.id.asc())
    )
    return list((await session.exec(stmt)).all())


async def get_by_slug(session: AsyncSession, slug: str) -> Optional[Event]:
    return (await session.exec(select(Event).where(Event.slug == slug))).first()


async def list_media(session: AsyncSession, event_id: int) -> list[EventMedia]:
    """Featured media first, then newest."""
    stmt = (
        select(EventMedia)
        .where(EventMedia.event_id == event_id)
        .order_by(EventMedia.is_featured.desc(), EventMedia.created_at.desc(), EventMedia.id.desc())
    )
    return list((await session.exec(stmt)).all())
