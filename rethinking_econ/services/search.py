"""Site-wide substring search over publications, events, policies and members.

Each entity type is scanned independently. For ``type=all`` every type
contributes at most ``limit // 4`` rows from the start of its own ordering
and the total is the sum of the per-type counts; a single type is paged with
``offset = (page - 1) * limit`` against its exact count.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.db.query import count_rows, ilike_any, total_pages
from rethinking_econ.models.event import Event, EventStatus
from rethinking_econ.models.policy import Policy, PolicyStatus
from rethinking_econ.models.profile import Profile
from rethinking_econ.models.publication import Publication, PublicationStatus
from rethinking_econ.schemas.search import SearchResponse, SearchResult, SearchType

logger = logging.getLogger(__name__)

PER_TYPE_DIVISOR = 4


@dataclass(frozen=True)
class SearchTarget:
    type: SearchType
    model: Any
    visible: Callable[[], Any]
    columns: Callable[[], Sequence[Any]]
    order_by: Callable[[], Sequence[Any]]
    to_result: Callable[[Any], SearchResult]


def _publication_result(row: Publication) -> SearchResult:
    return SearchResult(
        id=str(row.id),
        title=row.title,
        description=row.abstract or "",
        url=f"/publications/{row.slug}",
        type=SearchType.publication,
        created_at=row.created_at,
        updated_at=row.updated_at,
        image_url=row.thumbnail_url,
    )


def _event_result(row: Event) -> SearchResult:
    return SearchResult(
        id=str(row.id),
        title=row.title,
        description=row.description or "",
        url=f"/events/{row.slug}",
        type=SearchType.event,
        created_at=row.created_at,
        updated_at=row.updated_at,
        image_url=row.thumbnail_url,
    )


def _policy_result(row: Policy) -> SearchResult:
    return SearchResult(
        id=str(row.id),
        title=row.title,
        description=row.summary or "",
        url=f"/policy/{row.slug}",
        type=SearchType.policy,
        created_at=row.created_at,
        updated_at=row.updated_at,
        image_url=row.thumbnail_url,
    )


def _member_result(row: Profile) -> SearchResult:
    return SearchResult(
        id=row.id,
        title=row.name or "",
        description=row.position or row.team_role or "",
        url=f"/team/{row.id}",
        type=SearchType.member,
        image_url=row.avatar_url,
    )


SEARCH_TARGETS: tuple[SearchTarget, ...] = (
    SearchTarget(
        type=SearchType.publication,
        model=Publication,
        visible=lambda: Publication.status == PublicationStatus.published,
        columns=lambda: (Publication.title, Publication.abstract, Publication.content),
        order_by=lambda: (Publication.published_at.desc(), Publication.id.desc()),
        to_result=_publication_result,
    ),
    SearchTarget(
        type=SearchType.event,
        model=Event,
        visible=lambda: Event.status.in_((EventStatus.upcoming, EventStatus.ongoing)),
        columns=lambda: (Event.title, Event.description, Event.location),
        order_by=lambda: (Event.start_date.desc(), Event.id.desc()),
        to_result=_event_result,
    ),
    SearchTarget(
        type=SearchType.policy,
        model=Policy,
        visible=lambda: Policy.status == PolicyStatus.published,
        columns=lambda: (Policy.title, Policy.summary, Policy.content),
        order_by=lambda: (Policy.published_at.desc(), Policy.id.desc()),
        to_result=_policy_result,
    ),
    SearchTarget(
        type=SearchType.member,
        model=Profile,
        visible=lambda: Profile.show_on_website.is_(True),
        columns=lambda: (Profile.name, Profile.bio, Profile.position, Profile.team_role),
        order_by=lambda: (Profile.name.asc(), Profile.id.asc()),
        to_result=_member_result,
    ),
)


async def _search_target(
    session: AsyncSession,
    target: SearchTarget,
    term: str,
    *,
    limit: int,
    offset: int,
) -> tuple[list[SearchResult], int]:
    stmt = select(target.model).where(target.visible(), ilike_any(target.columns(), term))
    total = await count_rows(session, stmt)
    if limit <= 0:
        return [], total
    page_stmt = stmt.order_by(*target.order_by()).offset(offset).limit(limit)
    rows = (await session.exec(page_stmt)).all()
    return [target.to_result(row) for row in rows], total


async def search(
    session: AsyncSession,
    query: str,
    *,
    search_type: SearchType = SearchType.all,
    page: int = 1,
    limit: int = 10,
) -> SearchResponse:
    """Run a search; any failure degrades to an empty response."""
    term = query.strip().lower()
    if search_type == SearchType.all:
        per_type_limit = limit // PER_TYPE_DIVISOR
        offset = 0
    else:
        per_type_limit = limit
        offset = (page - 1) * limit

    results: list[SearchResult] = []
    total = 0
    try:
        for target in SEARCH_TARGETS:
            if search_type not in (SearchType.all, target.type):
                continue
            target_results, target_total = await _search_target(
                session, target, term, limit=per_type_limit, offset=offset
            )
            results.extend(target_results)
            total += target_total
    except Exception:
        logger.exception("Search failed for query %r", query)
        await session.rollback()
        return SearchResponse(results=[], total_results=0, page=page, total_pages=0, query=query)

    return SearchResponse(
        results=results,
        total_results=total,
        page=page,
        total_pages=total_pages(total, limit),
        query=query,
    )
