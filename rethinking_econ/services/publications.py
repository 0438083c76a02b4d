"""Publication workflow: submission, review, admin edits, tag/category links.

Tag and category links are replaced wholesale: the named rows are resolved
(created when missing), every existing join row for the publication is
deleted, and fresh join rows are inserted. Tags and categories that end up
unreferenced are kept.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError
from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.core.text import hyphenate, slugify
from rethinking_econ.db.query import ilike_any
from rethinking_econ.models.common import utcnow
from rethinking_econ.models.profile import Profile
from rethinking_econ.models.publication import (
    Category,
    Publication,
    PublicationCategory,
    PublicationStatus,
    PublicationTag,
    Tag,
)

logger = logging.getLogger(__name__)


class PublicationError(Exception):
    """Base error for publication operations."""


class PublicationNotFoundError(PublicationError):
    """Raised when a publication or a referenced row does not exist."""


class PublicationConflictError(PublicationError):
    """Raised when a slug collides with an existing publication."""


@dataclass
class PublicationBundle:
    publication: Publication
    author: Optional[Profile] = None
    categories: list[Category] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)


async def _flush(session: AsyncSession) -> None:
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        raise PublicationConflictError("A publication with this slug already exists") from exc


def _set_status(publication: Publication, status: PublicationStatus) -> None:
    """Moving into ``published`` stamps ``published_at``; nothing else touches it."""
    publication.status = status
    if status == PublicationStatus.published:
        publication.published_at = utcnow()


async def resolve_tags(session: AsyncSession, names: Sequence[str]) -> list[Tag]:
    resolved: list[Tag] = []
    for name in names:
        slug = hyphenate(name)
        tag = (await session.exec(select(Tag).where(Tag.name == name))).first()
        if tag is None:
            tag = (await session.exec(select(Tag).where(Tag.slug == slug))).first()
        if tag is None:
            tag = Tag(name=name, slug=slug)
            session.add(tag)
            await session.flush()
        if all(existing.id != tag.id for existing in resolved):
            resolved.append(tag)
    return resolved


async def resolve_categories(session: AsyncSession, names: Sequence[str]) -> list[Category]:
    resolved: list[Category] = []
    for name in names:
        slug = hyphenate(name)
        category = (await session.exec(select(Category).where(Category.name == name))).first()
        if category is None:
            category = (await session.exec(select(Category).where(Category.slug == slug))).first()
        if category is None:
            category = Category(name=name, slug=slug)
            session.add(category)
            await session.flush()
        if all(existing.id != category.id for existing in resolved):
            resolved.append(category)
    return resolved


async def replace_tags(session: AsyncSession, publication_id: int, names: Sequence[str]) -> list[Tag]:
    tags = await resolve_tags(session, names)
    await session.exec(delete(PublicationTag).where(PublicationTag.publication_id == publication_id))
    if tags:
        await session.execute(
            insert(PublicationTag).values(
                [{"publication_id": publication_id, "tag_id": tag.id} for tag in tags]
            )
        )
    return tags


async def replace_categories(
    session: AsyncSession, publication_id: int, names: Sequence[str]
) -> list[Category]:
    categories = await resolve_categories(session, names)
    await session.exec(
        delete(PublicationCategory).where(PublicationCategory.publication_id == publication_id)
    )
    if categories:
        await session.execute(
            insert(PublicationCategory).values(
                [{"publication_id": publication_id, "category_id": category.id} for category in categories]
            )
        )
    return categories


async def get_tags(session: AsyncSession, publication_id: int) -> list[Tag]:
    stmt = (
        select(Tag)
        .join(PublicationTag, PublicationTag.tag_id == Tag.id)
        .where(PublicationTag.publication_id == publication_id)
        .order_by(Tag.name.asc())
    )
    result = await session.exec(stmt)
    return list(result.all())


async def get_categories(session: AsyncSession, publication_id: int) -> list[Category]:
    stmt = (
        select(Category)
        .join(PublicationCategory, PublicationCategory.category_id == Category.id)
        .where(PublicationCategory.publication_id == publication_id)
        .order_by(Category.name.asc())
    )
    result = await session.exec(stmt)
    return list(result.all())


async def _apply_links(session: AsyncSession, publication: Publication, data: dict[str, Any]) -> None:
    tags = data.pop("tags", None)
    categories = data.pop("categories", None)
    if tags is not None:
        await replace_tags(session, publication.id, tags)
    if categories is not None:
        await replace_categories(session, publication.id, categories)


async def get_publication(session: AsyncSession, publication_id: int) -> Publication:
    publication = await session.get(Publication, publication_id)
    if publication is None:
        raise PublicationNotFoundError("Publication not found")
    return publication


async def load_bundle(session: AsyncSession, publication: Publication) -> PublicationBundle:
    author = await session.get(Profile, publication.author_id) if publication.author_id else None
    return PublicationBundle(
        publication=publication,
        author=author,
        categories=await get_categories(session, publication.id),
        tags=await get_tags(session, publication.id),
    )


async def list_for_review(
    session: AsyncSession,
    *,
    status: Optional[PublicationStatus] = None,
    search: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
) -> list[tuple[Publication, Optional[Profile]]]:
    """Admin listing, newest first, with each publication's author."""
    stmt = select(Publication, Profile).join(Profile, Profile.id == Publication.author_id, isouter=True)
    if status is not None:
        stmt = stmt.where(Publication.status == status)
    if search:
        stmt = stmt.where(ilike_any([Publication.title], search))
    stmt = stmt.order_by(Publication.created_at.desc(), Publication.id.desc()).offset(offset).limit(limit)
    result = await session.exec(stmt)
    return [(publication, author) for publication, author in result.all()]


async def create_as_author(session: AsyncSession, data: dict[str, Any]) -> Publication:
    """Create a publication attributed to an existing profile."""
    author_id = data["author_id"]
    if await session.get(Profile, author_id) is None:
        raise PublicationNotFoundError("Target user not found")

    links = {key: data.pop(key) for key in ("tags", "categories") if key in data}
    status = PublicationStatus(data.pop("status", PublicationStatus.published))
    publication = Publication(slug=slugify(data["title"]), **data)
    _set_status(publication, status)
    session.add(publication)
    await _flush(session)
    await _apply_links(session, publication, links)
    await session.flush()
    return publication


async def update_publication(
    session: AsyncSession, publication: Publication, data: dict[str, Any]
) -> Publication:
    """Partial admin edit; links are replaced only when supplied."""
    links = {key: data.pop(key) for key in ("tags", "categories") if key in data}
    status = data.pop("status", None)

    if data.get("author_id") is not None and await session.get(Profile, data["author_id"]) is None:
        raise PublicationNotFoundError("Target user not found")

    for key, value in data.items():
        if value is None and key in ("title", "content", "type", "author_id"):
            continue
        setattr(publication, key, value)
    if data.get("title"):
        publication.slug = hyphenate(data["title"])
    if status is not None:
        _set_status(publication, PublicationStatus(status))

    publication.updated_at = utcnow()
    session.add(publication)
    await _flush(session)
    await _apply_links(session, publication, links)
    await session.flush()
    return publication


async def approve(
    session: AsyncSession,
    publication: Publication,
    modifications: Optional[dict[str, Any]] = None,
) -> Publication:
    """Apply optional edits, then publish."""
    modifications = dict(modifications or {})
    links = {key: modifications.pop(key) for key in ("tags", "categories") if key in modifications}
    for key in ("title", "abstract", "content"):
        value = modifications.get(key)
        if value is not None:
            setattr(publication, key, value)

    _set_status(publication, PublicationStatus.published)
    publication.updated_at = utcnow()
    session.add(publication)
    await session.flush()
    await _apply_links(session, publication, links)
    await session.flush()
    logger.info("Publication %s approved", publication.id)
    return publication


async def reject(
    session: AsyncSession,
    publication: Publication,
    reason: str,
    details: Optional[str] = None,
) -> Publication:
    """Mark as rejected, wrapping the current content in a rejection envelope.

    The envelope keeps the pre-rejection text under ``originalContent`` so
    reviewers can recover it.
    """
    rejection_reason: dict[str, str] = {"reason": reason}
    if details is not None:
        rejection_reason["details"] = details
    publication.content = json.dumps(
        {"originalContent": publication.content, "rejectionReason": rejection_reason}
    )
    _set_status(publication, PublicationStatus.rejected)
    publication.updated_at = utcnow()
    session.add(publication)
    await session.flush()
    logger.info("Publication %s rejected: %s", publication.id, reason)
    return publication


async def delete_publications(session: AsyncSession, publication_ids: Sequence[int]) -> int:
    """Delete publications and their join rows. Unknown ids are skipped."""
    deleted = 0
    for publication_id in publication_ids:
        await session.exec(delete(PublicationTag).where(PublicationTag.publication_id == publication_id))
        await session.exec(
            delete(PublicationCategory).where(PublicationCategory.publication_id == publication_id)
        )
        publication = await session.get(Publication, publication_id)
        if publication is not None:
            await session.delete(publication)
            deleted += 1
    await session.flush()
    logger.info("Deleted %d publication(s)", deleted)
    return deleted


async def submit(
    session: AsyncSession,
    author_id: str,
    data: dict[str, Any],
) -> Publication:
    """Public submission; the new publication waits for review."""
    category_id = data.pop("category_id", None)
    tag_id = data.pop("tag_id", None)
    if category_id is not None and await session.get(Category, category_id) is None:
        raise PublicationNotFoundError("Category not found")
    if tag_id is not None and await session.get(Tag, tag_id) is None:
        raise PublicationNotFoundError("Tag not found")

    publication = Publication(
        slug=slugify(data["title"]),
        author_id=author_id,
        status=PublicationStatus.pending_review,
        **data,
    )
    session.add(publication)
    await _flush(session)

    if category_id is not None:
        await session.execute(
            insert(PublicationCategory).values(publication_id=publication.id, category_id=category_id)
        )
    if tag_id is not None:
        await session.execute(insert(PublicationTag).values(publication_id=publication.id, tag_id=tag_id))
    await session.flush()
    return publication


async def list_published(session: AsyncSession) -> list[Publication]:
    stmt = (
        select(Publication)
        .where(Publication.status == PublicationStatus.published)
        .order_by(Publication.created_at.desc(), Publication.id.desc())
    )
    result = await session.exec(stmt)
    return list(result.all())


async def get_published_by_slug(session: AsyncSession, slug: str) -> Publication:
    stmt = select(Publication).where(
        Publication.slug == slug,
        Publication.status == PublicationStatus.published,
    )
    publication = (await session.exec(stmt)).first()
    if publication is None:
        raise PublicationNotFoundError("Publication not found")
    return publication
