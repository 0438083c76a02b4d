"""
Unit tests for the publication workflow service.

Tests the business logic in rethinking_econ.services.publications including:
- Tag and category resolution and wholesale link replacement
- Approval and rejection state changes
- Admin creation on behalf of another author
- Public submission and bulk deletion
"""

import json
from datetime import datetime, timezone

import pytest
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.models.publication import (
    Category,
    Publication,
    PublicationCategory,
    PublicationStatus,
    PublicationTag,
    PublicationType,
    Tag,
)
from rethinking_econ.services import publications as publications_service
from rethinking_econ.testing import create_category, create_profile, create_publication, create_tag


async def _linked_tag_names(session: AsyncSession, publication_id: int) -> set[str]:
    return {tag.name for tag in await publications_service.get_tags(session, publication_id)}


@pytest.mark.unit
@pytest.mark.service
async def test_resolve_tags_reuses_existing_and_deduplicates(session: AsyncSession):
    """Test that tag resolution reuses and deduplicates tags."""
    existing = await create_tag(session, "Ecology")

    tags = await publications_service.resolve_tags(session, ["Ecology", "Feminist Economics", "Ecology"])

    assert [tag.name for tag in tags] == ["Ecology", "Feminist Economics"]
    assert tags[0].id == existing.id
    assert tags[1].slug == "feminist-economics"


@pytest.mark.unit
@pytest.mark.service
async def test_resolve_tags_falls_back_to_slug(session: AsyncSession):
    """Test that tag resolution matches on slug."""
    existing = await create_tag(session, "Post Keynesian")

    tags = await publications_service.resolve_tags(session, ["post keynesian"])

    assert [tag.id for tag in tags] == [existing.id]


@pytest.mark.unit
@pytest.mark.service
async def test_replace_tags_swaps_join_rows_and_keeps_orphans(session: AsyncSession):
    """Replacing {a, b} with {b, c} leaves join rows for b and c only."""
    publication = await create_publication(session)

    await publications_service.replace_tags(session, publication.id, ["a", "b"])
    await session.commit()
    assert await _linked_tag_names(session, publication.id) == {"a", "b"}

    await publications_service.replace_tags(session, publication.id, ["b", "c"])
    await session.commit()

    assert await _linked_tag_names(session, publication.id) == {"b", "c"}
    join_rows = (
        await session.exec(select(PublicationTag).where(PublicationTag.publication_id == publication.id))
    ).all()
    assert len(join_rows) == 2
    orphan = (await session.exec(select(Tag).where(Tag.name == "a"))).first()
    assert orphan is not None


@pytest.mark.unit
@pytest.mark.service
async def test_replace_categories_creates_missing_categories(session: AsyncSession):
    """Test that unknown categories are created."""
    publication = await create_publication(session)
    await create_category(session, "Macroeconomics")

    categories = await publications_service.replace_categories(
        session, publication.id, ["Macroeconomics", "Economic History"]
    )
    await session.commit()

    assert {category.slug for category in categories} == {"macroeconomics", "economic-history"}
    stored = (await session.exec(select(Category))).all()
    assert len(stored) == 2
    links = (
        await session.exec(
            select(PublicationCategory).where(PublicationCategory.publication_id == publication.id)
        )
    ).all()
    assert len(links) == 2


@pytest.mark.unit
@pytest.mark.service
async def test_approve_publishes_and_stamps_published_at(session: AsyncSession):
    """Test that approval publishes and sets published_at."""
    publication = await create_publication(session, status=PublicationStatus.pending_review)
    before = datetime.now(timezone.utc)

    approved = await publications_service.approve(session, publication)

    assert approved.status == PublicationStatus.published
    assert approved.published_at is not None
    assert approved.published_at >= before


@pytest.mark.unit
@pytest.mark.service
async def test_approve_applies_modifications(session: AsyncSession):
    """Test that approval applies reviewer edits."""
    publication = await create_publication(session, status=PublicationStatus.pending_review)

    await publications_service.approve(
        session,
        publication,
        {"title": "Edited title", "abstract": None, "tags": ["Inequality"]},
    )
    await session.commit()

    assert publication.title == "Edited title"
    assert publication.abstract == "A short abstract"
    assert await _linked_tag_names(session, publication.id) == {"Inequality"}


@pytest.mark.unit
@pytest.mark.service
async def test_reject_wraps_content_in_envelope(session: AsyncSession):
    """Test the rejection envelope."""
    publication = await create_publication(
        session, status=PublicationStatus.pending_review, content="Original text"
    )

    await publications_service.reject(session, publication, "Out of scope", "Please resubmit as a blog post")

    assert publication.status == PublicationStatus.rejected
    envelope = json.loads(publication.content)
    assert envelope["originalContent"] == "Original text"
    assert envelope["rejectionReason"] == {
        "reason": "Out of scope",
        "details": "Please resubmit as a blog post",
    }


@pytest.mark.unit
@pytest.mark.service
async def test_reject_without_details_omits_key(session: AsyncSession):
    """Test that rejection without details leaves the key out."""
    publication = await create_publication(session, status=PublicationStatus.pending_review)

    await publications_service.reject(session, publication, "Duplicate")

    assert json.loads(publication.content)["rejectionReason"] == {"reason": "Duplicate"}


@pytest.mark.unit
@pytest.mark.service
async def test_create_as_author_requires_existing_author(session: AsyncSession):
    """Test creating for a non-existent author."""
    with pytest.raises(publications_service.PublicationNotFoundError):
        await publications_service.create_as_author(
            session,
            {
                "author_id": "nobody",
                "title": "Orphan",
                "content": "Body",
                "type": PublicationType.opinion,
            },
        )


@pytest.mark.unit
@pytest.mark.service
async def test_create_as_author_defaults_to_published(session: AsyncSession):
    """Test that admin-created publications default to published."""
    author = await create_profile(session)

    publication = await publications_service.create_as_author(
        session,
        {
            "author_id": author.id,
            "title": "Money and Credit!",
            "content": "Body",
            "type": PublicationType.research_paper,
            "tags": ["Money"],
        },
    )

    assert publication.slug == "money-and-credit"
    assert publication.status == PublicationStatus.published
    assert publication.published_at is not None
    assert await _linked_tag_names(session, publication.id) == {"Money"}


@pytest.mark.unit
@pytest.mark.service
async def test_update_publication_rederives_slug_from_title(session: AsyncSession):
    """Test that a new title gives a new slug."""
    publication = await create_publication(session, status=PublicationStatus.draft)

    await publications_service.update_publication(session, publication, {"title": "New Title"})

    assert publication.slug == "new-title"
    assert publication.published_at is None


@pytest.mark.unit
@pytest.mark.service
async def test_submit_creates_pending_publication_with_links(session: AsyncSession):
    """Test that a submission is pending and linked."""
    author = await create_profile(session)
    category = await create_category(session, "Development")
    tag = await create_tag(session, "Africa")

    publication = await publications_service.submit(
        session,
        author.id,
        {
            "title": "Industrial Policy",
            "content": "Body",
            "type": PublicationType.policy_brief,
            "category_id": category.id,
            "tag_id": tag.id,
        },
    )
    await session.commit()

    assert publication.status == PublicationStatus.pending_review
    assert publication.author_id == author.id
    assert await _linked_tag_names(session, publication.id) == {"Africa"}
    assert [c.id for c in await publications_service.get_categories(session, publication.id)] == [category.id]


@pytest.mark.unit
@pytest.mark.service
async def test_submit_with_unknown_category_inserts_nothing(session: AsyncSession):
    """Test that a bad category leaves no publication behind."""
    author = await create_profile(session)

    with pytest.raises(publications_service.PublicationNotFoundError):
        await publications_service.submit(
            session,
            author.id,
            {"title": "Lost", "content": "Body", "type": PublicationType.opinion, "category_id": 999},
        )

    assert (await session.exec(select(Publication))).all() == []


@pytest.mark.unit
@pytest.mark.service
async def test_delete_publications_removes_join_rows(session: AsyncSession):
    """Test that deleting publications removes their join rows."""
    first = await create_publication(session)
    second = await create_publication(session)
    await publications_service.replace_tags(session, first.id, ["Labour"])
    await session.commit()
    first_id, second_id = first.id, second.id

    deleted = await publications_service.delete_publications(session, [first_id, second_id, 4040])
    await session.commit()

    assert deleted == 2
    assert (await session.exec(select(Publication))).all() == []
    assert (await session.exec(select(PublicationTag))).all() == []
    assert (await session.exec(select(Tag).where(Tag.name == "Labour"))).first() is not None
