"""
Integration tests for admin endpoints at /api/admin including:
- The admin check
- Publication review: listing, approval, rejection, edits and deletion
- Profile management for guest authors
"""

import json
from datetime import datetime, timezone

import pytest
from httpx import AsyncClient
from pydantic import TypeAdapter
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.models.publication import Publication, PublicationStatus, PublicationTag, Tag
from rethinking_econ.testing import (
    create_profile,
    create_publication,
    create_tag,
    get_admin_headers,
    get_auth_headers,
    tag_publication,
)

_datetime = TypeAdapter(datetime)


@pytest.mark.integration
async def test_admin_check(client: AsyncClient, session: AsyncSession):
    """Test the admin check for anonymous, regular and admin callers."""
    staff = await create_profile(session, is_team_member=True)

    anonymous = await client.get("/api/admin/check")
    member = await client.get("/api/admin/check", headers=get_auth_headers("member-1"))
    configured = await client.get("/api/admin/check", headers=get_admin_headers())
    team = await client.get("/api/admin/check", headers=get_auth_headers(staff.id))

    assert anonymous.status_code == 401
    assert anonymous.json() == {"is_admin": False}
    assert member.json() == {"is_admin": False}
    assert configured.json() == {"is_admin": True}
    assert team.json() == {"is_admin": True}


@pytest.mark.integration
async def test_list_publications_filters_and_includes_author(client: AsyncClient, session: AsyncSession):
    """Test the admin publication list filters and author details."""
    author = await create_profile(session, name="Writer")
    await create_publication(session, author=author, title="Pending one", status=PublicationStatus.pending_review)
    await create_publication(session, author=author, title="Live one")

    pending = await client.get(
        "/api/admin/publications", params={"status": "pending_review"}, headers=get_admin_headers()
    )
    everything = await client.get("/api/admin/publications", headers=get_admin_headers())
    searched = await client.get("/api/admin/publications", params={"search": "live"}, headers=get_admin_headers())

    assert [item["title"] for item in pending.json()] == ["Pending one"]
    assert pending.json()[0]["author"]["name"] == "Writer"
    assert [item["title"] for item in everything.json()] == ["Live one", "Pending one"]
    assert [item["title"] for item in searched.json()] == ["Live one"]


@pytest.mark.integration
async def test_list_publications_rejects_unknown_status(client: AsyncClient):
    """Test that an unknown status filter is rejected."""
    response = await client.get("/api/admin/publications", params={"status": "archived"}, headers=get_admin_headers())

    assert response.status_code == 422


@pytest.mark.integration
async def test_approve_publishes_with_timestamp(client: AsyncClient, session: AsyncSession):
    """Test approving a pending publication."""
    publication = await create_publication(session, status=PublicationStatus.pending_review)
    requested_at = datetime.now(timezone.utc).replace(tzinfo=None)

    response = await client.post(f"/api/admin/publications/{publication.id}/approve", json={}, headers=get_admin_headers())

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "published"
    assert _datetime.validate_python(data["published_at"]).replace(tzinfo=None) >= requested_at


@pytest.mark.integration
async def test_approve_with_modifications_replaces_tags(client: AsyncClient, session: AsyncSession):
    """Test approving with reviewer edits."""
    publication = await create_publication(session, status=PublicationStatus.pending_review)
    await tag_publication(session, publication, await create_tag(session, "Old"))

    response = await client.post(
        f"/api/admin/publications/{publication.id}/approve",
        json={"modifications": {"title": "Better title", "tags": ["Finance", "Ecology"]}},
        headers=get_admin_headers(),
    )

    data = response.json()
    assert data["title"] == "Better title"
    assert data["status"] == "published"
    assert {tag["name"] for tag in data["tags"]} == {"Finance", "Ecology"}


@pytest.mark.integration
async def test_reject_stores_envelope(client: AsyncClient, session: AsyncSession):
    """Test that rejecting wraps the content with the reason."""
    publication = await create_publication(
        session, status=PublicationStatus.pending_review, content="Draft body"
    )

    response = await client.post(
        f"/api/admin/publications/{publication.id}/reject",
        json={"rejection_reason": {"reason": "Needs sources", "details": "Cite the data"}},
        headers=get_admin_headers(),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "rejected"
    envelope = json.loads(data["content"])
    assert envelope["originalContent"] == "Draft body"
    assert envelope["rejectionReason"]["reason"] == "Needs sources"
    assert envelope["rejectionReason"]["details"] == "Cite the data"


@pytest.mark.integration
async def test_review_actions_on_missing_publication(client: AsyncClient):
    """Test review actions on a non-existent publication."""
    headers = get_admin_headers()

    approve = await client.post("/api/admin/publications/999/approve", json={}, headers=headers)
    reject = await client.post(
        "/api/admin/publications/999/reject", json={"rejection_reason": {"reason": "x"}}, headers=headers
    )
    detail = await client.get("/api/admin/publications/999", headers=headers)

    assert approve.status_code == 404
    assert reject.status_code == 404
    assert detail.status_code == 404


@pytest.mark.integration
async def test_create_publication_for_another_author(client: AsyncClient, session: AsyncSession):
    """Test creating a publication on behalf of another author."""
    author = await create_profile(session, name="Guest")

    response = await client.post(
        "/api/admin/publications",
        json={
            "author_id": author.id,
            "title": "Rethinking Growth",
            "content": "Body",
            "type": "research_paper",
            "tags": ["Growth", " Growth ", "Degrowth"],
            "categories": ["Macro"],
        },
        headers=get_admin_headers(),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["author_id"] == author.id
    assert data["author"]["name"] == "Guest"
    assert data["status"] == "published"
    assert data["published_at"] is not None
    assert data["slug"] == "rethinking-growth"
    assert sorted(tag["name"] for tag in data["tags"]) == ["Degrowth", "Growth"]
    assert [category["slug"] for category in data["categories"]] == ["macro"]


@pytest.mark.integration
async def test_create_publication_for_unknown_author(client: AsyncClient):
    """Test creating a publication for a non-existent author."""
    response = await client.post(
        "/api/admin/publications",
        json={"author_id": "ghost", "title": "Nope", "content": "Body", "type": "opinion"},
        headers=get_admin_headers(),
    )

    assert response.status_code == 404


@pytest.mark.integration
async def test_update_publication_tags_replaces_links(client: AsyncClient, session: AsyncSession):
    """Test that updating tags replaces the previous links."""
    publication = await create_publication(session)
    publication_id = publication.id
    headers = get_admin_headers()

    first = await client.patch(
        f"/api/admin/publications/{publication_id}", json={"tags": ["a", "b"]}, headers=headers
    )
    second = await client.patch(
        f"/api/admin/publications/{publication_id}", json={"tags": ["b", "c"]}, headers=headers
    )

    assert {tag["name"] for tag in first.json()["tags"]} == {"a", "b"}
    assert {tag["name"] for tag in second.json()["tags"]} == {"b", "c"}
    links = (
        await session.exec(select(PublicationTag).where(PublicationTag.publication_id == publication_id))
    ).all()
    assert len(links) == 2
    assert (await session.exec(select(Tag).where(Tag.name == "a"))).first() is not None


@pytest.mark.integration
async def test_update_publication_title_and_status(client: AsyncClient, session: AsyncSession):
    """Test updating a publication's title and status."""
    publication = await create_publication(session, status=PublicationStatus.draft)

    response = await client.patch(
        f"/api/admin/publications/{publication.id}",
        json={"title": "Renamed Paper", "status": "published"},
        headers=get_admin_headers(),
    )

    data = response.json()
    assert data["slug"] == "renamed-paper"
    assert data["status"] == "published"
    assert data["published_at"] is not None
    assert data["content"] == "Publication body"


@pytest.mark.integration
async def test_delete_and_bulk_delete(client: AsyncClient, session: AsyncSession):
    """Test single and bulk publication deletion."""
    first = await create_publication(session)
    second = await create_publication(session)
    third = await create_publication(session)
    await tag_publication(session, first, await create_tag(session, "Keep"))
    first_id, second_id, third_id = first.id, second.id, third.id
    headers = get_admin_headers()

    single = await client.delete(f"/api/admin/publications/{third_id}", headers=headers)
    bulk = await client.post(
        "/api/admin/publications/bulk-delete", json={"ids": [first_id, second_id]}, headers=headers
    )

    assert single.json() == {"success": True, "id": third_id}
    assert bulk.json() == {"success": True, "deleted": 2}
    assert (await session.exec(select(Publication))).all() == []
    assert (await session.exec(select(Tag).where(Tag.name == "Keep"))).first() is not None


@pytest.mark.integration
async def test_bulk_delete_requires_ids(client: AsyncClient):
    """Test that bulk delete needs at least one id."""
    response = await client.post("/api/admin/publications/bulk-delete", json={"ids": []}, headers=get_admin_headers())

    assert response.status_code == 422


@pytest.mark.integration
async def test_admin_publication_routes_are_gated(client: AsyncClient):
    """Test that admin publication routes require an admin."""
    member = get_auth_headers("member-1")

    assert (await client.get("/api/admin/publications")).status_code == 401
    assert (await client.get("/api/admin/publications", headers=member)).status_code == 403
    assert (await client.post("/api/admin/publications/1/approve", json={}, headers=member)).status_code == 403


@pytest.mark.integration
async def test_users_listing_and_search(client: AsyncClient, session: AsyncSession):
    """Test listing, searching and paging profiles."""
    await create_profile(session, name="Alice Economist")
    await create_profile(session, name="Bob Historian")

    everyone = await client.get("/api/admin/users", headers=get_admin_headers())
    alice = await client.get("/api/admin/users", params={"search": "alice"}, headers=get_admin_headers())
    page = await client.get("/api/admin/users", params={"limit": 1, "offset": 1}, headers=get_admin_headers())

    assert [user["name"] for user in everyone.json()] == ["Bob Historian", "Alice Economist"]
    assert [user["name"] for user in alice.json()] == ["Alice Economist"]
    assert [user["name"] for user in page.json()] == ["Alice Economist"]


@pytest.mark.integration
async def test_users_are_admin_only(client: AsyncClient):
    """Test that the user routes require an admin."""
    assert (await client.get("/api/admin/users")).status_code == 401
    assert (await client.get("/api/admin/users", headers=get_auth_headers("member-1"))).status_code == 403


@pytest.mark.integration
async def test_create_user_generates_id(client: AsyncClient):
    """Test that a profile created without an id gets one."""
    response = await client.post(
        "/api/admin/users", json={"name": "Guest Author", "position": "Visiting scholar"}, headers=get_admin_headers()
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"].startswith("auto_")
    assert data["name"] == "Guest Author"
    assert data["position"] == "Visiting scholar"


@pytest.mark.integration
async def test_create_user_with_taken_id_conflicts(client: AsyncClient, session: AsyncSession):
    """Test creating a profile with an id that is taken."""
    await create_profile(session, id="taken-id")

    response = await client.post(
        "/api/admin/users", json={"id": "taken-id", "name": "Duplicate"}, headers=get_admin_headers()
    )

    assert response.status_code == 409


@pytest.mark.integration
async def test_overlong_tag_name_is_rejected(client: AsyncClient, session: AsyncSession):
    """Test that tag and category names longer than the column are rejected."""
    publication = await create_publication(session)
    headers = get_admin_headers()

    tag = await client.patch(
        f"/api/admin/publications/{publication.id}", json={"tags": ["x" * 101]}, headers=headers
    )
    category = await client.patch(
        f"/api/admin/publications/{publication.id}", json={"categories": ["y" * 101]}, headers=headers
    )
    boundary = await client.patch(
        f"/api/admin/publications/{publication.id}", json={"tags": ["z" * 100]}, headers=headers
    )

    assert tag.status_code == 422
    assert category.status_code == 422
    assert boundary.status_code == 200
    assert [item["name"] for item in boundary.json()["tags"]] == ["z" * 100]
