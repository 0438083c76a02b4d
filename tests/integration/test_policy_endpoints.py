"""
Integration tests for policy endpoints at /api/policy including:
- Policy briefs with derived slugs and publish timestamps
- Case studies nested under a policy and cascading deletes
- Advocacy campaigns and their achievements list
"""

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.models.policy import AdvocacyCampaign, CaseStudy, PolicyCategory, PolicyStatus
from rethinking_econ.testing import create_policy, create_profile, get_admin_headers, get_auth_headers


@pytest.mark.integration
async def test_create_published_policy_stamps_published_at(client: AsyncClient):
    """Test that creating a published policy sets published_at."""
    response = await client.post(
        "/api/policy/",
        json={
            "title": "A Green New Deal",
            "content": "Full brief",
            "category": "environmental",
            "status": "published",
        },
        headers=get_admin_headers(),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["slug"] == "a-green-new-deal"
    assert data["published_at"] is not None


@pytest.mark.integration
async def test_draft_policy_has_no_published_at(client: AsyncClient):
    """Test that a draft policy has no published_at."""
    response = await client.post(
        "/api/policy/",
        json={"title": "Draft Brief", "content": "WIP", "category": "social"},
        headers=get_admin_headers(),
    )

    assert response.json()["status"] == "draft"
    assert response.json()["published_at"] is None


@pytest.mark.integration
async def test_list_policies_filters_by_category(client: AsyncClient, session: AsyncSession):
    """Test filtering policies by category."""
    await create_policy(session, title="Carbon tax")
    await create_policy(session, title="Care work", category=PolicyCategory.social)

    response = await client.get("/api/policy/", params={"category": "social"})

    assert response.status_code == 200
    assert [policy["title"] for policy in response.json()] == ["Care work"]


@pytest.mark.integration
async def test_policy_by_slug(client: AsyncClient, session: AsyncSession):
    """Test getting a policy by slug."""
    policy = await create_policy(session, slug="universal-basic-services")

    found = await client.get("/api/policy/by-slug/universal-basic-services")
    missing = await client.get("/api/policy/by-slug/nope")

    assert found.json()["id"] == policy.id
    assert missing.status_code == 404


@pytest.mark.integration
async def test_publishing_on_update_sets_published_at(client: AsyncClient, session: AsyncSession):
    """Test that publishing a draft on update sets published_at."""
    policy = await create_policy(session, status=PolicyStatus.draft, published_at=None)

    response = await client.patch(
        f"/api/policy/{policy.id}", json={"status": "published"}, headers=get_admin_headers()
    )

    assert response.status_code == 200
    assert response.json()["published_at"] is not None


@pytest.mark.integration
async def test_policy_mutations_require_admin(client: AsyncClient, session: AsyncSession):
    """Test that policy writes require an admin."""
    policy = await create_policy(session)
    headers = get_auth_headers("member-1")

    assert (await client.patch(f"/api/policy/{policy.id}", json={"title": "x"}, headers=headers)).status_code == 403
    assert (await client.delete(f"/api/policy/{policy.id}")).status_code == 401


@pytest.mark.integration
async def test_case_studies_belong_to_policy(client: AsyncClient, session: AsyncSession):
    """Test case study CRUD under a policy and cascade on delete."""
    policy = await create_policy(session)
    policy_id = policy.id
    headers = get_admin_headers()

    created = await client.post(
        f"/api/policy/{policy_id}/case-studies",
        json={"title": "Preston Model", "content": "Community wealth building", "status": "published"},
        headers=headers,
    )
    assert created.status_code == 201
    assert created.json()["slug"] == "preston-model"
    assert created.json()["policy_id"] == policy_id

    listing = await client.get(f"/api/policy/{policy_id}/case-studies")
    assert [item["title"] for item in listing.json()] == ["Preston Model"]

    deleted = await client.delete(f"/api/policy/{policy_id}", headers=headers)
    assert deleted.status_code == 200
    assert (await session.exec(select(CaseStudy).where(CaseStudy.policy_id == policy_id))).all() == []


@pytest.mark.integration
async def test_case_study_for_missing_policy_returns_404(client: AsyncClient):
    """Test adding a case study to a non-existent policy."""
    response = await client.post(
        "/api/policy/999/case-studies", json={"title": "Lost", "content": "x"}, headers=get_admin_headers()
    )

    assert response.status_code == 404


@pytest.mark.integration
async def test_unknown_author_returns_404(client: AsyncClient, session: AsyncSession):
    """Test that briefs and case studies naming a non-existent author are not found."""
    policy = await create_policy(session)
    policy_id = policy.id
    headers = get_admin_headers()
    brief = {"title": "Unique Title", "content": "Body", "category": "economic", "author_id": "ghost"}

    created = await client.post("/api/policy/", json=brief, headers=headers)
    updated = await client.patch(f"/api/policy/{policy_id}", json={"author_id": "ghost"}, headers=headers)
    case_study = await client.post(
        f"/api/policy/{policy_id}/case-studies",
        json={"title": "Ghost Study", "content": "Body", "author_id": "ghost"},
        headers=headers,
    )

    assert created.status_code == 404
    assert updated.status_code == 404
    assert case_study.status_code == 404
    assert (await session.exec(select(CaseStudy))).all() == []


@pytest.mark.integration
async def test_known_author_is_accepted(client: AsyncClient, session: AsyncSession):
    """Test creating a brief credited to an existing profile."""
    author = await create_profile(session)

    response = await client.post(
        "/api/policy/",
        json={"title": "Credited Brief", "content": "Body", "category": "social", "author_id": author.id},
        headers=get_admin_headers(),
    )

    assert response.status_code == 201
    assert response.json()["author_id"] == author.id


@pytest.mark.integration
async def test_campaign_achievements_round_trip(client: AsyncClient, session: AsyncSession):
    """Test that campaign achievements are stored and returned as a list."""
    headers = get_admin_headers()
    created = await client.post(
        "/api/policy/campaigns",
        json={"title": "Reform the curriculum", "status": "active", "achievements": ["Petition", "Open letter"]},
        headers=headers,
    )
    assert created.status_code == 201
    campaign_id = created.json()["id"]
    assert created.json()["achievements"] == ["Petition", "Open letter"]

    stored = await session.get(AdvocacyCampaign, campaign_id)
    assert stored.achievements == '["Petition", "Open letter"]'

    updated = await client.patch(
        f"/api/policy/campaigns/{campaign_id}", json={"achievements": ["New module"]}, headers=headers
    )
    assert updated.json()["achievements"] == ["New module"]
    assert updated.json()["title"] == "Reform the curriculum"

    renamed = await client.patch(
        f"/api/policy/campaigns/{campaign_id}", json={"title": "Curriculum reform"}, headers=headers
    )
    assert renamed.json()["achievements"] == ["New module"]


@pytest.mark.integration
async def test_campaigns_filter_by_status(client: AsyncClient):
    """Test filtering campaigns by status."""
    headers = get_admin_headers()
    await client.post("/api/policy/campaigns", json={"title": "Now", "status": "active"}, headers=headers)
    await client.post("/api/policy/campaigns", json={"title": "Later", "status": "planned"}, headers=headers)

    response = await client.get("/api/policy/campaigns", params={"status": "planned"})

    assert [campaign["title"] for campaign in response.json()] == ["Later"]
    assert response.json()[0]["achievements"] == []
