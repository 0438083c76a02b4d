"""
Integration tests for membership endpoints at /api/memberships including:
- Membership types, FAQs and collaboration cards through generic CRUD
- Applying, approving and cancelling memberships
- The in-use guard when deleting a membership type
"""

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.models.membership import Membership, MembershipStatus, MembershipType
from rethinking_econ.models.profile import Profile
from rethinking_econ.testing import (
    create_membership,
    create_membership_type,
    create_profile,
    get_admin_headers,
    get_auth_headers,
)


@pytest.mark.integration
async def test_membership_types_are_public_and_ordered_by_id(client: AsyncClient, session: AsyncSession):
    """Test listing membership types without auth."""
    first = await create_membership_type(session, name="Student")
    second = await create_membership_type(session, name="Alumni")

    response = await client.get("/api/memberships/types/")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [first.id, second.id]


@pytest.mark.integration
async def test_create_membership_type_validates_name(client: AsyncClient):
    """Test that a membership type needs a name."""
    response = await client.post("/api/memberships/types/", json={"name": "X"}, headers=get_admin_headers())

    assert response.status_code == 422


@pytest.mark.integration
async def test_deleting_type_in_use_fails_and_keeps_rows(client: AsyncClient, session: AsyncSession):
    """Test that a membership type in use cannot be deleted."""
    user = await create_profile(session)
    membership_type = await create_membership_type(session)
    membership = await create_membership(session, user, membership_type)
    type_id, membership_id = membership_type.id, membership.id

    response = await client.delete(f"/api/memberships/types/{type_id}", headers=get_admin_headers())

    assert response.status_code == 400
    assert await session.get(MembershipType, type_id) is not None
    assert await session.get(Membership, membership_id) is not None


@pytest.mark.integration
async def test_apply_creates_profile_and_pending_membership(client: AsyncClient, session: AsyncSession):
    """Test that applying creates the caller's profile and a pending membership."""
    membership_type = await create_membership_type(session, requires_approval=True)
    headers = get_auth_headers("applicant-1", name="Ada Applicant", picture="https://img/ada.png")

    response = await client.post(
        "/api/memberships/apply", json={"membership_type_id": membership_type.id}, headers=headers
    )

    assert response.status_code == 201
    assert response.json()["status"] == "pending"
    assert response.json()["user_id"] == "applicant-1"
    profile = await session.get(Profile, "applicant-1")
    assert profile is not None
    assert profile.name == "Ada Applicant"
    assert profile.avatar_url == "https://img/ada.png"


@pytest.mark.integration
async def test_apply_to_open_type_is_approved(client: AsyncClient, session: AsyncSession):
    """Test that applying to a type without approval is approved at once."""
    membership_type = await create_membership_type(session, requires_approval=False)

    response = await client.post(
        "/api/memberships/apply",
        json={"membership_type_id": membership_type.id},
        headers=get_auth_headers("applicant-2"),
    )

    assert response.json()["status"] == "approved"
    assert response.json()["start_date"] is not None


@pytest.mark.integration
async def test_apply_errors(client: AsyncClient, session: AsyncSession):
    """Test applying for an unknown type or a type already held."""
    user = await create_profile(session)
    membership_type = await create_membership_type(session)
    await create_membership(session, user, membership_type, status=MembershipStatus.approved)
    headers = get_auth_headers(user.id)

    unknown = await client.post("/api/memberships/apply", json={"membership_type_id": 999}, headers=headers)
    duplicate = await client.post(
        "/api/memberships/apply", json={"membership_type_id": membership_type.id}, headers=headers
    )
    anonymous = await client.post("/api/memberships/apply", json={"membership_type_id": membership_type.id})

    assert unknown.status_code == 404
    assert duplicate.status_code == 400
    assert anonymous.status_code == 401


@pytest.mark.integration
async def test_admin_lists_memberships_with_details(client: AsyncClient, session: AsyncSession):
    """Test that admins see memberships with type and applicant."""
    user = await create_profile(session, name="Member One")
    membership_type = await create_membership_type(session, name="Supporter")
    await create_membership(session, user, membership_type)

    forbidden = await client.get("/api/memberships/", headers=get_auth_headers(user.id))
    response = await client.get("/api/memberships/", headers=get_admin_headers())

    assert forbidden.status_code == 403
    data = response.json()
    assert len(data) == 1
    assert data[0]["membership_type"]["name"] == "Supporter"
    assert data[0]["user"]["name"] == "Member One"


@pytest.mark.integration
async def test_mine_lists_only_callers_memberships(client: AsyncClient, session: AsyncSession):
    """Test listing the caller's own memberships."""
    me = await create_profile(session)
    someone = await create_profile(session)
    membership_type = await create_membership_type(session)
    mine = await create_membership(session, me, membership_type)
    await create_membership(session, someone, membership_type)

    response = await client.get("/api/memberships/mine", headers=get_auth_headers(me.id))

    assert [item["id"] for item in response.json()] == [mine.id]
    assert response.json()[0]["membership_type"]["id"] == membership_type.id


@pytest.mark.integration
async def test_approving_sets_term(client: AsyncClient, session: AsyncSession):
    """Test that approving a membership sets a one-year term."""
    user = await create_profile(session)
    membership = await create_membership(session, user, await create_membership_type(session))

    response = await client.patch(
        f"/api/memberships/{membership.id}/status", json={"status": "approved"}, headers=get_admin_headers()
    )

    assert response.status_code == 200
    assert response.json()["status"] == "approved"
    assert response.json()["start_date"] is not None
    assert response.json()["end_date"] is not None


@pytest.mark.integration
async def test_cancel_rules(client: AsyncClient, session: AsyncSession):
    """Test who may cancel a membership."""
    owner = await create_profile(session)
    stranger = await create_profile(session)
    membership = await create_membership(session, owner, await create_membership_type(session))

    refused = await client.post(
        f"/api/memberships/{membership.id}/cancel", headers=get_auth_headers(stranger.id)
    )
    cancelled = await client.post(f"/api/memberships/{membership.id}/cancel", headers=get_auth_headers(owner.id))
    missing = await client.post("/api/memberships/999/cancel", headers=get_auth_headers(owner.id))

    assert refused.status_code == 403
    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "rejected"
    assert missing.status_code == 404


@pytest.mark.integration
async def test_team_member_profile_counts_as_admin(client: AsyncClient, session: AsyncSession):
    """Test that team members can use admin routes."""
    staff = await create_profile(session, is_team_member=True)

    response = await client.post(
        "/api/memberships/faqs/",
        json={
            "question": "Who can become a member?",
            "answer": "Anyone interested in pluralist economics.",
            "category": "membership",
        },
        headers=get_auth_headers(staff.id),
    )

    assert response.status_code == 201


@pytest.mark.integration
async def test_faqs_filter_by_category(client: AsyncClient):
    """Test filtering FAQs by category."""
    headers = get_admin_headers()
    for question, category in (
        ("How do I join the network?", "membership"),
        ("Can my society partner with you?", "collaboration"),
    ):
        await client.post(
            "/api/memberships/faqs/",
            json={"question": question, "answer": "Get in touch through the contact form.", "category": category},
            headers=headers,
        )

    response = await client.get("/api/memberships/faqs/", params={"category": "collaboration"})

    assert [faq["question"] for faq in response.json()] == ["Can my society partner with you?"]


@pytest.mark.integration
async def test_faq_answer_length_is_validated(client: AsyncClient):
    """Test that an overlong FAQ answer is rejected."""
    response = await client.post(
        "/api/memberships/faqs/",
        json={"question": "Is this long enough?", "answer": "Too short", "category": "membership"},
        headers=get_admin_headers(),
    )

    assert response.status_code == 422


@pytest.mark.integration
async def test_collaboration_cards_crud(client: AsyncClient):
    """Test collaboration card CRUD."""
    headers = get_admin_headers()

    created = await client.post(
        "/api/memberships/collaboration-cards/",
        json={"title": "Host a workshop", "description": "Run a session with us"},
        headers=headers,
    )
    card_id = created.json()["id"]
    updated = await client.patch(
        f"/api/memberships/collaboration-cards/{card_id}", json={"icon_name": "users"}, headers=headers
    )

    assert created.status_code == 201
    assert updated.json()["icon_name"] == "users"
    assert updated.json()["title"] == "Host a workshop"
