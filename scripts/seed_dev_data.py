"""Dev data seeder for the Rethinking Economics site.

Usage:
    python scripts/seed_dev_data.py          # Create sample content
    python scripts/seed_dev_data.py --clean  # Remove seeded content

Run from the project root against a migrated database. Created IDs are saved
to .dev_seed_ids.json so ``--clean`` removes exactly what was seeded.
"""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from rethinking_econ.core.text import slugify  # noqa: E402
from rethinking_econ.db.session import AsyncSessionLocal  # noqa: E402
from rethinking_econ.models.about import HistoryMilestone, Partner, PartnerCategory  # noqa: E402
from rethinking_econ.models.event import Event, EventStatus, EventType  # noqa: E402
from rethinking_econ.models.membership import FAQ, FAQCategory, MembershipType  # noqa: E402
from rethinking_econ.models.policy import Policy, PolicyCategory, PolicyStatus  # noqa: E402
from rethinking_econ.models.profile import Profile  # noqa: E402
from rethinking_econ.models.publication import PublicationType  # noqa: E402
from rethinking_econ.services import profiles as profiles_service  # noqa: E402
from rethinking_econ.services import publications as publications_service  # noqa: E402

STATE_FILE = PROJECT_ROOT / ".dev_seed_ids.json"

NOW = datetime.now(timezone.utc)

PROFILES = [
    {"name": "Amara Okafor", "position": "Network Coordinator", "is_team_member": True, "show_on_website": True},
    {"name": "Lukas Brenner", "position": "PhD Candidate, Political Economy", "show_on_website": True},
    {"name": "Sofia Marquez", "position": "Student Organiser"},
]

MILESTONES = [
    ("2008", "Financial crisis sparks student debate"),
    ("2012", "First student groups form"),
    ("2014", "International open letter"),
]

EVENTS = [
    ("Pluralist Economics Summer School", EventType.conference, 21, EventStatus.upcoming),
    ("Teaching Ecological Economics", EventType.workshop, 5, EventStatus.upcoming),
    ("Money and Banking Reading Group", EventType.seminar, -30, EventStatus.completed),
]

POLICIES = [
    ("Reforming the Economics Curriculum", PolicyCategory.social),
    ("Green Investment Rules", PolicyCategory.environmental),
]

PUBLICATIONS = [
    {
        "title": "What Economics Students Are Not Taught",
        "type": PublicationType.research_paper,
        "tags": ["Curriculum", "Pluralism"],
        "categories": ["Education"],
    },
    {
        "title": "A Short Guide to Post-Keynesian Thought",
        "type": PublicationType.blog_post,
        "tags": ["Post-Keynesian"],
        "categories": ["Schools of Thought"],
    },
]


def _save_state(state: dict) -> None:
    STATE_FILE.write_text(json.dumps(state, indent=2))
    print(f"  State saved to {STATE_FILE}")


def _load_state() -> dict | None:
    if not STATE_FILE.exists():
        return None
    return json.loads(STATE_FILE.read_text())


async def _create_profiles(session: AsyncSession) -> list[Profile]:
    profiles = []
    for data in PROFILES:
        profile = await profiles_service.create_profile(session, dict(data))
        profiles.append(profile)
    print(f"  Created {len(profiles)} profiles")
    return profiles


async def _create_content(session: AsyncSession, author: Profile) -> dict[str, list[int]]:
    created: dict[str, list] = {}

    milestones = [
        HistoryMilestone(year=year, title=title, display_order=index)
        for index, (year, title) in enumerate(MILESTONES)
    ]
    partners = [
        Partner(name="Open Economics Institute", category=PartnerCategory.academic, website="https://example.org"),
    ]
    events = [
        Event(
            title=title,
            slug=slugify(title),
            description=f"{title} for students and early-career researchers.",
            location="Online",
            start_date=NOW + timedelta(days=days),
            type=event_type,
            status=event_status,
        )
        for title, event_type, days, event_status in EVENTS
    ]
    policies = [
        Policy(
            title=title,
            slug=slugify(title),
            summary=f"Brief: {title}",
            content=f"Recommendations on {title.lower()}.",
            category=category,
            status=PolicyStatus.published,
            published_at=NOW,
            author_id=author.id,
        )
        for title, category in POLICIES
    ]
    membership_types = [
        MembershipType(name="Student Member", description="For enrolled students", requires_approval=False),
        MembershipType(name="Chapter Lead", description="Runs a local group", requires_approval=True),
    ]
    faqs = [
        FAQ(question="Who can join?", answer="Anyone interested in pluralist economics.", category=FAQCategory.membership),
    ]

    for key, rows in (
        ("milestones", milestones),
        ("partners", partners),
        ("events", events),
        ("policies", policies),
        ("membership_types", membership_types),
        ("faqs", faqs),
    ):
        session.add_all(rows)
        await session.flush()
        created[key] = [row.id for row in rows]
        print(f"  Created {len(rows)} {key.replace('_', ' ')}")

    return created


async def _create_publications(session: AsyncSession, author: Profile) -> list[int]:
    ids = []
    for data in PUBLICATIONS:
        publication = await publications_service.create_as_author(
            session,
            {
                **data,
                "author_id": author.id,
                "abstract": f"Abstract of {data['title']}",
                "content": f"Full text of {data['title']}.",
            },
        )
        ids.append(publication.id)
    print(f"  Created {len(ids)} publications")
    return ids


async def seed() -> None:
    if _load_state() is not None:
        print(f"Seed data already present ({STATE_FILE}); run with --clean first.")
        sys.exit(1)

    print("Seeding dev data...")
    async with AsyncSessionLocal() as session:
        async with session.begin():
            profiles = await _create_profiles(session)
            state = await _create_content(session, profiles[0])
            state["publications"] = await _create_publications(session, profiles[1])
            state["profiles"] = [profile.id for profile in profiles]

    _save_state(state)
    print("Done!")


async def clean() -> None:
    state = _load_state()
    if state is None:
        print("Nothing to clean.")
        return

    print("Removing seeded data...")
    async with AsyncSessionLocal() as session:
        async with session.begin():
            await publications_service.delete_publications(session, state.get("publications", []))
            print("  Removed publications")

            # Policies reference profiles, so profiles go last
            for key, model in (
                ("faqs", FAQ),
                ("membership_types", MembershipType),
                ("policies", Policy),
                ("events", Event),
                ("partners", Partner),
                ("milestones", HistoryMilestone),
                ("profiles", Profile),
            ):
                for row_id in state.get(key, []):
                    obj = await session.get(model, row_id)
                    if obj:
                        await session.delete(obj)
                await session.flush()
                print(f"  Removed {key.replace('_', ' ')}")

    STATE_FILE.unlink(missing_ok=True)
    print("Done! All seeded data removed.")


if __name__ == "__main__":
    if "--clean" in sys.argv:
        asyncio.run(clean())
    else:
        asyncio.run(seed())
