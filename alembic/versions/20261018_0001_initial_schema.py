"""Initial schema for the site content, publication and membership tables.

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "20261018_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUMS: dict[str, tuple[str, ...]] = {
    "about_section_type": ("mission", "vision", "values", "history"),
    "team_member_category": ("leadership", "faculty", "students"),
    "partner_category": ("academic", "policy", "civil_society"),
    "event_type": ("conference", "workshop", "seminar", "webinar"),
    "event_status": ("upcoming", "ongoing", "completed", "canceled"),
    "event_media_type": ("photo", "video", "document"),
    "initiative_category": ("education", "policy", "community", "research"),
    "policy_category": ("economic", "social", "environmental"),
    "policy_status": ("draft", "published"),
    "campaign_status": ("active", "completed", "planned"),
    "membership_status": ("pending", "approved", "rejected"),
    "faq_category": ("collaboration", "membership"),
    "publication_type": ("research_paper", "policy_brief", "opinion", "blog_post"),
    "publication_status": ("draft", "pending_review", "published", "rejected"),
    "inquiry_type": ("general", "membership", "collaboration", "media", "other"),
    "contact_status": ("new", "in_progress", "resolved"),
}


def _create_enum_if_not_exists(name: str, values: tuple[str, ...]) -> None:
    quoted_values = ", ".join(f"'{value}'" for value in values)
    op.execute(
        sa.text(
            f"""
            DO $$
            BEGIN
                IF NOT EXISTS (
                    SELECT 1 FROM pg_type WHERE typname = '{name}'
                ) THEN
                    CREATE TYPE {name} AS ENUM ({quoted_values});
                END IF;
            END;
            $$;
            """
        )
    )


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _ordered() -> list[sa.Column]:
    return [sa.Column("display_order", sa.Integer(), nullable=False), *_timestamps()]


def upgrade() -> None:
    for enum_name, values in ENUMS.items():
        _create_enum_if_not_exists(enum_name, values)

    op.create_table(
        "profiles",
        sa.Column("id", sa.String(length=256), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("position", sa.String(length=256), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("is_team_member", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("team_role", sa.String(length=256), nullable=True),
        sa.Column("show_on_website", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "about_sections",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("section", _enum("about_section_type"), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_about_sections_section"), "about_sections", ["section"], unique=False)

    op.create_table(
        "about_cards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("section_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(length=100), nullable=True),
        *_ordered(),
        sa.ForeignKeyConstraint(["section_id"], ["about_sections.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_about_cards_section_id"), "about_cards", ["section_id"], unique=False)

    op.create_table(
        "history_milestones",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("year", sa.String(length=20), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "team_members",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("role", sa.String(length=256), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("category", _enum("team_member_category"), nullable=False),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_team_members_category"), "team_members", ["category"], unique=False)

    op.create_table(
        "partners",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.Column("website", sa.String(length=512), nullable=True),
        sa.Column("category", _enum("partner_category"), nullable=False),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_partners_category"), "partners", ["category"], unique=False)

    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("slug", sa.String(length=256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=256), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("registration_url", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("type", _enum("event_type"), nullable=False),
        sa.Column("status", _enum("event_status"), nullable=False),
        sa.Column("is_virtual", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("virtual_link", sa.Text(), nullable=True),
        sa.Column("max_attendees", sa.Integer(), nullable=True),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_events_slug"), "events", ["slug"], unique=True)
    op.create_index(op.f("ix_events_start_date"), "events", ["start_date"], unique=False)
    op.create_index(op.f("ix_events_status"), "events", ["status"], unique=False)

    op.create_table(
        "event_media",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("event_id", sa.Integer(), nullable=False),
        sa.Column("type", _enum("event_media_type"), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=True),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default="false"),
        *_ordered(),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_event_media_event_id"), "event_media", ["event_id"], unique=False)

    op.create_table(
        "initiatives",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", _enum("initiative_category"), nullable=False),
        sa.Column("icon_name", sa.String(length=100), nullable=True),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_initiatives_category"), "initiatives", ["category"], unique=False)

    op.create_table(
        "policies",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("slug", sa.String(length=256), nullable=False),
        sa.Column("summary", sa.String(length=1000), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", _enum("policy_category"), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("author_id", sa.String(length=256), nullable=True),
        sa.Column("status", _enum("policy_status"), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        *_ordered(),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_policies_slug"), "policies", ["slug"], unique=True)
    op.create_index(op.f("ix_policies_category"), "policies", ["category"], unique=False)
    op.create_index(op.f("ix_policies_status"), "policies", ["status"], unique=False)

    op.create_table(
        "case_studies",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("policy_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("slug", sa.String(length=256), nullable=False),
        sa.Column("summary", sa.String(length=1000), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("author_id", sa.String(length=256), nullable=True),
        sa.Column("status", _enum("policy_status"), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        *_ordered(),
        sa.ForeignKeyConstraint(["policy_id"], ["policies.id"]),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_case_studies_slug"), "case_studies", ["slug"], unique=True)
    op.create_index(op.f("ix_case_studies_policy_id"), "case_studies", ["policy_id"], unique=False)

    op.create_table(
        "advocacy_campaigns",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", _enum("campaign_status"), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("achievements", sa.Text(), nullable=True),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_advocacy_campaigns_status"), "advocacy_campaigns", ["status"], unique=False)

    op.create_table(
        "membership_types",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("benefits", sa.String(length=1000), nullable=True),
        sa.Column("requires_approval", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "memberships",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(length=256), nullable=False),
        sa.Column("membership_type_id", sa.Integer(), nullable=False),
        sa.Column("status", _enum("membership_status"), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"]),
        sa.ForeignKeyConstraint(["membership_type_id"], ["membership_types.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_memberships_user_id"), "memberships", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_memberships_membership_type_id"), "memberships", ["membership_type_id"], unique=False
    )

    op.create_table(
        "faqs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("question", sa.String(length=500), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("category", _enum("faq_category"), nullable=False),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_faqs_category"), "faqs", ["category"], unique=False)

    op.create_table(
        "collaboration_cards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("icon_name", sa.String(length=100), nullable=True),
        sa.Column("bullet_points", sa.String(length=1000), nullable=True),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_categories_slug"), "categories", ["slug"], unique=True)

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tags_slug"), "tags", ["slug"], unique=True)

    op.create_table(
        "publications",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("slug", sa.String(length=256), nullable=False),
        sa.Column("abstract", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("type", _enum("publication_type"), nullable=False),
        sa.Column("pdf_url", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("author_id", sa.String(length=256), nullable=True),
        sa.Column("status", _enum("publication_status"), nullable=False),
        sa.Column("featured_order", sa.Integer(), nullable=True),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_publications_slug"), "publications", ["slug"], unique=True)
    op.create_index(op.f("ix_publications_author_id"), "publications", ["author_id"], unique=False)
    op.create_index(op.f("ix_publications_status"), "publications", ["status"], unique=False)

    op.create_table(
        "publication_categories",
        sa.Column("publication_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["publication_id"], ["publications.id"]),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.PrimaryKeyConstraint("publication_id", "category_id"),
    )
    op.create_index(
        op.f("ix_publication_categories_category_id"),
        "publication_categories",
        ["category_id"],
        unique=False,
    )

    op.create_table(
        "publication_tags",
        sa.Column("publication_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["publication_id"], ["publications.id"]),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"]),
        sa.PrimaryKeyConstraint("publication_id", "tag_id"),
    )
    op.create_index(op.f("ix_publication_tags_tag_id"), "publication_tags", ["tag_id"], unique=False)

    op.create_table(
        "press_releases",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("slug", sa.String(length=256), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("pdf_url", sa.Text(), nullable=True),
        sa.Column("release_date", sa.DateTime(timezone=True), nullable=False),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_press_releases_slug"), "press_releases", ["slug"], unique=True)
    op.create_index(op.f("ix_press_releases_release_date"), "press_releases", ["release_date"], unique=False)

    op.create_table(
        "media_appearances",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("outlet", sa.String(length=256), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default="false"),
        *_ordered(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_media_appearances_date"), "media_appearances", ["date"], unique=False)

    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("subject", sa.String(length=256), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("inquiry_type", _enum("inquiry_type"), nullable=False),
        sa.Column("status", _enum("contact_status"), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_contact_submissions_status"), "contact_submissions", ["status"], unique=False)


def downgrade() -> None:
    for table in (
        "contact_submissions",
        "media_appearances",
        "press_releases",
        "publication_tags",
        "publication_categories",
        "publications",
        "tags",
        "categories",
        "collaboration_cards",
        "faqs",
        "memberships",
        "membership_types",
        "advocacy_campaigns",
        "case_studies",
        "policies",
        "initiatives",
        "event_media",
        "events",
        "partners",
        "team_members",
        "history_milestones",
        "about_cards",
        "about_sections",
        "profiles",
    ):
        op.drop_table(table)

    for enum_name in reversed(tuple(ENUMS)):
        op.execute(sa.text(f"DROP TYPE IF EXISTS {enum_name} CASCADE"))
