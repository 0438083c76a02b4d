from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Enum as SQLEnum, Field, SQLModel

from rethinking_econ.models.common import TimestampedModel


class PublicationType(str, Enum):
    research_paper = "research_paper"
    policy_brief = "policy_brief"
    opinion = "opinion"
    blog_post = "blog_post"


class PublicationStatus(str, Enum):
    draft = "draft"
    pending_review = "pending_review"
    published = "published"
    rejected = "rejected"


class Category(TimestampedModel, table=True):
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, nullable=False)
    slug: str = Field(max_length=100, nullable=False, unique=True, index=True)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))


class Tag(TimestampedModel, table=True):
    """Free-form publication label.

    Tags are created on first use and never removed when the last
    publication referencing them goes away.
    """

    __tablename__ = "tags"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, nullable=False)
    slug: str = Field(max_length=100, nullable=False, unique=True, index=True)


class Publication(TimestampedModel, table=True):
    __tablename__ = "publications"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=256, nullable=False)
    slug: str = Field(max_length=256, nullable=False, unique=True, index=True)
    abstract: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    content: str = Field(sa_column=Column(Text, nullable=False))
    type: PublicationType = Field(
        sa_column=Column(SQLEnum(PublicationType, name="publication_type"), nullable=False)
    )
    pdf_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    thumbnail_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    author_id: Optional[str] = Field(default=None, foreign_key="profiles.id", index=True)
    status: PublicationStatus = Field(
        default=PublicationStatus.draft,
        sa_column=Column(
            SQLEnum(PublicationStatus, name="publication_status"), nullable=False, index=True
        ),
    )
    featured_order: Optional[int] = Field(default=None)
    published_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )


class PublicationCategory(SQLModel, table=True):
    """Junction table linking publications to categories."""

    __tablename__ = "publication_categories"

    publication_id: int = Field(foreign_key="publications.id", primary_key=True)
    category_id: int = Field(foreign_key="categories.id", primary_key=True, index=True)


class PublicationTag(SQLModel, table=True):
    """Junction table linking publications to tags."""

    __tablename__ = "publication_tags"

    publication_id: int = Field(foreign_key="publications.id", primary_key=True)
    tag_id: int = Field(foreign_key="tags.id", primary_key=True, index=True)
