from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Enum as SQLEnum, Field

from rethinking_econ.models.common import OrderedModel


class PolicyCategory(str, Enum):
    economic = "economic"
    social = "social"
    environmental = "environmental"


class PolicyStatus(str, Enum):
    draft = "draft"
    published = "published"


class CampaignStatus(str, Enum):
    active = "active"
    completed = "completed"
    planned = "planned"


class Policy(OrderedModel, table=True):
    """Policy brief."""

    __tablename__ = "policies"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=256, nullable=False)
    slug: str = Field(max_length=256, nullable=False, unique=True, index=True)
    summary: Optional[str] = Field(default=None, max_length=1000)
    content: str = Field(sa_column=Column(Text, nullable=False))
    category: PolicyCategory = Field(
        sa_column=Column(SQLEnum(PolicyCategory, name="policy_category"), nullable=False, index=True)
    )
    thumbnail_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    author_id: Optional[str] = Field(default=None, foreign_key="profiles.id")
    status: PolicyStatus = Field(
        default=PolicyStatus.draft,
        sa_column=Column(SQLEnum(PolicyStatus, name="policy_status"), nullable=False, index=True),
    )
    published_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )


class CaseStudy(OrderedModel, table=True):
    __tablename__ = "case_studies"

    id: Optional[int] = Field(default=None, primary_key=True)
    policy_id: int = Field(foreign_key="policies.id", nullable=False, index=True)
    title: str = Field(max_length=256, nullable=False)
    slug: str = Field(max_length=256, nullable=False, unique=True, index=True)
    summary: Optional[str] = Field(default=None, max_length=1000)
    content: str = Field(sa_column=Column(Text, nullable=False))
    thumbnail_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    author_id: Optional[str] = Field(default=None, foreign_key="profiles.id")
    status: PolicyStatus = Field(
        default=PolicyStatus.draft,
        sa_column=Column(SQLEnum(PolicyStatus, name="policy_status"), nullable=False),
    )
    published_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )


class AdvocacyCampaign(OrderedModel, table=True):
    """Advocacy campaign.

    ``achievements`` holds a JSON-encoded list of strings; callers always
    replace the whole list.
    """

    __tablename__ = "advocacy_campaigns"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=256, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    status: CampaignStatus = Field(
        sa_column=Column(SQLEnum(CampaignStatus, name="campaign_status"), nullable=False, index=True)
    )
    image_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    achievements: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
