from datetime import datetime
import json
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rethinking_econ.models.policy import CampaignStatus, PolicyCategory, PolicyStatus


class PolicyBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    summary: Optional[str] = Field(default=None, max_length=1000)
    content: str = Field(..., min_length=1)
    category: PolicyCategory
    thumbnail_url: Optional[str] = None
    author_id: Optional[str] = None
    display_order: int = 0


class PolicyCreate(PolicyBase):
    slug: Optional[str] = Field(default=None, min_length=1, max_length=256)
    status: PolicyStatus = PolicyStatus.draft


class PolicyUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=256)
    summary: Optional[str] = Field(default=None, max_length=1000)
    content: Optional[str] = Field(default=None, min_length=1)
    category: Optional[PolicyCategory] = None
    thumbnail_url: Optional[str] = None
    author_id: Optional[str] = None
    status: Optional[PolicyStatus] = None
    display_order: Optional[int] = None


class PolicyRead(PolicyBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    slug: str
    status: PolicyStatus
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class CaseStudyBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    summary: Optional[str] = Field(default=None, max_length=1000)
    content: str = Field(..., min_length=1)
    thumbnail_url: Optional[str] = None
    author_id: Optional[str] = None
    display_order: int = 0


class CaseStudyCreate(CaseStudyBase):
    slug: Optional[str] = Field(default=None, min_length=1, max_length=256)
    status: PolicyStatus = PolicyStatus.draft


class CaseStudyUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=256)
    summary: Optional[str] = Field(default=None, max_length=1000)
    content: Optional[str] = Field(default=None, min_length=1)
    thumbnail_url: Optional[str] = None
    author_id: Optional[str] = None
    status: Optional[PolicyStatus] = None
    display_order: Optional[int] = None


class CaseStudyRead(CaseStudyBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    policy_id: int
    slug: str
    status: PolicyStatus
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class AdvocacyCampaignBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    description: Optional[str] = None
    status: CampaignStatus
    image_url: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)
    display_order: int = 0


class AdvocacyCampaignCreate(AdvocacyCampaignBase):
    pass


class AdvocacyCampaignUpdate(BaseModel):
    """``achievements``, when present, replaces the whole stored list."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    description: Optional[str] = None
    status: Optional[CampaignStatus] = None
    image_url: Optional[str] = None
    achievements: Optional[List[str]] = None
    display_order: Optional[int] = None


class AdvocacyCampaignRead(AdvocacyCampaignBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime

    @field_validator("achievements", mode="before")
    @classmethod
    def parse_achievements(cls, value: Any) -> List[str]:
        if value is None or value == "":
            return []
        if isinstance(value, str):
            try:
                decoded = json.loads(value)
            except json.JSONDecodeError:
                return []
            return decoded if isinstance(decoded, list) else []
        return value
