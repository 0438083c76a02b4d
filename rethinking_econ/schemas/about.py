from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from rethinking_econ.models.about import PartnerCategory, SectionType, TeamMemberCategory


class AboutCardBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    content: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=100)
    display_order: int = 0


class AboutCardCreate(AboutCardBase):
    pass


class AboutCardUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    content: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=100)
    display_order: Optional[int] = None


class AboutCardRead(AboutCardBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    section_id: int
    created_at: datetime
    updated_at: datetime


class AboutSectionBase(BaseModel):
    section: SectionType
    title: str = Field(..., min_length=1, max_length=256)
    content: Optional[str] = None
    display_order: int = 0


class AboutSectionCreate(AboutSectionBase):
    pass


class AboutSectionUpdate(BaseModel):
    section: Optional[SectionType] = None
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    content: Optional[str] = None
    display_order: Optional[int] = None


class AboutSectionRead(AboutSectionBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime
    cards: List[AboutCardRead] = Field(default_factory=list)


class HistoryMilestoneBase(BaseModel):
    year: str = Field(..., min_length=1, max_length=20)
    title: str = Field(..., min_length=1, max_length=256)
    content: Optional[str] = None
    display_order: int = 0


class HistoryMilestoneCreate(HistoryMilestoneBase):
    pass


class HistoryMilestoneUpdate(BaseModel):
    year: Optional[str] = Field(default=None, min_length=1, max_length=20)
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    content: Optional[str] = None
    display_order: Optional[int] = None


class HistoryMilestoneRead(HistoryMilestoneBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime


class TeamMemberBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    role: str = Field(..., min_length=1, max_length=256)
    bio: Optional[str] = None
    image_url: Optional[str] = None
    category: TeamMemberCategory
    display_order: int = 0


class TeamMemberCreate(TeamMemberBase):
    pass


class TeamMemberUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=256)
    role: Optional[str] = Field(default=None, min_length=1, max_length=256)
    bio: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[TeamMemberCategory] = None
    display_order: Optional[int] = None


class TeamMemberRead(TeamMemberBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime


class PartnerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    description: Optional[str] = None
    logo_url: Optional[str] = None
    website: Optional[str] = Field(default=None, max_length=512)
    category: PartnerCategory
    display_order: int = 0


class PartnerCreate(PartnerBase):
    pass


class PartnerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=256)
    description: Optional[str] = None
    logo_url: Optional[str] = None
    website: Optional[str] = Field(default=None, max_length=512)
    category: Optional[PartnerCategory] = None
    display_order: Optional[int] = None


class PartnerRead(PartnerBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime
