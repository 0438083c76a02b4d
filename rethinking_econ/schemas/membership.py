from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rethinking_econ.models.membership import FAQCategory, MembershipStatus
from rethinking_econ.schemas.profile import ProfileSummary


class MembershipTypeBase(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    benefits: Optional[str] = Field(default=None, max_length=1000)
    requires_approval: bool = True


class MembershipTypeCreate(MembershipTypeBase):
    pass


class MembershipTypeUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    benefits: Optional[str] = Field(default=None, max_length=1000)
    requires_approval: Optional[bool] = None


class MembershipTypeRead(MembershipTypeBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime


class MembershipApply(BaseModel):
    membership_type_id: int


class MembershipStatusUpdate(BaseModel):
    status: MembershipStatus


class MembershipRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    user_id: str
    membership_type_id: int
    status: MembershipStatus
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class MembershipDetail(MembershipRead):
    membership_type: Optional[MembershipTypeRead] = None
    user: Optional[ProfileSummary] = None


class FAQBase(BaseModel):
    question: str = Field(..., min_length=10, max_length=500)
    answer: str = Field(..., min_length=20, max_length=2000)
    category: FAQCategory
    display_order: int = 0


class FAQCreate(FAQBase):
    pass


class FAQUpdate(BaseModel):
    question: Optional[str] = Field(default=None, min_length=10, max_length=500)
    answer: Optional[str] = Field(default=None, min_length=20, max_length=2000)
    category: Optional[FAQCategory] = None
    display_order: Optional[int] = None


class FAQRead(FAQBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime


class CollaborationCardBase(BaseModel):
    title: str = Field(..., min_length=3, max_length=256)
    description: Optional[str] = Field(default=None, max_length=1000)
    icon_name: Optional[str] = Field(default=None, max_length=100)
    bullet_points: Optional[str] = Field(default=None, max_length=1000)
    display_order: int = 0


class CollaborationCardCreate(CollaborationCardBase):
    pass


class CollaborationCardUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=3, max_length=256)
    description: Optional[str] = Field(default=None, max_length=1000)
    icon_name: Optional[str] = Field(default=None, max_length=100)
    bullet_points: Optional[str] = Field(default=None, max_length=1000)
    display_order: Optional[int] = None


class CollaborationCardRead(CollaborationCardBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime
