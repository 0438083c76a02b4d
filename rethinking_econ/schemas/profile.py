from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: str
    name: Optional[str] = None
    bio: Optional[str] = None
    position: Optional[str] = None
    avatar_url: Optional[str] = None
    is_team_member: bool = False
    team_role: Optional[str] = None
    show_on_website: bool = False
    created_at: datetime
    updated_at: datetime


class ProfileSummary(BaseModel):
    """Author/applicant representation embedded in other responses."""

    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    position: Optional[str] = None


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=256)
    bio: Optional[str] = None
    position: Optional[str] = Field(default=None, max_length=256)


class ProfileCreate(BaseModel):
    """Admin-created profile, e.g. for an external author."""

    id: Optional[str] = Field(default=None, min_length=1, max_length=256)
    name: str = Field(..., min_length=1, max_length=256)
    position: Optional[str] = Field(default=None, max_length=256)
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    is_team_member: bool = False
    team_role: Optional[str] = Field(default=None, max_length=256)
    show_on_website: bool = False
