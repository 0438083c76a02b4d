from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PressReleaseBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    slug: str = Field(..., min_length=1, max_length=256)
    content: str = Field(..., min_length=1)
    pdf_url: Optional[str] = None
    release_date: datetime
    display_order: int = 0


class PressReleaseCreate(PressReleaseBase):
    pass


class PressReleaseUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=256)
    content: Optional[str] = Field(default=None, min_length=1)
    pdf_url: Optional[str] = None
    release_date: Optional[datetime] = None
    display_order: Optional[int] = None


class PressReleaseRead(PressReleaseBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime


class MediaAppearanceBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    outlet: str = Field(..., min_length=1, max_length=256)
    url: Optional[str] = None
    date: datetime
    summary: Optional[str] = None
    thumbnail_url: Optional[str] = None
    is_featured: bool = False
    display_order: int = 0


class MediaAppearanceCreate(MediaAppearanceBase):
    pass


class MediaAppearanceUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    outlet: Optional[str] = Field(default=None, min_length=1, max_length=256)
    url: Optional[str] = None
    date: Optional[datetime] = None
    summary: Optional[str] = None
    thumbnail_url: Optional[str] = None
    is_featured: Optional[bool] = None
    display_order: Optional[int] = None


class MediaAppearanceRead(MediaAppearanceBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime
