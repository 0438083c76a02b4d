from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rethinking_econ.models.event import EventMediaType, EventStatus, EventType, InitiativeCategory


class EventBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    description: Optional[str] = None
    location: Optional[str] = Field(default=None, max_length=256)
    start_date: datetime
    end_date: Optional[datetime] = None
    registration_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    type: EventType
    is_virtual: bool = False
    virtual_link: Optional[str] = None
    max_attendees: Optional[int] = Field(default=None, ge=0)
    display_order: int = 0


class EventCreate(EventBase):
    slug: Optional[str] = Field(default=None, min_length=1, max_length=256)
    status: EventStatus = EventStatus.upcoming


class EventUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=256)
    description: Optional[str] = None
    location: Optional[str] = Field(default=None, max_length=256)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    registration_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    type: Optional[EventType] = None
    status: Optional[EventStatus] = None
    is_virtual: Optional[bool] = None
    virtual_link: Optional[str] = None
    max_attendees: Optional[int] = Field(default=None, ge=0)
    display_order: Optional[int] = None


class EventRead(EventBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    slug: str
    status: EventStatus
    created_at: datetime
    updated_at: datetime


class EventMediaBase(BaseModel):
    type: EventMediaType
    url: str = Field(..., min_length=1)
    title: Optional[str] = Field(default=None, max_length=256)
    description: Optional[str] = Field(default=None, max_length=500)
    is_featured: bool = False
    display_order: int = 0


class EventMediaCreate(EventMediaBase):
    pass


class EventMediaUpdate(BaseModel):
    type: Optional[EventMediaType] = None
    url: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, max_length=256)
    description: Optional[str] = Field(default=None, max_length=500)
    is_featured: Optional[bool] = None
    display_order: Optional[int] = None


class EventMediaRead(EventMediaBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    event_id: int
    created_at: datetime
    updated_at: datetime


class InitiativeBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    description: Optional[str] = None
    category: InitiativeCategory
    icon_name: Optional[str] = Field(default=None, max_length=100)
    display_order: int = 0


class InitiativeCreate(InitiativeBase):
    pass


class InitiativeUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    description: Optional[str] = None
    category: Optional[InitiativeCategory] = None
    icon_name: Optional[str] = Field(default=None, max_length=100)
    display_order: Optional[int] = None


class InitiativeRead(InitiativeBase):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    created_at: datetime
    updated_at: datetime
