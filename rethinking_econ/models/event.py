from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Boolean, Column, DateTime, Text
from sqlmodel import Enum as SQLEnum, Field

from rethinking_econ.models.common import OrderedModel


class EventType(str, Enum):
    conference = "conference"
    workshop = "workshop"
    seminar = "seminar"
    webinar = "webinar"


class EventStatus(str, Enum):
    upcoming = "upcoming"
    ongoing = "ongoing"
    completed = "completed"
    canceled = "canceled"


class EventMediaType(str, Enum):
    photo = "photo"
    video = "video"
    document = "document"


class InitiativeCategory(str, Enum):
    education = "education"
    policy = "policy"
    community = "community"
    research = "research"


class Event(OrderedModel, table=True):
    __tablename__ = "events"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=256, nullable=False)
    slug: str = Field(max_length=256, nullable=False, unique=True, index=True)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    location: Optional[str] = Field(default=None, max_length=256)
    start_date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False, index=True))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
    registration_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    thumbnail_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    type: EventType = Field(
        sa_column=Column(SQLEnum(EventType, name="event_type"), nullable=False)
    )
    status: EventStatus = Field(
        default=EventStatus.upcoming,
        sa_column=Column(SQLEnum(EventStatus, name="event_status"), nullable=False, index=True),
    )
    is_virtual: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="false"),
    )
    virtual_link: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    max_attendees: Optional[int] = Field(default=None)


class EventMedia(OrderedModel, table=True):
    """Photo, video or document attached to an event. Only the URL is stored."""

    __tablename__ = "event_media"

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="events.id", nullable=False, index=True)
    type: EventMediaType = Field(
        sa_column=Column(SQLEnum(EventMediaType, name="event_media_type"), nullable=False)
    )
    url: str = Field(sa_column=Column(Text, nullable=False))
    title: Optional[str] = Field(default=None, max_length=256)
    description: Optional[str] = Field(default=None, max_length=500)
    is_featured: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="false"),
    )


class Initiative(OrderedModel, table=True):
    __tablename__ = "initiatives"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=256, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    category: InitiativeCategory = Field(
        sa_column=Column(SQLEnum(InitiativeCategory, name="initiative_category"), nullable=False, index=True)
    )
    icon_name: Optional[str] = Field(default=None, max_length=100)
