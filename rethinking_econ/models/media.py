from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, Column, DateTime, Text
from sqlmodel import Field

from rethinking_econ.models.common import OrderedModel


class PressRelease(OrderedModel, table=True):
    __tablename__ = "press_releases"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=256, nullable=False)
    slug: str = Field(max_length=256, nullable=False, unique=True, index=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    pdf_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    release_date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False, index=True))


class MediaAppearance(OrderedModel, table=True):
    """Press coverage or interview featuring the network."""

    __tablename__ = "media_appearances"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=256, nullable=False)
    outlet: str = Field(max_length=256, nullable=False)
    url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False, index=True))
    summary: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    thumbnail_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    is_featured: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="false"),
    )
