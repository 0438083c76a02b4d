from enum import Enum
from typing import Optional

from sqlalchemy import Column, Text
from sqlmodel import Enum as SQLEnum, Field

from rethinking_econ.models.common import TimestampedModel


class InquiryType(str, Enum):
    general = "general"
    membership = "membership"
    collaboration = "collaboration"
    media = "media"
    other = "other"


class ContactStatus(str, Enum):
    new = "new"
    in_progress = "in_progress"
    resolved = "resolved"


class ContactSubmission(TimestampedModel, table=True):
    """Message left through the public contact form."""

    __tablename__ = "contact_submissions"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=256, nullable=False)
    email: str = Field(max_length=320, nullable=False)
    subject: str = Field(max_length=256, nullable=False)
    message: str = Field(sa_column=Column(Text, nullable=False))
    inquiry_type: InquiryType = Field(
        sa_column=Column(SQLEnum(InquiryType, name="inquiry_type"), nullable=False)
    )
    status: ContactStatus = Field(
        default=ContactStatus.new,
        sa_column=Column(SQLEnum(ContactStatus, name="contact_status"), nullable=False, index=True),
    )
