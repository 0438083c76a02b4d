from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Boolean, Column, DateTime, Text
from sqlmodel import Enum as SQLEnum, Field

from rethinking_econ.models.common import OrderedModel, TimestampedModel


class MembershipStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class FAQCategory(str, Enum):
    collaboration = "collaboration"
    membership = "membership"


class MembershipType(TimestampedModel, table=True):
    __tablename__ = "membership_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, nullable=False)
    description: Optional[str] = Field(default=None, max_length=1000)
    benefits: Optional[str] = Field(default=None, max_length=1000)
    requires_approval: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, server_default="true"),
    )


class Membership(TimestampedModel, table=True):
    """A profile's application for, or holding of, a membership type.

    Deleting a type that is still referenced is refused by the service layer
    before the foreign key would be violated.
    """

    __tablename__ = "memberships"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="profiles.id", nullable=False, index=True)
    membership_type_id: int = Field(foreign_key="membership_types.id", nullable=False, index=True)
    status: MembershipStatus = Field(
        default=MembershipStatus.pending,
        sa_column=Column(SQLEnum(MembershipStatus, name="membership_status"), nullable=False),
    )
    start_date: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )
    end_date: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )


class FAQ(OrderedModel, table=True):
    __tablename__ = "faqs"

    id: Optional[int] = Field(default=None, primary_key=True)
    question: str = Field(max_length=500, nullable=False)
    answer: str = Field(sa_column=Column(Text, nullable=False))
    category: FAQCategory = Field(
        sa_column=Column(SQLEnum(FAQCategory, name="faq_category"), nullable=False, index=True)
    )


class CollaborationCard(OrderedModel, table=True):
    __tablename__ = "collaboration_cards"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=256, nullable=False)
    description: Optional[str] = Field(default=None, max_length=1000)
    icon_name: Optional[str] = Field(default=None, max_length=100)
    bullet_points: Optional[str] = Field(default=None, max_length=1000)
