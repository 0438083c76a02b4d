from enum import Enum
from typing import Optional

from sqlalchemy import Column, Text
from sqlmodel import Enum as SQLEnum, Field

from rethinking_econ.models.common import OrderedModel


class SectionType(str, Enum):
    mission = "mission"
    vision = "vision"
    values = "values"
    history = "history"


class TeamMemberCategory(str, Enum):
    leadership = "leadership"
    faculty = "faculty"
    students = "students"


class PartnerCategory(str, Enum):
    academic = "academic"
    policy = "policy"
    civil_society = "civil_society"


class AboutSection(OrderedModel, table=True):
    """Overview section (mission, vision, values, history) owning cards."""

    __tablename__ = "about_sections"

    id: Optional[int] = Field(default=None, primary_key=True)
    section: SectionType = Field(
        sa_column=Column(SQLEnum(SectionType, name="about_section_type"), nullable=False, index=True)
    )
    title: str = Field(max_length=256, nullable=False)
    content: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))


class AboutCard(OrderedModel, table=True):
    __tablename__ = "about_cards"

    id: Optional[int] = Field(default=None, primary_key=True)
    section_id: int = Field(foreign_key="about_sections.id", nullable=False, index=True)
    title: str = Field(max_length=256, nullable=False)
    content: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    icon: Optional[str] = Field(default=None, max_length=100)


class HistoryMilestone(OrderedModel, table=True):
    __tablename__ = "history_milestones"

    id: Optional[int] = Field(default=None, primary_key=True)
    year: str = Field(max_length=20, nullable=False)
    title: str = Field(max_length=256, nullable=False)
    content: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))


class TeamMember(OrderedModel, table=True):
    __tablename__ = "team_members"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=256, nullable=False)
    role: str = Field(max_length=256, nullable=False)
    bio: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    image_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    category: TeamMemberCategory = Field(
        sa_column=Column(SQLEnum(TeamMemberCategory, name="team_member_category"), nullable=False, index=True)
    )


class Partner(OrderedModel, table=True):
    __tablename__ = "partners"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=256, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    logo_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    website: Optional[str] = Field(default=None, max_length=512)
    category: PartnerCategory = Field(
        sa_column=Column(SQLEnum(PartnerCategory, name="partner_category"), nullable=False, index=True)
    )
