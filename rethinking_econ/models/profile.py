from typing import Optional

from sqlalchemy import Boolean, Column, Text
from sqlmodel import Field

from rethinking_econ.models.common import TimestampedModel


class Profile(TimestampedModel, table=True):
    """Public profile of an identity-provider user.

    ``id`` is the opaque user id handed over by the identity provider.
    """

    __tablename__ = "profiles"

    id: str = Field(primary_key=True, max_length=256)
    name: Optional[str] = Field(default=None, max_length=256)
    bio: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    position: Optional[str] = Field(default=None, max_length=256)
    avatar_url: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    is_team_member: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="false"),
    )
    team_role: Optional[str] = Field(default=None, max_length=256)
    show_on_website: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="false"),
    )
