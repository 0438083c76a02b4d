from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedModel(SQLModel):
    """Shared ``created_at``/``updated_at`` columns.

    ``updated_at`` is only refreshed by code paths that modify a row; nothing
    here hooks ORM events.
    """

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
    )


class OrderedModel(TimestampedModel):
    display_order: int = Field(default=0, nullable=False)
