"""Generic list/get/create/update/delete over a single table.

Every content table on the site follows the same lifecycle, so endpoints
delegate to one :class:`ResourceService` per model instead of repeating the
statements. Services only ``flush``; the calling endpoint owns the commit.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.models.common import utcnow

ModelT = TypeVar("ModelT", bound=SQLModel)

BeforeDelete = Callable[[AsyncSession, Any], Awaitable[None]]


class ResourceError(Exception):
    """Base error for resource operations."""


class ResourceInUseError(ResourceError):
    """Raised when a row cannot be deleted because other rows reference it."""


class ResourceConflictError(ResourceError):
    """Raised when a write collides with a unique constraint."""


def default_ordering(model: Any) -> tuple:
    """``display_order`` ascending with ``id`` as tiebreaker."""
    if hasattr(model, "display_order"):
        return (model.display_order.asc(), model.id.asc())
    return (model.id.asc(),)


class ResourceService(Generic[ModelT]):
    def __init__(
        self,
        model: type[ModelT],
        *,
        order_by: Optional[Sequence[Any]] = None,
        before_delete: Optional[BeforeDelete] = None,
    ) -> None:
        self.model = model
        self.order_by = tuple(order_by) if order_by is not None else default_ordering(model)
        self.before_delete = before_delete

    async def list(self, session: AsyncSession, **filters: Any) -> list[ModelT]:
        """Return all rows, optionally filtered by equality on the given columns.

        ``None`` filter values are ignored.
        """
        stmt = select(self.model)
        for field, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, field) == value)
        stmt = stmt.order_by(*self.order_by)
        result = await session.exec(stmt)
        return list(result.all())

    async def get(self, session: AsyncSession, item_id: int) -> Optional[ModelT]:
        return await session.get(self.model, item_id)

    async def create(self, session: AsyncSession, data: dict[str, Any]) -> ModelT:
        item = self.model(**data)
        session.add(item)
        await self._flush(session)
        return item

    async def update(self, session: AsyncSession, item: ModelT, data: dict[str, Any]) -> ModelT:
        """Apply a partial update.

        ``data`` should come from ``model_dump(exclude_unset=True)``. An explicit
        ``None`` for a NOT NULL column is ignored rather than written.
        """
        columns = self.model.__table__.columns
        for field, value in data.items():
            if value is None and field in columns and not columns[field].nullable:
                continue
            setattr(item, field, value)
        if hasattr(item, "updated_at"):
            item.updated_at = utcnow()
        session.add(item)
        await self._flush(session)
        return item

    async def delete(self, session: AsyncSession, item: ModelT) -> None:
        if self.before_delete is not None:
            await self.before_delete(session, item)
        await session.delete(item)
        await session.flush()

    async def _flush(self, session: AsyncSession) -> None:
        try:
            await session.flush()
        except IntegrityError as exc:
            await session.rollback()
            raise ResourceConflictError(f"{self.model.__name__} conflicts with an existing row") from exc
