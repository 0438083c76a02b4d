"""Reusable query utilities for text matching, counting, and pagination.

Provides composable functions around SQLAlchemy Select statements:
- ilike_any: OR of case-insensitive substring matches over several columns
- count_rows: exact row count for an arbitrary Select
- total_pages: number of pages for a result count
"""

from __future__ import annotations

import math
from typing import Any, Iterable

from sqlalchemy import Select, func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so *term* matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def ilike_any(columns: Iterable[Any], term: str):
    """Return an OR clause matching *term* as a substring of any column."""
    pattern = f"%{escape_like(term)}%"
    return or_(*(col.ilike(pattern, escape="\\") for col in columns))


async def count_rows(session: AsyncSession, statement: Select) -> int:
    """Count the rows *statement* would return, ignoring its ORDER BY."""
    count_stmt = select(func.count()).select_from(statement.order_by(None).subquery())
    return (await session.exec(count_stmt)).one()


def total_pages(total_count: int, page_size: int) -> int:
    if page_size <= 0 or total_count <= 0:
        return 0
    return math.ceil(total_count / page_size)
