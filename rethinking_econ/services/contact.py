from __future__ import annotations

import logging
from typing import Any, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.models.common import utcnow
from rethinking_econ.models.contact import ContactStatus, ContactSubmission

logger = logging.getLogger(__name__)


async def create_submission(session: AsyncSession, data: dict[str, Any]) -> ContactSubmission:
    submission = ContactSubmission(**data, status=ContactStatus.new)
    session.add(submission)
    await session.flush()
    logger.info(
        "Contact submission %s received (%s)",
        submission.id,
        submission.inquiry_type.value,
    )
    return submission


async def list_submissions(session: AsyncSession) -> list[ContactSubmission]:
    stmt = select(ContactSubmission).order_by(
        ContactSubmission.created_at.desc(), ContactSubmission.id.desc()
    )
    result = await session.exec(stmt)
    return list(result.all())


async def get_submission(session: AsyncSession, submission_id: int) -> Optional[ContactSubmission]:
    return await session.get(ContactSubmission, submission_id)


async def set_status(
    session: AsyncSession, submission: ContactSubmission, status: ContactStatus
) -> ContactSubmission:
    """Any status may follow any other; triage is not forward-only."""
    submission.status = status
    submission.updated_at = utcnow()
    session.add(submission)
    await session.flush()
    return submission
