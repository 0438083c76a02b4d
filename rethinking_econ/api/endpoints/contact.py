from typing import List

from fastapi import APIRouter, HTTPException, Request, status

from rethinking_econ.api.deps import AdminDep, SessionDep
from rethinking_econ.core.config import settings
from rethinking_econ.core.rate_limit import limiter
from rethinking_econ.models.contact import ContactSubmission
from rethinking_econ.schemas.common import SuccessResponse
from rethinking_econ.schemas.contact import (
    ContactStatusUpdate,
    ContactSubmissionCreate,
    ContactSubmissionRead,
)
from rethinking_econ.services import contact as contact_service

router = APIRouter()


async def _get_submission_or_404(session: SessionDep, submission_id: int) -> ContactSubmission:
    submission = await contact_service.get_submission(session, submission_id)
    if submission is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Submission not found")
    return submission


@router.post("", response_model=SuccessResponse)
@limiter.limit(settings.CONTACT_RATE_LIMIT)
async def submit_contact_form(
    request: Request,
    submission_in: ContactSubmissionCreate,
    session: SessionDep,
) -> SuccessResponse:
    """Public contact form intake."""
    await contact_service.create_submission(session, submission_in.model_dump())
    await session.commit()
    return SuccessResponse(message="Contact form submitted successfully")


@router.get("/submissions", response_model=List[ContactSubmissionRead])
async def list_submissions(session: SessionDep, admin: AdminDep) -> List[ContactSubmission]:
    return await contact_service.list_submissions(session)


@router.get("/submissions/{submission_id}", response_model=ContactSubmissionRead)
async def get_submission(submission_id: int, session: SessionDep, admin: AdminDep) -> ContactSubmission:
    return await _get_submission_or_404(session, submission_id)


@router.patch("/submissions/{submission_id}/status", response_model=ContactSubmissionRead)
async def update_submission_status(
    submission_id: int,
    status_in: ContactStatusUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> ContactSubmission:
    submission = await _get_submission_or_404(session, submission_id)
    submission = await contact_service.set_status(session, submission, status_in.status)
    await session.commit()
    await session.refresh(submission)
    return submission
