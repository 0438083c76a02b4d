from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from rethinking_econ.api.deps import AdminDep, SessionDep
from rethinking_econ.models.policy import AdvocacyCampaign, CampaignStatus, CaseStudy, Policy, PolicyCategory
from rethinking_econ.schemas.common import DeleteResponse
from rethinking_econ.schemas.policy import (
    AdvocacyCampaignCreate,
    AdvocacyCampaignRead,
    AdvocacyCampaignUpdate,
    CaseStudyCreate,
    CaseStudyRead,
    CaseStudyUpdate,
    PolicyCreate,
    PolicyRead,
    PolicyUpdate,
)
from rethinking_econ.services import policy as policy_service
from rethinking_econ.services.crud import ResourceConflictError

router = APIRouter()

SLUG_CONFLICT = "An entry with this slug already exists"


async def _get_policy_or_404(session: SessionDep, policy_id: int) -> Policy:
    policy = await policy_service.policies.get(session, policy_id)
    if policy is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Policy not found")
    return policy


async def _get_case_study_or_404(session: SessionDep, case_study_id: int) -> CaseStudy:
    case_study = await policy_service.case_studies.get(session, case_study_id)
    if case_study is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Case study not found")
    return case_study


async def _get_campaign_or_404(session: SessionDep, campaign_id: int) -> AdvocacyCampaign:
    campaign = await policy_service.campaigns.get(session, campaign_id)
    if campaign is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campaign not found")
    return campaign


@router.get("/", response_model=List[PolicyRead])
async def list_policies(
    session: SessionDep,
    category: Optional[PolicyCategory] = Query(default=None),
) -> List[Policy]:
    """Policy briefs, most recently published first."""
    return await policy_service.list_policies(session, category)


@router.get("/campaigns", response_model=List[AdvocacyCampaignRead])
async def list_campaigns(
    session: SessionDep,
    campaign_status: Optional[CampaignStatus] = Query(default=None, alias="status"),
) -> List[AdvocacyCampaign]:
    return await policy_service.list_campaigns(session, campaign_status)


@router.get("/campaigns/{campaign_id}", response_model=AdvocacyCampaignRead)
async def get_campaign(campaign_id: int, session: SessionDep) -> AdvocacyCampaign:
    return await _get_campaign_or_404(session, campaign_id)


@router.post("/campaigns", response_model=AdvocacyCampaignRead, status_code=status.HTTP_201_CREATED)
async def create_campaign(
    campaign_in: AdvocacyCampaignCreate,
    session: SessionDep,
    admin: AdminDep,
) -> AdvocacyCampaign:
    campaign = await policy_service.create_campaign(session, campaign_in.model_dump())
    await session.commit()
    await session.refresh(campaign)
    return campaign


@router.patch("/campaigns/{campaign_id}", response_model=AdvocacyCampaignRead)
async def update_campaign(
    campaign_id: int,
    campaign_in: AdvocacyCampaignUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> AdvocacyCampaign:
    """Update a campaign; a supplied achievements list replaces the stored one."""
    campaign = await _get_campaign_or_404(session, campaign_id)
    campaign = await policy_service.update_campaign(
        session, campaign, campaign_in.model_dump(exclude_unset=True)
    )
    await session.commit()
    await session.refresh(campaign)
    return campaign


@router.delete("/campaigns/{campaign_id}", response_model=DeleteResponse)
async def delete_campaign(campaign_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
    campaign = await _get_campaign_or_404(session, campaign_id)
    await policy_service.campaigns.delete(session, campaign)
    await session.commit()
    return DeleteResponse(id=campaign_id)


@router.patch("/case-studies/{case_study_id}", response_model=CaseStudyRead)
async def update_case_study(
    case_study_id: int,
    case_study_in: CaseStudyUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> CaseStudy:
    case_study = await _get_case_study_or_404(session, case_study_id)
    try:
        case_study = await policy_service.update_case_study(
            session, case_study, case_study_in.model_dump(exclude_unset=True)
        )
    except policy_service.AuthorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ResourceConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=SLUG_CONFLICT) from exc
    await session.commit()
    await session.refresh(case_study)
    return case_study


@router.delete("/case-studies/{case_study_id}", response_model=DeleteResponse)
async def delete_case_study(case_study_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
    case_study = await _get_case_study_or_404(session, case_study_id)
    await policy_service.case_studies.delete(session, case_study)
    await session.commit()
    return DeleteResponse(id=case_study_id)


@router.get("/by-slug/{slug}", response_model=PolicyRead)
async def get_policy_by_slug(slug: str, session: SessionDep) -> Policy:
    policy = await policy_service.get_by_slug(session, slug)
    if policy is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Policy not found")
    return policy


@router.get("/{policy_id}", response_model=PolicyRead)
async def get_policy(policy_id: int, session: SessionDep) -> Policy:
    return await _get_policy_or_404(session, policy_id)


@router.post("/", response_model=PolicyRead, status_code=status.HTTP_201_CREATED)
async def create_policy(policy_in: PolicyCreate, session: SessionDep, admin: AdminDep) -> Policy:
    try:
        policy = await policy_service.create_policy(session, policy_in.model_dump())
    except policy_service.AuthorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ResourceConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=SLUG_CONFLICT) from exc
    await session.commit()
    await session.refresh(policy)
    return policy


@router.patch("/{policy_id}", response_model=PolicyRead)
async def update_policy(
    policy_id: int,
    policy_in: PolicyUpdate,
    session: SessionDep,
    admin: AdminDep,
) -> Policy:
    policy = await _get_policy_or_404(session, policy_id)
    try:
        policy = await policy_service.update_policy(session, policy, policy_in.model_dump(exclude_unset=True))
    except policy_service.AuthorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ResourceConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=SLUG_CONFLICT) from exc
    await session.commit()
    await session.refresh(policy)
    return policy


@router.delete("/{policy_id}", response_model=DeleteResponse)
async def delete_policy(policy_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
    """Delete a policy brief and its case studies."""
    policy = await _get_policy_or_404(session, policy_id)
    await policy_service.policies.delete(session, policy)
    await session.commit()
    return DeleteResponse(id=policy_id)


@router.get("/{policy_id}/case-studies", response_model=List[CaseStudyRead])
async def list_case_studies(policy_id: int, session: SessionDep) -> List[CaseStudy]:
    await _get_policy_or_404(session, policy_id)
    return await policy_service.list_case_studies(session, policy_id)


@router.post(
    "/{policy_id}/case-studies",
    response_model=CaseStudyRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_case_study(
    policy_id: int,
    case_study_in: CaseStudyCreate,
    session: SessionDep,
    admin: AdminDep,
) -> CaseStudy:
    await _get_policy_or_404(session, policy_id)
    try:
        case_study = await policy_service.create_case_study(session, policy_id, case_study_in.model_dump())
    except policy_service.AuthorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ResourceConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=SLUG_CONFLICT) from exc
    await session.commit()
    await session.refresh(case_study)
    return case_study
