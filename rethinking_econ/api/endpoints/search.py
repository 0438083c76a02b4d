from fastapi import APIRouter, Query

from rethinking_econ.api.deps import SessionDep
from rethinking_econ.schemas.search import SearchResponse, SearchType
from rethinking_econ.services import search as search_service

router = APIRouter()


@router.get("", response_model=SearchResponse)
async def search(
    session: SessionDep,
    q: str = Query(..., min_length=1, max_length=100),
    search_type: SearchType = Query(default=SearchType.all, alias="type"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=50),
) -> SearchResponse:
    """Case-insensitive substring search across the public site."""
    return await search_service.search(session, q, search_type=search_type, page=page, limit=limit)
