"""Router factory for tables that only need plain admin-guarded CRUD.

The handlers' annotations reference the schemas passed in, so this module
must not use postponed annotation evaluation.
"""

from enum import Enum
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from rethinking_econ.api.deps import AdminDep, SessionDep
from rethinking_econ.schemas.common import DeleteResponse
from rethinking_econ.services.crud import ResourceConflictError, ResourceInUseError, ResourceService


def build_crud_router(
    service: ResourceService,
    *,
    read_schema: type[BaseModel],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    label: str,
    filter_field: Optional[str] = None,
    filter_type: Optional[type[Enum]] = None,
) -> APIRouter:
    """Build list/get (public) and create/update/delete (admin) routes.

    ``filter_field`` exposes an optional equality filter on one enum column
    as a query parameter of the same name.
    """
    router = APIRouter()

    async def _get_or_404(session: SessionDep, item_id: int) -> Any:
        item = await service.get(session, item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
        return item

    if filter_field is not None and filter_type is not None:

        @router.get("/", response_model=List[read_schema])
        async def list_items(
            session: SessionDep,
            filter_value: Optional[filter_type] = Query(default=None, alias=filter_field),
        ) -> List[Any]:
            return await service.list(session, **{filter_field: filter_value})

    else:

        @router.get("/", response_model=List[read_schema])
        async def list_items(session: SessionDep) -> List[Any]:
            return await service.list(session)

    @router.get("/{item_id}", response_model=read_schema)
    async def get_item(item_id: int, session: SessionDep) -> Any:
        return await _get_or_404(session, item_id)

    @router.post("/", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    async def create_item(item_in: create_schema, session: SessionDep, admin: AdminDep) -> Any:
        try:
            item = await service.create(session, item_in.model_dump())
        except ResourceConflictError as exc:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
        await session.commit()
        await session.refresh(item)
        return item

    @router.patch("/{item_id}", response_model=read_schema)
    async def update_item(
        item_id: int,
        item_in: update_schema,
        session: SessionDep,
        admin: AdminDep,
    ) -> Any:
        item = await _get_or_404(session, item_id)
        try:
            item = await service.update(session, item, item_in.model_dump(exclude_unset=True))
        except ResourceConflictError as exc:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
        await session.commit()
        await session.refresh(item)
        return item

    @router.delete("/{item_id}", response_model=DeleteResponse)
    async def delete_item(item_id: int, session: SessionDep, admin: AdminDep) -> DeleteResponse:
        item = await _get_or_404(session, item_id)
        try:
            await service.delete(session, item)
        except ResourceInUseError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        await session.commit()
        return DeleteResponse(id=item_id)

    return router
