"""PMO: Repair type endpoints (reference data). Staff read, admins write."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.reference import RepairTypeCreate, RepairTypeFilters, RepairTypeResponse, RepairTypeUpdate
from pmo.services.reference_service import RepairTypeService

router = APIRouter()


@router.get("", response_model=Page[RepairTypeResponse])
async def list_repair_types(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(RepairTypeFilters))],
    principal: CurrentPrincipal,
):
    """List repair types. Filter: name (partial match)."""
    return await RepairTypeService.list_page(store, principal, query)


@router.post("", response_model=RepairTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_repair_type(body: RepairTypeCreate, store: StoreDep, principal: CurrentPrincipal):
    return await RepairTypeService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=RepairTypeResponse)
async def get_repair_type(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await RepairTypeService.get(store, principal, id)


@router.patch("/{id}", response_model=RepairTypeResponse)
async def update_repair_type(id: UUID, body: RepairTypeUpdate, store: StoreDep, principal: CurrentPrincipal):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await RepairTypeService.update(store, principal, id, changes)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_repair_type(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await RepairTypeService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
