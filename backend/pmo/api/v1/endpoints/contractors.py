"""PMO: Contractor endpoints. GET /contractors, POST, GET/{id}, PATCH, PATCH/{id}/status, DELETE."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.contractor import (
    ContractorCreate,
    ContractorFilters,
    ContractorResponse,
    ContractorStatusUpdate,
    ContractorUpdate,
)
from pmo.services.contractor_service import ContractorService

router = APIRouter()


@router.get("", response_model=Page[ContractorResponse])
async def list_contractors(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(ContractorFilters))],
    principal: CurrentPrincipal,
):
    """List contractors. Filters: status, name (partial match)."""
    return await ContractorService.list_page(store, principal, query)


@router.post("", response_model=ContractorResponse, status_code=status.HTTP_201_CREATED)
async def create_contractor(body: ContractorCreate, store: StoreDep, principal: CurrentPrincipal):
    return await ContractorService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=ContractorResponse)
async def get_contractor(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await ContractorService.get(store, principal, id)


@router.patch("/{id}", response_model=ContractorResponse)
async def update_contractor(id: UUID, body: ContractorUpdate, store: StoreDep, principal: CurrentPrincipal):
    """Partial update; omitted fields are left unchanged."""
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await ContractorService.update(store, principal, id, changes)


@router.patch("/{id}/status", response_model=ContractorResponse)
async def update_contractor_status(
    id: UUID, body: ContractorStatusUpdate, store: StoreDep, principal: CurrentPrincipal
):
    """Change contractor status (ACTIVE, SUSPENDED, BLACKLISTED)."""
    return await ContractorService.update_status(store, principal, id, body.status)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contractor(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    """Soft delete."""
    await ContractorService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
