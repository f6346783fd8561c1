"""PMO: Funding source endpoints (reference data). Staff read, admins write."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.reference import (
    FundingSourceCreate,
    FundingSourceFilters,
    FundingSourceResponse,
    FundingSourceUpdate,
)
from pmo.services.reference_service import FundingSourceService

router = APIRouter()


@router.get("", response_model=Page[FundingSourceResponse])
async def list_funding_sources(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(FundingSourceFilters))],
    principal: CurrentPrincipal,
):
    """List funding sources. Filter: name (partial match)."""
    return await FundingSourceService.list_page(store, principal, query)


@router.post("", response_model=FundingSourceResponse, status_code=status.HTTP_201_CREATED)
async def create_funding_source(body: FundingSourceCreate, store: StoreDep, principal: CurrentPrincipal):
    return await FundingSourceService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=FundingSourceResponse)
async def get_funding_source(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await FundingSourceService.get(store, principal, id)


@router.patch("/{id}", response_model=FundingSourceResponse)
async def update_funding_source(
    id: UUID, body: FundingSourceUpdate, store: StoreDep, principal: CurrentPrincipal
):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await FundingSourceService.update(store, principal, id, changes)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_funding_source(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await FundingSourceService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
