"""PMO: Construction project endpoints."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.project import (
    ConstructionProjectCreate,
    ConstructionProjectFilters,
    ConstructionProjectResponse,
    ConstructionProjectUpdate,
    MilestoneCreate,
    MilestoneFilters,
    MilestoneResponse,
    MilestoneUpdate,
)
from pmo.services.project_service import ConstructionProjectService, MilestoneService

router = APIRouter()


@router.get("", response_model=Page[ConstructionProjectResponse])
async def list_construction_projects(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(ConstructionProjectFilters))],
    principal: CurrentPrincipal,
):
    """
    List construction projects.
    Filters: status, campus, contractor_id, funding_source_id, start_from / start_to (on start_date).
    """
    return await ConstructionProjectService.list_page(store, principal, query)


@router.post("", response_model=ConstructionProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_construction_project(
    body: ConstructionProjectCreate, store: StoreDep, principal: CurrentPrincipal
):
    """Create construction project under an existing project."""
    return await ConstructionProjectService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=ConstructionProjectResponse)
async def get_construction_project(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await ConstructionProjectService.get(store, principal, id)


@router.patch("/{id}", response_model=ConstructionProjectResponse)
async def update_construction_project(
    id: UUID, body: ConstructionProjectUpdate, store: StoreDep, principal: CurrentPrincipal
):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await ConstructionProjectService.update(store, principal, id, changes)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_construction_project(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await ConstructionProjectService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Milestones ───────────────────────────────────────────────────────────────

@router.get("/{id}/milestones", response_model=Page[MilestoneResponse])
async def list_milestones(
    id: UUID,
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(MilestoneFilters))],
    principal: CurrentPrincipal,
):
    """List milestones of one construction project. Filter: status."""
    return await MilestoneService.list_for(store, principal, id, query)


@router.post("/{id}/milestones", response_model=MilestoneResponse, status_code=status.HTTP_201_CREATED)
async def create_milestone(id: UUID, body: MilestoneCreate, store: StoreDep, principal: CurrentPrincipal):
    return await MilestoneService.create_for(store, principal, id, body.model_dump())


@router.patch("/{id}/milestones/{milestone_id}", response_model=MilestoneResponse)
async def update_milestone(
    id: UUID, milestone_id: UUID, body: MilestoneUpdate, store: StoreDep, principal: CurrentPrincipal
):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await MilestoneService.update_for(store, principal, id, milestone_id, changes)


@router.delete("/{id}/milestones/{milestone_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_milestone(id: UUID, milestone_id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await MilestoneService.delete_for(store, principal, id, milestone_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
