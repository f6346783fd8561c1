"""PMO: Repair project endpoints."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.project import (
    PhaseCreate,
    PhaseFilters,
    PhaseResponse,
    PhaseUpdate,
    RepairProjectCreate,
    RepairProjectFilters,
    RepairProjectResponse,
    RepairProjectUpdate,
)
from pmo.services.project_service import PhaseService, RepairProjectService

router = APIRouter()


@router.get("", response_model=Page[RepairProjectResponse])
async def list_repair_projects(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(RepairProjectFilters))],
    principal: CurrentPrincipal,
):
    """
    List repair projects.
    Filters: status, urgency, is_emergency, campus, repair_type_id, reported_from / reported_to.
    """
    return await RepairProjectService.list_page(store, principal, query)


@router.post("", response_model=RepairProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_repair_project(body: RepairProjectCreate, store: StoreDep, principal: CurrentPrincipal):
    return await RepairProjectService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=RepairProjectResponse)
async def get_repair_project(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await RepairProjectService.get(store, principal, id)


@router.patch("/{id}", response_model=RepairProjectResponse)
async def update_repair_project(
    id: UUID, body: RepairProjectUpdate, store: StoreDep, principal: CurrentPrincipal
):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await RepairProjectService.update(store, principal, id, changes)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_repair_project(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await RepairProjectService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Phases ───────────────────────────────────────────────────────────────────

@router.get("/{id}/phases", response_model=Page[PhaseResponse])
async def list_phases(
    id: UUID,
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(PhaseFilters))],
    principal: CurrentPrincipal,
):
    """List phases of one repair project. Filter: status."""
    return await PhaseService.list_for(store, principal, id, query)


@router.post("/{id}/phases", response_model=PhaseResponse, status_code=status.HTTP_201_CREATED)
async def create_phase(id: UUID, body: PhaseCreate, store: StoreDep, principal: CurrentPrincipal):
    return await PhaseService.create_for(store, principal, id, body.model_dump())


@router.patch("/{id}/phases/{phase_id}", response_model=PhaseResponse)
async def update_phase(
    id: UUID, phase_id: UUID, body: PhaseUpdate, store: StoreDep, principal: CurrentPrincipal
):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await PhaseService.update_for(store, principal, id, phase_id, changes)


@router.delete("/{id}/phases/{phase_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_phase(id: UUID, phase_id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await PhaseService.delete_for(store, principal, id, phase_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
