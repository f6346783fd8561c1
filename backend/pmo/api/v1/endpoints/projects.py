"""PMO: Project endpoints. GET /projects, POST, GET/{id}, PATCH, DELETE."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.project import ProjectCreate, ProjectFilters, ProjectResponse, ProjectUpdate
from pmo.services.project_service import ProjectService

router = APIRouter()


@router.get("", response_model=Page[ProjectResponse])
async def list_projects(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(ProjectFilters))],
    principal: CurrentPrincipal,
):
    """List projects. Filters: type, status, campus. Clients only see their own projects."""
    return await ProjectService.list_page(store, principal, query)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(body: ProjectCreate, store: StoreDep, principal: CurrentPrincipal):
    """Create project. project_code must be unique."""
    return await ProjectService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=ProjectResponse)
async def get_project(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await ProjectService.get(store, principal, id)


@router.patch("/{id}", response_model=ProjectResponse)
async def update_project(id: UUID, body: ProjectUpdate, store: StoreDep, principal: CurrentPrincipal):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await ProjectService.update(store, principal, id, changes)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await ProjectService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
