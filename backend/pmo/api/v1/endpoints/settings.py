"""PMO: Settings endpoints. Non-admin roles only see settings flagged is_public."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.setting import SettingCreate, SettingFilters, SettingResponse, SettingUpdate
from pmo.services.setting_service import SettingService

router = APIRouter()


@router.get("", response_model=Page[SettingResponse])
async def list_settings(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(SettingFilters))],
    principal: CurrentPrincipal,
):
    """List settings. Filters: group, is_public, data_type, key (partial match)."""
    return await SettingService.list_page(store, principal, query)


@router.get("/key/{key}", response_model=SettingResponse)
async def get_setting_by_key(key: str, store: StoreDep, principal: CurrentPrincipal):
    return await SettingService.get_by_key(store, principal, key)


@router.post("", response_model=SettingResponse, status_code=status.HTTP_201_CREATED)
async def create_setting(body: SettingCreate, store: StoreDep, principal: CurrentPrincipal):
    """Create setting. setting_key must be unique."""
    return await SettingService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=SettingResponse)
async def get_setting(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await SettingService.get(store, principal, id)


@router.patch("/{id}", response_model=SettingResponse)
async def update_setting(id: UUID, body: SettingUpdate, store: StoreDep, principal: CurrentPrincipal):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await SettingService.update(store, principal, id, changes)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_setting(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await SettingService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
