"""PMO: Media metadata endpoints."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.document import MediaCreate, MediaFilters, MediaResponse, MediaUpdate
from pmo.services.document_service import MediaService

router = APIRouter()


@router.get("", response_model=Page[MediaResponse])
async def list_media(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(MediaFilters))],
    principal: CurrentPrincipal,
):
    """List media. Filters: mediable_type, mediable_id, media_type, title (partial match)."""
    return await MediaService.list_page(store, principal, query)


@router.post("", response_model=MediaResponse, status_code=status.HTTP_201_CREATED)
async def create_media(body: MediaCreate, store: StoreDep, principal: CurrentPrincipal):
    return await MediaService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=MediaResponse)
async def get_media(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await MediaService.get(store, principal, id)


@router.patch("/{id}", response_model=MediaResponse)
async def update_media(id: UUID, body: MediaUpdate, store: StoreDep, principal: CurrentPrincipal):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await MediaService.update(store, principal, id, changes)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_media(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await MediaService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
