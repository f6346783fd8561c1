"""PMO: Document metadata endpoints. File upload is handled outside this service."""
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pmo.api.deps import CurrentPrincipal, StoreDep, list_query
from pmo.core.query import QueryDescriptor
from pmo.schemas.common import Page
from pmo.schemas.document import DocumentCreate, DocumentFilters, DocumentResponse, DocumentUpdate
from pmo.services.document_service import DocumentService

router = APIRouter()


@router.get("", response_model=Page[DocumentResponse])
async def list_documents(
    store: StoreDep,
    query: Annotated[QueryDescriptor, Depends(list_query(DocumentFilters))],
    principal: CurrentPrincipal,
):
    """List documents. Filters: documentable_type, documentable_id, document_type, category."""
    return await DocumentService.list_page(store, principal, query)


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(body: DocumentCreate, store: StoreDep, principal: CurrentPrincipal):
    """Register document metadata against an existing owner record."""
    return await DocumentService.create(store, principal, body.model_dump())


@router.get("/{id}", response_model=DocumentResponse)
async def get_document(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    return await DocumentService.get(store, principal, id)


@router.patch("/{id}", response_model=DocumentResponse)
async def update_document(id: UUID, body: DocumentUpdate, store: StoreDep, principal: CurrentPrincipal):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    return await DocumentService.update(store, principal, id, changes)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(id: UUID, store: StoreDep, principal: CurrentPrincipal):
    await DocumentService.delete(store, principal, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
