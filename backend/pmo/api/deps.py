"""PMO: FastAPI dependencies (store, principal, list query)."""
from typing import Annotated

from fastapi import Depends, Request
from pydantic import BaseModel

from pmo.core.exceptions import AuthenticationError
from pmo.core.permissions import Principal
from pmo.core.query import QueryDescriptor, parse_query
from pmo.stores.base import Store


def get_store(request: Request) -> Store:
    """The store built by the app lifespan."""
    return request.app.state.store


async def get_principal(request: Request) -> Principal | None:
    """Principal from request.state (populated by auth middleware)."""
    return getattr(request.state, "principal", None)


async def require_auth(request: Request) -> Principal:
    """Require authenticated caller. Raise 401 if no valid token."""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise AuthenticationError()
    return principal


def list_query(filters_model: type[BaseModel] | None = None):
    """Dependency factory: bind and validate the raw query string for a listing."""

    async def _parse(request: Request) -> QueryDescriptor:
        return parse_query(dict(request.query_params), filters_model)

    return _parse


StoreDep = Annotated[Store, Depends(get_store)]
CurrentPrincipal = Annotated[Principal, Depends(require_auth)]
