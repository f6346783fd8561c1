"""PMO: JWT auth middleware: resolves the bearer token into request.state.principal."""
import logging
from typing import Callable
from uuid import UUID

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from pmo.core.permissions import Principal, Role
from pmo.core.security import decode_token

logger = logging.getLogger(__name__)


def resolve_role(payload: dict) -> Role:
    """Superadmin wins, then the strongest listed role; unknown roles get CLIENT."""
    if payload.get("is_superadmin"):
        return Role.ADMIN
    names = list(payload.get("roles") or [])
    if payload.get("role"):
        names.append(payload["role"])
    roles = {Role.parse(name) for name in names if isinstance(name, str)}
    for role in (Role.ADMIN, Role.STAFF, Role.CLIENT):
        if role in roles:
            return role
    return Role.CLIENT


def principal_from_claims(payload: dict | None) -> Principal | None:
    if not payload or payload.get("type", "access") != "access":
        return None
    sub = payload.get("sub")
    if not sub:
        return None
    try:
        principal_id = UUID(str(sub))
    except ValueError:
        logger.warning("Rejected token with non-UUID subject")
        return None
    return Principal(
        id=principal_id,
        email=payload.get("email") or "unknown",
        role=resolve_role(payload),
    )


class JWTAuthMiddleware(BaseHTTPMiddleware):
    """Extract JWT from the Authorization header and populate request.state.principal."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request.state.principal = None

        auth = request.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            token = auth[7:].strip()
            request.state.principal = principal_from_claims(decode_token(token))

        return await call_next(request)
