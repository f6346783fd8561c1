"""PMO: Roles, principal and the single read/write access policy.

Every handler goes through authorize(). Collection reads by a restricted
scope get their constraint merged into the store filters before the count
is taken, so meta.total never includes rows the caller cannot see.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any
from uuid import UUID

from pmo.core.exceptions import AuthenticationError, AuthorizationError


class Role(str, Enum):
    ADMIN = "ADMIN"
    STAFF = "STAFF"
    CLIENT = "CLIENT"

    @classmethod
    def parse(cls, value: str | None) -> "Role | None":
        if not value:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class Action(str, Enum):
    READ = "read"
    WRITE = "write"


class ReadScope(str, Enum):
    ALL = "all"
    OWNED = "owned"  # rows whose owner field equals the principal id
    PUBLIC = "public"  # rows whose public flag is true


class Principal:
    """Caller identity from the bearer token, set on request.state by middleware."""

    def __init__(self, id: UUID, email: str, role: Role):
        self.id = id
        self.email = email
        self.role = role

    def __repr__(self) -> str:
        return f"Principal(id={self.id}, role={self.role.value})"


@dataclass(frozen=True)
class Grant:
    read: ReadScope | None = None
    write: bool = False


# ── Resource keys ────────────────────────────────────────────────────────────
PROJECTS = "projects"
CONSTRUCTION_PROJECTS = "construction_projects"
REPAIR_PROJECTS = "repair_projects"
MILESTONES = "construction_milestones"
PHASES = "repair_project_phases"
CONTRACTORS = "contractors"
FUNDING_SOURCES = "funding_sources"
REPAIR_TYPES = "repair_types"
DOCUMENTS = "documents"
MEDIA = "media"
SETTINGS = "settings"

_FULL = Grant(read=ReadScope.ALL, write=True)
_READ_ALL = Grant(read=ReadScope.ALL)
_READ_OWNED = Grant(read=ReadScope.OWNED)
_READ_PUBLIC = Grant(read=ReadScope.PUBLIC)

# ── Role → resource grants ───────────────────────────────────────────────────
PERMISSION_MATRIX: dict[Role, dict[str, Grant]] = {
    Role.ADMIN: {
        PROJECTS: _FULL,
        CONSTRUCTION_PROJECTS: _FULL,
        REPAIR_PROJECTS: _FULL,
        MILESTONES: _FULL,
        PHASES: _FULL,
        CONTRACTORS: _FULL,
        FUNDING_SOURCES: _FULL,
        REPAIR_TYPES: _FULL,
        DOCUMENTS: _FULL,
        MEDIA: _FULL,
        SETTINGS: _FULL,
    },
    Role.STAFF: {
        PROJECTS: _FULL,
        CONSTRUCTION_PROJECTS: _FULL,
        REPAIR_PROJECTS: _FULL,
        MILESTONES: _FULL,
        PHASES: _FULL,
        CONTRACTORS: _READ_ALL,
        FUNDING_SOURCES: _READ_ALL,
        REPAIR_TYPES: _READ_ALL,
        DOCUMENTS: _FULL,
        MEDIA: _FULL,
        SETTINGS: _READ_PUBLIC,
    },
    Role.CLIENT: {
        PROJECTS: _READ_OWNED,
        CONSTRUCTION_PROJECTS: _READ_OWNED,
        REPAIR_PROJECTS: _READ_OWNED,
        SETTINGS: _READ_PUBLIC,
    },
}


def authorize(principal: Principal | None, resource: str, action: Action) -> ReadScope:
    """
    Decide whether principal may perform action on resource.
    Returns the read scope that applies (ALL for writes).
    """
    if principal is None:
        raise AuthenticationError()

    grant = PERMISSION_MATRIX.get(principal.role, {}).get(resource, Grant())
    if action is Action.WRITE:
        if not grant.write:
            raise AuthorizationError(
                f"Permission denied: '{resource}:write' required. Your role: {principal.role.value}"
            )
        return ReadScope.ALL

    if grant.read is None:
        raise AuthorizationError(
            f"Permission denied: '{resource}:read' required. Your role: {principal.role.value}"
        )
    return grant.read


def scope_constraint(
    principal: Principal,
    scope: ReadScope,
    owner_field: str | None,
    public_field: str | None,
) -> tuple[str, Any] | None:
    """(column, required value) pair a restricted scope adds to a collection read."""
    if scope is ReadScope.ALL:
        return None
    if scope is ReadScope.OWNED:
        if owner_field is None:
            raise AuthorizationError("Resource has no owner; scoped read not permitted")
        return owner_field, principal.id
    if public_field is None:
        raise AuthorizationError("Resource has no public flag; scoped read not permitted")
    return public_field, True


def can_see(
    principal: Principal,
    scope: ReadScope,
    item: dict[str, Any],
    owner_field: str | None,
    public_field: str | None,
) -> bool:
    constraint = scope_constraint(principal, scope, owner_field, public_field)
    if constraint is None:
        return True
    column, required = constraint
    return _same(item.get(column), required)


def _same(value: Any, required: Any) -> bool:
    if isinstance(required, UUID) and isinstance(value, str):
        return value == str(required)
    return value == required
