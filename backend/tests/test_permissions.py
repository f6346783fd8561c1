"""Tests for the access policy and JWT principal resolution."""
import uuid

import pytest

from helpers import make_principal
from pmo.core import permissions as resources
from pmo.core.auth_middleware import principal_from_claims, resolve_role
from pmo.core.exceptions import AuthenticationError, AuthorizationError
from pmo.core.permissions import Action, ReadScope, Role, authorize, can_see, scope_constraint
from pmo.core.security import create_access_token, decode_token

ALL_RESOURCES = [
    resources.PROJECTS,
    resources.CONSTRUCTION_PROJECTS,
    resources.REPAIR_PROJECTS,
    resources.MILESTONES,
    resources.PHASES,
    resources.CONTRACTORS,
    resources.FUNDING_SOURCES,
    resources.REPAIR_TYPES,
    resources.DOCUMENTS,
    resources.MEDIA,
    resources.SETTINGS,
]


def test_no_principal_is_unauthenticated():
    with pytest.raises(AuthenticationError):
        authorize(None, resources.PROJECTS, Action.READ)


@pytest.mark.parametrize("resource", ALL_RESOURCES)
def test_admin_reads_and_writes_everything(resource):
    admin = make_principal(Role.ADMIN)
    assert authorize(admin, resource, Action.READ) is ReadScope.ALL
    assert authorize(admin, resource, Action.WRITE) is ReadScope.ALL


@pytest.mark.parametrize("resource", ALL_RESOURCES)
def test_client_never_writes(resource):
    with pytest.raises(AuthorizationError):
        authorize(make_principal(Role.CLIENT), resource, Action.WRITE)


@pytest.mark.parametrize(
    "role, resource, scope",
    [
        (Role.STAFF, resources.PROJECTS, ReadScope.ALL),
        (Role.STAFF, resources.CONTRACTORS, ReadScope.ALL),
        (Role.STAFF, resources.SETTINGS, ReadScope.PUBLIC),
        (Role.STAFF, resources.FUNDING_SOURCES, ReadScope.ALL),
        (Role.STAFF, resources.MILESTONES, ReadScope.ALL),
        (Role.CLIENT, resources.PROJECTS, ReadScope.OWNED),
        (Role.CLIENT, resources.REPAIR_PROJECTS, ReadScope.OWNED),
        (Role.CLIENT, resources.SETTINGS, ReadScope.PUBLIC),
    ],
)
def test_read_scopes(role, resource, scope):
    assert authorize(make_principal(role), resource, Action.READ) is scope


@pytest.mark.parametrize(
    "resource",
    [
        resources.CONTRACTORS,
        resources.FUNDING_SOURCES,
        resources.REPAIR_TYPES,
        resources.MILESTONES,
        resources.PHASES,
        resources.DOCUMENTS,
        resources.MEDIA,
    ],
)
def test_client_cannot_read_internal_resources(resource):
    with pytest.raises(AuthorizationError):
        authorize(make_principal(Role.CLIENT), resource, Action.READ)


def test_staff_cannot_write_admin_only_resources():
    staff = make_principal(Role.STAFF)
    for resource in (resources.CONTRACTORS, resources.FUNDING_SOURCES, resources.REPAIR_TYPES, resources.SETTINGS):
        with pytest.raises(AuthorizationError) as exc:
            authorize(staff, resource, Action.WRITE)
        assert f"'{resource}:write'" in exc.value.message
        assert "STAFF" in exc.value.message


def test_scope_constraints():
    principal = make_principal(Role.CLIENT)

    assert scope_constraint(principal, ReadScope.ALL, "client_id", None) is None
    assert scope_constraint(principal, ReadScope.OWNED, "client_id", None) == ("client_id", principal.id)
    assert scope_constraint(principal, ReadScope.PUBLIC, None, "is_public") == ("is_public", True)


def test_scope_without_matching_field_is_refused():
    with pytest.raises(AuthorizationError):
        scope_constraint(make_principal(Role.CLIENT), ReadScope.OWNED, None, None)


def test_can_see_owned_row_with_string_id():
    principal = make_principal(Role.CLIENT)

    assert can_see(principal, ReadScope.OWNED, {"client_id": str(principal.id)}, "client_id", None)
    assert can_see(principal, ReadScope.OWNED, {"client_id": principal.id}, "client_id", None)
    assert not can_see(principal, ReadScope.OWNED, {"client_id": uuid.uuid4()}, "client_id", None)
    assert not can_see(principal, ReadScope.OWNED, {"client_id": None}, "client_id", None)


def test_can_see_public_rows_only():
    principal = make_principal(Role.STAFF)
    assert can_see(principal, ReadScope.PUBLIC, {"is_public": True}, None, "is_public")
    assert not can_see(principal, ReadScope.PUBLIC, {"is_public": False}, None, "is_public")


# ── Role resolution from claims ──────────────────────────────────────────────

@pytest.mark.parametrize(
    "claims, role",
    [
        ({"is_superadmin": True, "roles": ["Client"]}, Role.ADMIN),
        ({"roles": ["Staff"]}, Role.STAFF),
        ({"role": "client"}, Role.CLIENT),
        ({"roles": ["Client", "Admin"]}, Role.ADMIN),
        ({"roles": ["Viewer"]}, Role.CLIENT),
        ({}, Role.CLIENT),
    ],
)
def test_resolve_role(claims, role):
    assert resolve_role(claims) is role


def test_role_parse():
    assert Role.parse(" admin ") is Role.ADMIN
    assert Role.parse("guest") is None
    assert Role.parse(None) is None


def test_principal_from_token():
    user_id = uuid.uuid4()
    token = create_access_token(user_id, "staff@pmo.test", roles=["Staff"])

    principal = principal_from_claims(decode_token(token))

    assert principal.id == user_id
    assert principal.email == "staff@pmo.test"
    assert principal.role is Role.STAFF


def test_non_uuid_subject_has_no_principal():
    assert principal_from_claims({"sub": "user-42", "type": "access"}) is None


def test_non_access_token_has_no_principal():
    assert principal_from_claims({"sub": str(uuid.uuid4()), "type": "refresh"}) is None


def test_garbage_token_does_not_decode():
    assert decode_token("not.a.jwt") is None
