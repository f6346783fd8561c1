"""Principal and token builders shared by the test modules."""
import uuid

from pmo.core.permissions import Principal, Role
from pmo.core.security import create_access_token


def make_principal(role: Role) -> Principal:
    return Principal(id=uuid.uuid4(), email=f"{role.value.lower()}@pmo.test", role=role)


def bearer(principal: Principal) -> dict[str, str]:
    """Authorization header carrying a token for principal's role."""
    token = create_access_token(principal.id, principal.email, roles=[principal.role.value.capitalize()])
    return {"Authorization": f"Bearer {token}"}
