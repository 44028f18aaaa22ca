"""
Role guards.

Guards run after the authorization gate and check the role of the
`AuthIdentity` it resolved. Invoking a guard without an identity means a
route was composed without the gate, which is a programming error.
"""
from typing import Dict, FrozenSet, Optional

from apps.core.errors import Forbidden
from .dtos import AuthIdentity
from .models import EmployeeRole


class Permissions:
    TASKS_VIEW_ALL = "tasks.view_all"


# Static Role -> Permission Mapping; every role must have an entry
ROLE_PERMISSIONS: Dict[str, FrozenSet[str]] = {
    EmployeeRole.ADMIN: frozenset({Permissions.TASKS_VIEW_ALL}),
    EmployeeRole.MANAGER: frozenset({Permissions.TASKS_VIEW_ALL}),
    EmployeeRole.USER: frozenset(),
}


def get_role_permissions(role: str) -> FrozenSet[str]:
    """
    Returns the permissions granted to a role.

    Raises ValueError for a role outside EmployeeRole.
    """
    return ROLE_PERMISSIONS[EmployeeRole(role)]


def _require_identity(identity: Optional[AuthIdentity]) -> AuthIdentity:
    if identity is None:
        raise RuntimeError("Role guard invoked without an authenticated identity")
    return identity


def require_admin(identity: Optional[AuthIdentity]) -> AuthIdentity:
    identity = _require_identity(identity)
    if EmployeeRole(identity.role) != EmployeeRole.ADMIN:
        raise Forbidden("Admin access required")
    return identity


def require_manager_or_admin(identity: Optional[AuthIdentity]) -> AuthIdentity:
    identity = _require_identity(identity)
    if EmployeeRole(identity.role) not in (EmployeeRole.MANAGER, EmployeeRole.ADMIN):
        raise Forbidden("Manager or Admin access required")
    return identity


def can_view_all_tasks(identity: AuthIdentity) -> bool:
    return Permissions.TASKS_VIEW_ALL in get_role_permissions(identity.role)
