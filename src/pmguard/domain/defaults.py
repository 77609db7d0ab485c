"""Built-in system roles."""

from pmguard.domain.entities import Role
from pmguard.domain.policies import ADMIN_ROLE_ID
from pmguard.domain.value_objects import EntityType, PermissionSet

USER_ROLE_ID = "role-user"
VIEWER_ROLE_ID = "role-viewer"

_ADMINISTRATIVE = frozenset({EntityType.USER_MANAGEMENT, EntityType.ADMIN_LOGS})


def system_roles() -> list[Role]:
    """Admin, User and Viewer roles with a default for every resource kind."""
    full = PermissionSet.full()
    read_only = PermissionSet.read_only()
    no_access = PermissionSet.none()
    return [
        Role(
            id=ADMIN_ROLE_ID,
            name="Admin",
            description="Full system access",
            permissions={t: full for t in EntityType},
            is_system=True,
        ),
        Role(
            id=USER_ROLE_ID,
            name="User",
            description="Standard user access",
            permissions={t: read_only if t in _ADMINISTRATIVE else full for t in EntityType},
            is_system=True,
        ),
        Role(
            id=VIEWER_ROLE_ID,
            name="Viewer",
            description="Read-only access",
            permissions={t: no_access if t in _ADMINISTRATIVE else read_only for t in EntityType},
            is_system=True,
        ),
    ]
