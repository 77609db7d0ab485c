"""Domain entities."""

from pmguard.domain.entities.group import Group
from pmguard.domain.entities.permission_override import GroupPermissionOverride
from pmguard.domain.entities.role import Role
from pmguard.domain.entities.user import User

__all__ = [
    "Group",
    "GroupPermissionOverride",
    "Role",
    "User",
]
