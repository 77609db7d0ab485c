"""Role entity for RBAC."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pmguard.domain.value_objects import EntityType, PermissionSet


@dataclass(frozen=True)
class Role:
    """Role - admin, user, viewer with a default permission set per resource kind."""

    id: str
    name: str
    description: str = ""
    permissions: Mapping[EntityType, PermissionSet] = field(default_factory=dict)
    is_system: bool = False

    def __post_init__(self) -> None:
        # Freeze the map so a role snapshot cannot be edited through a reference.
        object.__setattr__(self, "permissions", MappingProxyType(dict(self.permissions)))

    def defaults_for(self, entity_type: EntityType) -> PermissionSet:
        """Default permissions for a resource kind; all-false when the kind is missing."""
        return self.permissions.get(entity_type, PermissionSet.none())
