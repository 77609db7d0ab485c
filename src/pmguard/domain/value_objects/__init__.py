"""Domain value objects."""

from pmguard.domain.value_objects.entity_type import EntityType
from pmguard.domain.value_objects.override_scope import OverrideScope
from pmguard.domain.value_objects.permission_action import PermissionAction
from pmguard.domain.value_objects.permission_set import (
    PartialPermissionSet,
    PermissionSet,
)

__all__ = [
    "EntityType",
    "OverrideScope",
    "PartialPermissionSet",
    "PermissionAction",
    "PermissionSet",
]
