"""Effective permission resolution.

Combines a user's role defaults with the overrides of the groups the user
belongs to:

1. Start from the role default for the resource kind (all-false when the
   role or the kind is unknown).
2. Overrides with scope "all" are unioned in per action. They can only turn
   a denied action into a granted one.
3. Overrides with scope "specific" that name the requested entity are then
   applied in sequence order, assigning each present action outright. They
   can grant or revoke, and the last one in sequence order wins.

Both functions are pure: they read their arguments and return new values.
"""

from collections.abc import Sequence

from pmguard.domain.entities import GroupPermissionOverride, Role, User
from pmguard.domain.value_objects import (
    EntityType,
    OverrideScope,
    PermissionAction,
    PermissionSet,
)


def _role_defaults(
    user: User, entity_type: EntityType, roles: Sequence[Role]
) -> PermissionSet:
    role = next((r for r in roles if r.id == user.role_id), None)
    if role is None:
        return PermissionSet.none()
    return role.defaults_for(entity_type)


def resolve_permissions(
    user: User,
    entity_type: EntityType,
    entity_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> PermissionSet:
    """Resolve the effective permission set of user on a resource kind.

    entity_id is only needed to activate scope="specific" overrides.
    """
    base = _role_defaults(user, entity_type, roles)
    if not user.group_ids:
        return base

    applicable = [
        o for o in overrides
        if o.entity_type == entity_type and o.group_id in user.group_ids
    ]
    if not applicable:
        return base

    all_scope = [o for o in applicable if o.scope is OverrideScope.ALL]
    specific = [o for o in applicable if o.targets(entity_id)]

    effective = base.to_dict()
    for action in PermissionAction:
        for override in all_scope:
            granted = override.permissions.get(action)
            if granted is not None:
                effective[action.value] = effective[action.value] or granted

    for action in PermissionAction:
        for override in specific:
            granted = override.permissions.get(action)
            if granted is not None:
                effective[action.value] = granted

    return PermissionSet(**effective)


def resolve_all_permissions(
    user: User,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> dict[EntityType, PermissionSet]:
    """Resolve every resource kind without an entity id.

    Only role defaults and scope="all" overrides contribute, so this is the
    view used for permission summaries.
    """
    return {
        entity_type: resolve_permissions(user, entity_type, None, overrides, roles)
        for entity_type in EntityType
    }
