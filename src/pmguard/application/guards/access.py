"""Policy-driven access checks shared by the resource guard modules.

Every guard collapses to a boolean: a missing user, a failed ownership gate
and a missing permission bit all read as False.
"""

from collections.abc import Sequence

from pmguard.domain.entities import GroupPermissionOverride, Role, User
from pmguard.domain.policies import ADMIN_ROLE_ID, is_owner_or_admin, policy_for
from pmguard.domain.resolver import resolve_permissions
from pmguard.domain.value_objects import EntityType, PermissionAction, PermissionSet


def check_access(
    user: User | None,
    entity_type: EntityType,
    action: PermissionAction,
    entity_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
    *,
    creator_id: str | None = None,
    admin_role_id: str = ADMIN_ROLE_ID,
) -> bool:
    """Check whether user may perform action on a resource kind or instance.

    When the kind's policy gates the action on ownership, non-creators who
    are not administrators are denied without consulting the resolver.
    """
    if user is None:
        return False

    if policy_for(entity_type).requires_ownership(action):
        if not is_owner_or_admin(user.id, user.role_id, creator_id, admin_role_id):
            return False

    return resolve_permissions(user, entity_type, entity_id, overrides, roles).allows(action)


def entity_permissions(
    user: User | None,
    entity_type: EntityType,
    entity_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> PermissionSet:
    """Resolved permission set, or all-false without a user."""
    if user is None:
        return PermissionSet.none()
    return resolve_permissions(user, entity_type, entity_id, overrides, roles)
