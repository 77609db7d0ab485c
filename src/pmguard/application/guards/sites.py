"""Site guards. Updating and deleting a site is limited to its creator or an admin."""

from collections.abc import Sequence

from pmguard.application.guards.access import check_access, entity_permissions
from pmguard.domain.entities import GroupPermissionOverride, Role, User
from pmguard.domain.policies import ADMIN_ROLE_ID
from pmguard.domain.value_objects import EntityType, PermissionAction, PermissionSet


def can_create_site(
    user: User | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(user, EntityType.SITES, PermissionAction.CREATE, None, overrides, roles)


def can_view_site(
    user: User | None,
    site_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(user, EntityType.SITES, PermissionAction.READ, site_id, overrides, roles)


def can_update_site(
    user: User | None,
    site_id: str,
    creator_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
    *,
    admin_role_id: str = ADMIN_ROLE_ID,
) -> bool:
    """Creator or admin, and the update bit on the site."""
    return check_access(
        user,
        EntityType.SITES,
        PermissionAction.UPDATE,
        site_id,
        overrides,
        roles,
        creator_id=creator_id,
        admin_role_id=admin_role_id,
    )


def can_delete_site(
    user: User | None,
    site_id: str,
    creator_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
    *,
    admin_role_id: str = ADMIN_ROLE_ID,
) -> bool:
    """Creator or admin, and the delete bit on the site."""
    return check_access(
        user,
        EntityType.SITES,
        PermissionAction.DELETE,
        site_id,
        overrides,
        roles,
        creator_id=creator_id,
        admin_role_id=admin_role_id,
    )


def get_site_permissions(
    user: User | None,
    site_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> PermissionSet:
    """Raw resolved bits, without the ownership gate."""
    return entity_permissions(user, EntityType.SITES, site_id, overrides, roles)
