"""Financial model guards. Only the creator or an admin may update or delete a model."""

from collections.abc import Sequence

from pmguard.application.guards.access import check_access, entity_permissions
from pmguard.domain.entities import GroupPermissionOverride, Role, User
from pmguard.domain.policies import ADMIN_ROLE_ID
from pmguard.domain.value_objects import EntityType, PermissionAction, PermissionSet


def can_create_financial_model(
    user: User | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(
        user, EntityType.FINANCIALS, PermissionAction.CREATE, None, overrides, roles
    )


def can_view_financial_model(
    user: User | None,
    model_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(
        user, EntityType.FINANCIALS, PermissionAction.READ, model_id, overrides, roles
    )


def can_update_financial_model(
    user: User | None,
    model_id: str,
    creator_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
    *,
    admin_role_id: str = ADMIN_ROLE_ID,
) -> bool:
    return check_access(
        user,
        EntityType.FINANCIALS,
        PermissionAction.UPDATE,
        model_id,
        overrides,
        roles,
        creator_id=creator_id,
        admin_role_id=admin_role_id,
    )


def can_delete_financial_model(
    user: User | None,
    model_id: str,
    creator_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
    *,
    admin_role_id: str = ADMIN_ROLE_ID,
) -> bool:
    return check_access(
        user,
        EntityType.FINANCIALS,
        PermissionAction.DELETE,
        model_id,
        overrides,
        roles,
        creator_id=creator_id,
        admin_role_id=admin_role_id,
    )


def get_financial_model_permissions(
    user: User | None,
    model_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> PermissionSet:
    return entity_permissions(user, EntityType.FINANCIALS, model_id, overrides, roles)
