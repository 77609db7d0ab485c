"""Project guards and project-scoped group override helpers.

Projects carry no ownership gate. The override helpers are pure: they take
the current override sequence and return a new tuple for the caller to
persist.
"""

from collections.abc import Sequence
from dataclasses import replace

from pmguard.application.guards.access import check_access, entity_permissions
from pmguard.domain.entities import GroupPermissionOverride, Role, User
from pmguard.domain.value_objects import (
    EntityType,
    OverrideScope,
    PartialPermissionSet,
    PermissionAction,
    PermissionSet,
)


def can_create_project(
    user: User | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(user, EntityType.PROJECTS, PermissionAction.CREATE, None, overrides, roles)


def can_view_project(
    user: User | None,
    project_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(
        user, EntityType.PROJECTS, PermissionAction.READ, project_id, overrides, roles
    )


def can_update_project(
    user: User | None,
    project_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(
        user, EntityType.PROJECTS, PermissionAction.UPDATE, project_id, overrides, roles
    )


def can_delete_project(
    user: User | None,
    project_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(
        user, EntityType.PROJECTS, PermissionAction.DELETE, project_id, overrides, roles
    )


def get_project_permissions(
    user: User | None,
    project_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> PermissionSet:
    return entity_permissions(user, EntityType.PROJECTS, project_id, overrides, roles)


def _is_specific_project_override(override: GroupPermissionOverride) -> bool:
    return (
        override.entity_type == EntityType.PROJECTS
        and override.scope is OverrideScope.SPECIFIC
    )


def project_group_overrides(
    project_id: str,
    overrides: Sequence[GroupPermissionOverride],
) -> list[GroupPermissionOverride]:
    """Specific project overrides that name project_id."""
    return [
        o for o in overrides
        if _is_specific_project_override(o) and o.targets(project_id)
    ]


def _find_group_override(
    group_id: str,
    overrides: Sequence[GroupPermissionOverride],
) -> GroupPermissionOverride | None:
    return next(
        (o for o in overrides if o.group_id == group_id and _is_specific_project_override(o)),
        None,
    )


def set_project_group_permissions(
    overrides: Sequence[GroupPermissionOverride],
    project_id: str,
    group_id: str,
    permissions: PartialPermissionSet,
    *,
    new_id: str,
) -> tuple[GroupPermissionOverride, ...]:
    """Grant or restrict a group on one project.

    A group keeps a single specific projects override: if one exists, the
    project is added to its ids and its permissions are replaced. Otherwise a
    new override with id new_id is appended.
    """
    existing = _find_group_override(group_id, overrides)
    if existing is None:
        created = GroupPermissionOverride(
            id=new_id,
            group_id=group_id,
            entity_type=EntityType.PROJECTS,
            scope=OverrideScope.SPECIFIC,
            specific_entity_ids=(project_id,),
            permissions=permissions,
        )
        return (*overrides, created)

    ids = existing.specific_entity_ids
    if project_id not in ids:
        ids = (*ids, project_id)
    updated = replace(existing, specific_entity_ids=ids, permissions=permissions)
    return tuple(updated if o.id == existing.id else o for o in overrides)


def remove_project_group_permissions(
    overrides: Sequence[GroupPermissionOverride],
    project_id: str,
    group_id: str,
) -> tuple[GroupPermissionOverride, ...]:
    """Drop project_id from the group's override, deleting the override once empty."""
    existing = _find_group_override(group_id, overrides)
    if existing is None:
        return tuple(overrides)

    pruned = existing.without_entity_ids([project_id])
    result: list[GroupPermissionOverride] = []
    for o in overrides:
        if o.id != existing.id:
            result.append(o)
        elif pruned is not None:
            result.append(pruned)
    return tuple(result)
