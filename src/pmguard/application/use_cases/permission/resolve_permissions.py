"""Resolve permissions use cases."""

from pmguard.application.use_cases.permission.snapshot_loader import load_user_snapshot
from pmguard.domain.resolver import resolve_all_permissions, resolve_permissions
from pmguard.domain.value_objects import EntityType, PermissionSet


class ResolvePermissionsUseCase:
    """Effective permission set of a user on one resource kind."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        user_id: str,
        entity_type: EntityType,
        entity_id: str | None = None,
    ) -> PermissionSet:
        """Resolve permissions; unknown users get all-false."""
        async with self._uow_factory() as uow:
            user, snapshot = await load_user_snapshot(uow, user_id, entity_type)

        if user is None:
            return PermissionSet.none()
        return resolve_permissions(
            user, entity_type, entity_id, snapshot.overrides, snapshot.roles
        )


class SummarizePermissionsUseCase:
    """Permission summary of a user across every resource kind."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str) -> dict[EntityType, PermissionSet]:
        """Role defaults plus scope="all" overrides for each kind."""
        async with self._uow_factory() as uow:
            user, snapshot = await load_user_snapshot(uow, user_id)

        if user is None:
            return {t: PermissionSet.none() for t in EntityType}
        return resolve_all_permissions(user, snapshot.overrides, snapshot.roles)
