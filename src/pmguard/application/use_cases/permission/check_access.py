"""Check access use case."""

import logging

from pmguard.application.guards import check_access
from pmguard.application.use_cases.permission.snapshot_loader import load_user_snapshot
from pmguard.domain.policies import ADMIN_ROLE_ID
from pmguard.domain.value_objects import EntityType, PermissionAction

logger = logging.getLogger(__name__)


class CheckAccessUseCase:
    """Decide whether a user may perform an action, applying ownership policies."""

    def __init__(self, unit_of_work_factory: type, admin_role_id: str = ADMIN_ROLE_ID) -> None:
        self._uow_factory = unit_of_work_factory
        self._admin_role_id = admin_role_id

    async def execute(
        self,
        user_id: str,
        entity_type: EntityType,
        action: PermissionAction,
        entity_id: str | None = None,
        creator_id: str | None = None,
    ) -> bool:
        async with self._uow_factory() as uow:
            user, snapshot = await load_user_snapshot(uow, user_id, entity_type)

        allowed = check_access(
            user,
            entity_type,
            action,
            entity_id,
            snapshot.overrides,
            snapshot.roles,
            creator_id=creator_id,
            admin_role_id=self._admin_role_id,
        )
        if not allowed:
            logger.debug(
                "Denied %s on %s/%s for user %s",
                action.value,
                entity_type.value,
                entity_id or "*",
                user_id,
            )
        return allowed
