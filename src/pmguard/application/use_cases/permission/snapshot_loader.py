"""Load the registries a permission decision needs in one unit of work."""

import logging

from pmguard.application.ports import UnitOfWork
from pmguard.domain.entities import User
from pmguard.domain.snapshot import PermissionSnapshot
from pmguard.domain.value_objects import EntityType

logger = logging.getLogger(__name__)


async def load_user_snapshot(
    uow: UnitOfWork,
    user_id: str,
    entity_type: EntityType | None = None,
) -> tuple[User | None, PermissionSnapshot]:
    """Fetch user, the user's role and the overrides of the user's groups.

    A missing user or role yields an empty snapshot, which resolves to no access.
    """
    user = await uow.users.get_by_id(user_id)
    if user is None:
        logger.debug("User %s not found, resolving to no access", user_id)
        return None, PermissionSnapshot()

    role = await uow.roles.get_by_id(user.role_id)
    if role is None:
        logger.warning("User %s references unknown role %s", user.id, user.role_id)

    overrides = []
    if user.group_ids:
        overrides = await uow.overrides.list_for_groups(
            sorted(user.group_ids), entity_type=entity_type
        )

    return user, PermissionSnapshot.of(
        roles=[role] if role else [],
        overrides=overrides,
    )
