"""Group permission override repository port."""

from typing import Protocol

from pmguard.domain.entities import GroupPermissionOverride
from pmguard.domain.value_objects import EntityType


class OverrideRepository(Protocol):
    """Port for reading overrides.

    list_for_groups returns overrides in a stable order (oldest first);
    the resolver treats that order as the tie-break between overrides.
    """

    async def get_by_id(self, override_id: str) -> GroupPermissionOverride | None: ...

    async def list_for_groups(
        self,
        group_ids: list[str],
        entity_type: EntityType | None = None,
    ) -> list[GroupPermissionOverride]: ...
