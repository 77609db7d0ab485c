"""Entity name resolver port - display labels for override screens."""

from typing import Protocol

from pmguard.domain.value_objects import EntityType


class EntityNameResolver(Protocol):
    """Port for looking up human-readable labels of resource instances.

    Used for presentation only. None means the instance no longer exists.
    """

    async def get_name(self, entity_type: EntityType, entity_id: str) -> str | None: ...

    async def get_names(
        self, entity_type: EntityType, entity_ids: list[str]
    ) -> dict[str, str | None]: ...
