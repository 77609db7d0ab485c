"""PostgreSQL group permission override repository implementation."""

import logging

from psycopg import AsyncConnection

from pmguard.domain.entities import GroupPermissionOverride
from pmguard.domain.exceptions import ValidationError
from pmguard.domain.value_objects import EntityType, OverrideScope, PartialPermissionSet

logger = logging.getLogger(__name__)

_COLUMNS = "id, group_id, entity_type, scope, specific_entity_ids, permissions"
# Sequence order is the tie-break between conflicting specific overrides:
# the most recently created one is applied last and wins.
_ORDER = "ORDER BY created_at, id"


def _row_to_override(r: tuple) -> GroupPermissionOverride | None:
    try:
        return GroupPermissionOverride(
            id=r[0],
            group_id=r[1],
            entity_type=EntityType(r[2]),
            scope=OverrideScope(r[3]),
            specific_entity_ids=tuple(r[4] or ()),
            permissions=PartialPermissionSet.from_mapping(r[5] or {}),
        )
    except (ValueError, ValidationError) as e:
        logger.warning("Skipping malformed override %s: %s", r[0], e)
        return None


def _rows_to_overrides(rows: list[tuple]) -> list[GroupPermissionOverride]:
    return [o for o in (_row_to_override(r) for r in rows) if o is not None]


class PostgresOverrideRepository:
    """Override repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, override_id: str) -> GroupPermissionOverride | None:
        """Get override by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM group_permission_override WHERE id = %s",
            (override_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_override(r)

    async def list_for_groups(
        self,
        group_ids: list[str],
        entity_type: EntityType | None = None,
    ) -> list[GroupPermissionOverride]:
        """List overrides of the given groups, optionally for one resource kind."""
        if not group_ids:
            return []
        if entity_type is None:
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM group_permission_override "
                f"WHERE group_id = ANY(%s) {_ORDER}",
                (group_ids,),
            )
        else:
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM group_permission_override "
                f"WHERE group_id = ANY(%s) AND entity_type = %s {_ORDER}",
                (group_ids, entity_type.value),
            )
        return _rows_to_overrides(await cur.fetchall())
