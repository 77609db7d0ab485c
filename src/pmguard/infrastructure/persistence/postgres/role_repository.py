"""PostgreSQL role repository implementation."""

import logging

from psycopg import AsyncConnection

from pmguard.domain.entities import Role
from pmguard.domain.value_objects import EntityType, PermissionSet

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, description, is_system, permissions"


def _row_to_role(r: tuple) -> Role:
    permissions: dict[EntityType, PermissionSet] = {}
    for kind, bits in (r[4] or {}).items():
        try:
            permissions[EntityType(kind)] = PermissionSet.from_mapping(bits)
        except ValueError:
            logger.warning("Role %s has defaults for unknown entity type %r", r[0], kind)
    return Role(
        id=r[0],
        name=r[1],
        description=r[2] or "",
        is_system=r[3],
        permissions=permissions,
    )


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: str) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)
