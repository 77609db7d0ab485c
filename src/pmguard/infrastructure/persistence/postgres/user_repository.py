"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection

from pmguard.domain.entities import User


class PostgresUserRepository:
    """User repository implementation. Group ids come from group_member."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user with group ids."""
        cur = await self._conn.execute(
            "SELECT u.id, u.role_id, u.first_name, u.last_name, u.email, "
            "COALESCE(array_agg(m.group_id) FILTER (WHERE m.group_id IS NOT NULL), '{}') "
            "FROM app_user u LEFT JOIN group_member m ON m.user_id = u.id "
            "WHERE u.id = %s GROUP BY u.id",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return User(
            id=r[0],
            role_id=r[1],
            first_name=r[2] or "",
            last_name=r[3] or "",
            email=r[4],
            group_ids=frozenset(r[5]),
        )
