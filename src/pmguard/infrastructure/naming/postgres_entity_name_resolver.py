"""PostgreSQL entity name resolver - display labels for override screens."""

import logging

from psycopg_pool import AsyncConnectionPool

from pmguard.domain.value_objects import EntityType

logger = logging.getLogger(__name__)

COMMENT_SNIPPET_LENGTH = 50

# Each query yields (id, label) rows for WHERE id = ANY(ids).
_LABEL_QUERIES: dict[EntityType, str] = {
    EntityType.PROJECTS: (
        "SELECT id, name || COALESCE(' (' || location || ')', '') FROM project"
    ),
    EntityType.NTP_CHECKLISTS: "SELECT id, name FROM ntp_checklist",
    EntityType.WORKFLOWS: "SELECT id, name FROM workflow_stage",
    EntityType.TASKS: (
        "SELECT t.id, p.name || ' > ' || COALESCE(s.name, 'Unknown Stage') || ' > ' || t.title "
        "FROM task t JOIN project p ON p.id = t.project_id "
        "LEFT JOIN workflow_stage s ON s.id = t.stage_id"
    ),
    EntityType.COMMENTS: (
        "SELECT c.id, c.text, c.author, t.title "
        "FROM comment c LEFT JOIN task t ON t.id = c.task_id"
    ),
    EntityType.DOCUMENTS: "SELECT id, name FROM document",
    EntityType.DESIGNS: "SELECT id, name FROM design",
    EntityType.FINANCIALS: "SELECT id, name FROM financial_model",
    EntityType.COMPONENTS: "SELECT id, name FROM component",
    EntityType.BOQS: "SELECT id, name FROM boq",
    EntityType.SITES: "SELECT id, name FROM site",
}

# Queries that join tables filter on an aliased id column.
_ID_ALIASES: dict[EntityType, str] = {
    EntityType.TASKS: "t.",
    EntityType.COMMENTS: "c.",
}


def _comment_label(text: str, author: str | None, task_title: str | None = None) -> str:
    snippet = text if len(text) <= COMMENT_SNIPPET_LENGTH else text[:COMMENT_SNIPPET_LENGTH] + "..."
    label = f'"{snippet}" - {author or "unknown"}'
    return f"{label} (on: {task_title})" if task_title else label


class PostgresEntityNameResolver:
    """Looks labels up in the host application's resource tables.

    Resource kinds without addressable instances (user management, admin
    logs) always resolve to None, as do ids whose row is gone.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def get_name(self, entity_type: EntityType, entity_id: str) -> str | None:
        names = await self.get_names(entity_type, [entity_id])
        return names.get(entity_id)

    async def get_names(
        self, entity_type: EntityType, entity_ids: list[str]
    ) -> dict[str, str | None]:
        names: dict[str, str | None] = dict.fromkeys(entity_ids)
        query = _LABEL_QUERIES.get(entity_type)
        if query is None or not entity_ids:
            return names

        alias = _ID_ALIASES.get(entity_type, "")
        where = f" WHERE {alias}id = ANY(%s)"
        async with self._pool.connection() as conn:
            cur = await conn.execute(query + where, (entity_ids,))
            rows = await cur.fetchall()

        for r in rows:
            if entity_type is EntityType.COMMENTS:
                names[r[0]] = _comment_label(r[1], r[2], r[3])
            else:
                names[r[0]] = r[1]
        logger.debug(
            "Resolved %d of %d %s names",
            sum(1 for n in names.values() if n is not None),
            len(entity_ids),
            entity_type.value,
        )
        return names
