"""Unit tests for Postgres row to entity mapping and override queries."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pmguard.infrastructure.persistence.postgres.override_repository import (
    PostgresOverrideRepository,
    _row_to_override,
    _rows_to_overrides,
)
from pmguard.infrastructure.persistence.postgres.role_repository import _row_to_role
from pmguard.domain.value_objects import (
    EntityType,
    OverrideScope,
    PartialPermissionSet,
    PermissionSet,
)


class TestRowToRole:
    def test_maps_jsonb_permissions(self) -> None:
        row = ("role-viewer", "Viewer", None, True, {"projects": {"read": True}})

        role = _row_to_role(row)

        assert role.is_system is True
        assert role.description == ""
        assert role.defaults_for(EntityType.PROJECTS) == PermissionSet.read_only()
        assert role.defaults_for(EntityType.SITES) == PermissionSet.none()

    def test_skips_unknown_kinds(self) -> None:
        row = ("r", "R", "", False, {"spaceships": {"read": True}, "sites": {"create": True}})

        role = _row_to_role(row)

        assert set(role.permissions) == {EntityType.SITES}

    def test_null_permissions(self) -> None:
        assert dict(_row_to_role(("r", "R", "", False, None)).permissions) == {}


class TestRowToOverride:
    def test_specific_override(self) -> None:
        row = ("o1", "g1", "sites", "specific", ["s-1", "s-2"], {"update": False, "read": None})

        override = _row_to_override(row)

        assert override is not None
        assert override.scope is OverrideScope.SPECIFIC
        assert override.specific_entity_ids == ("s-1", "s-2")
        assert override.permissions == PartialPermissionSet(update=False)

    def test_all_override_with_null_ids(self) -> None:
        override = _row_to_override(("o1", "g1", "tasks", "all", None, {"create": True}))

        assert override is not None
        assert override.specific_entity_ids == ()

    def test_malformed_rows_are_skipped(self) -> None:
        rows = [
            ("o1", "g1", "spaceships", "all", None, {}),
            ("o2", "g1", "sites", "everywhere", None, {}),
            ("o3", "g1", "sites", "specific", [], {"read": True}),
            ("o4", "g1", "sites", "all", None, {"read": True}),
        ]

        assert [o.id for o in _rows_to_overrides(rows)] == ["o4"]


def _conn_returning(rows: list[tuple]) -> MagicMock:
    cur = MagicMock()
    cur.fetchall = AsyncMock(return_value=rows)
    conn = MagicMock()
    conn.execute = AsyncMock(return_value=cur)
    return conn


class TestListForGroups:
    """Overrides come back oldest first; the resolver lets the last one win."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity_type", [None, EntityType.SITES])
    async def test_orders_by_creation_then_id(self, entity_type) -> None:
        conn = _conn_returning([])

        await PostgresOverrideRepository(conn).list_for_groups(["g1"], entity_type=entity_type)

        query = conn.execute.await_args.args[0]
        assert query.endswith("ORDER BY created_at, id")

    @pytest.mark.asyncio
    async def test_keeps_row_order(self) -> None:
        conn = _conn_returning([
            ("o-old", "g1", "sites", "specific", ["s-1"], {"update": True}),
            ("o-new", "g2", "sites", "specific", ["s-1"], {"update": False}),
        ])

        overrides = await PostgresOverrideRepository(conn).list_for_groups(["g1", "g2"])

        assert [o.id for o in overrides] == ["o-old", "o-new"]

    @pytest.mark.asyncio
    async def test_no_groups_skips_query(self) -> None:
        conn = _conn_returning([])

        assert await PostgresOverrideRepository(conn).list_for_groups([]) == []
        conn.execute.assert_not_awaited()
