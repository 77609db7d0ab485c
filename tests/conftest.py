"""Pytest fixtures for pmguard tests."""

from __future__ import annotations

from contextlib import asynccontextmanager

import pytest

from pmguard.domain.defaults import USER_ROLE_ID, VIEWER_ROLE_ID, system_roles
from pmguard.domain.entities import Group, GroupPermissionOverride, Role, User
from pmguard.domain.policies import ADMIN_ROLE_ID
from pmguard.domain.value_objects import (
    EntityType,
    OverrideScope,
    PartialPermissionSet,
)


# --- Builders ---


def make_override(
    override_id: str,
    group_id: str,
    entity_type: EntityType,
    *,
    entity_ids: tuple[str, ...] = (),
    **permissions: bool,
) -> GroupPermissionOverride:
    """Override with scope "specific" when entity_ids are given, else "all"."""
    return GroupPermissionOverride(
        id=override_id,
        group_id=group_id,
        entity_type=entity_type,
        scope=OverrideScope.SPECIFIC if entity_ids else OverrideScope.ALL,
        specific_entity_ids=entity_ids,
        permissions=PartialPermissionSet(**permissions),
    )


# --- Fake repositories ---


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    def add_user(self, user: User) -> None:
        """Helper to add user for tests."""
        self._by_id[user.id] = user


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Role] = {}

    async def get_by_id(self, role_id: str) -> Role | None:
        return self._by_id.get(role_id)

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role


class FakeOverrideRepository:
    """In-memory override repository. Insertion order is list order."""

    def __init__(self) -> None:
        self._items: list[GroupPermissionOverride] = []

    async def get_by_id(self, override_id: str) -> GroupPermissionOverride | None:
        return next((o for o in self._items if o.id == override_id), None)

    async def list_for_groups(
        self,
        group_ids: list[str],
        entity_type: EntityType | None = None,
    ) -> list[GroupPermissionOverride]:
        return [
            o
            for o in self._items
            if o.group_id in group_ids
            and (entity_type is None or o.entity_type == entity_type)
        ]

    def add_override(self, override: GroupPermissionOverride) -> None:
        """Helper to add override for tests."""
        self._items.append(override)


class FakeEntityNameResolver:
    """In-memory entity name resolver keyed by (entity_type, id)."""

    def __init__(self, names: dict[tuple[EntityType, str], str] | None = None) -> None:
        self._names = dict(names or {})

    async def get_name(self, entity_type: EntityType, entity_id: str) -> str | None:
        return self._names.get((entity_type, entity_id))

    async def get_names(
        self, entity_type: EntityType, entity_ids: list[str]
    ) -> dict[str, str | None]:
        return {i: self._names.get((entity_type, i)) for i in entity_ids}


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.roles = FakeRoleRepository()
        self.overrides = FakeOverrideRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass

    def add_member(self, user: User, group: Group) -> tuple[User, Group]:
        """Add user to group on both sides of the membership; stores the user."""
        user = User(
            id=user.id,
            role_id=user.role_id,
            group_ids=user.group_ids | {group.id},
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )
        group = Group(
            id=group.id,
            name=group.name,
            description=group.description,
            member_ids=group.member_ids | {user.id},
        )
        self.users.add_user(user)
        return user, group


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork for every call."""

    @asynccontextmanager
    async def _factory():
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def roles() -> list[Role]:
    """System roles: Admin, User and Viewer."""
    return system_roles()


@pytest.fixture
def admin() -> User:
    return User(id="user-admin", role_id=ADMIN_ROLE_ID, first_name="Admin", last_name="User")


@pytest.fixture
def member() -> User:
    return User(id="user-1", role_id=USER_ROLE_ID, first_name="Jane", last_name="Doe")


@pytest.fixture
def viewer() -> User:
    return User(id="user-viewer", role_id=VIEWER_ROLE_ID)


@pytest.fixture
def fake_uow(roles) -> FakeUnitOfWork:
    """In-memory UnitOfWork seeded with the system roles."""
    uow = FakeUnitOfWork()
    for role in roles:
        uow.roles.add_role(role)
    return uow


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager with the seeded FakeUnitOfWork."""
    return make_uow_factory(fake_uow)
