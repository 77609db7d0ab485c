"""Unit of Work port - consistent read boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from pmguard.application.ports.repositories import (
    OverrideRepository,
    RoleRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - one transaction across all registries."""

    @property
    def users(self) -> UserRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def overrides(self) -> OverrideRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
