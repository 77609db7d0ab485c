"""Role repository port."""

from typing import Protocol

from pmguard.domain.entities import Role


class RoleRepository(Protocol):
    """Port for reading roles."""

    async def get_by_id(self, role_id: str) -> Role | None: ...
