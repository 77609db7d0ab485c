"""User repository port."""

from typing import Protocol

from pmguard.domain.entities import User


class UserRepository(Protocol):
    """Port for reading users with their group ids."""

    async def get_by_id(self, user_id: str) -> User | None: ...
