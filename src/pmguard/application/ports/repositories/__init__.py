"""Repository ports."""

from pmguard.application.ports.repositories.override_repository import (
    OverrideRepository,
)
from pmguard.application.ports.repositories.role_repository import RoleRepository
from pmguard.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "OverrideRepository",
    "RoleRepository",
    "UserRepository",
]
