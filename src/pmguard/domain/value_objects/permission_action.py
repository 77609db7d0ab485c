"""CRUD actions a permission set can grant."""

from enum import StrEnum

from pmguard.domain.exceptions import ValidationError


class PermissionAction(StrEnum):
    """Actions that can be performed on a resource kind."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: str) -> "PermissionAction":
        """Parse action name, raising ValidationError for unknown values."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown permission action: {value!r}") from None
