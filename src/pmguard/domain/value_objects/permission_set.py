"""CRUD permission sets - total and partial."""

from collections.abc import Mapping
from dataclasses import dataclass, replace

from pmguard.domain.value_objects.permission_action import PermissionAction


@dataclass(frozen=True)
class PermissionSet:
    """Four-bit create/read/update/delete capability tuple."""

    create: bool = False
    read: bool = False
    update: bool = False
    delete: bool = False

    @classmethod
    def none(cls) -> "PermissionSet":
        return cls()

    @classmethod
    def full(cls) -> "PermissionSet":
        return cls(create=True, read=True, update=True, delete=True)

    @classmethod
    def read_only(cls) -> "PermissionSet":
        return cls(read=True)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "PermissionSet":
        """Build from a mapping such as a JSON column. Missing keys are False."""
        return cls(**{a.value: bool(data.get(a.value, False)) for a in PermissionAction})

    def allows(self, action: PermissionAction) -> bool:
        return getattr(self, action.value)

    def with_action(self, action: PermissionAction, granted: bool) -> "PermissionSet":
        return replace(self, **{action.value: granted})

    def to_dict(self) -> dict[str, bool]:
        return {a.value: self.allows(a) for a in PermissionAction}


@dataclass(frozen=True)
class PartialPermissionSet:
    """Sparse permission set used by overrides.

    None means the override is silent on that action.
    """

    create: bool | None = None
    read: bool | None = None
    update: bool | None = None
    delete: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "PartialPermissionSet":
        """Build from a mapping. Absent or null keys stay silent."""
        values: dict[str, bool] = {}
        for action in PermissionAction:
            value = data.get(action.value)
            if value is not None:
                values[action.value] = bool(value)
        return cls(**values)

    def get(self, action: PermissionAction) -> bool | None:
        return getattr(self, action.value)

    @property
    def is_empty(self) -> bool:
        return all(self.get(a) is None for a in PermissionAction)

    def to_dict(self) -> dict[str, bool]:
        """Only the actions this set speaks to."""
        return {a.value: v for a in PermissionAction if (v := self.get(a)) is not None}
