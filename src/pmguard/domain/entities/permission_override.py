"""Group permission override entity."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from pmguard.domain.exceptions import ValidationError
from pmguard.domain.value_objects import (
    EntityType,
    OverrideScope,
    PartialPermissionSet,
)


@dataclass(frozen=True)
class GroupPermissionOverride:
    """Group-scoped adjustment of permissions for one resource kind.

    scope=all applies to every instance of the kind; scope=specific applies
    only to the ids in specific_entity_ids.
    """

    id: str
    group_id: str
    entity_type: EntityType
    scope: OverrideScope
    permissions: PartialPermissionSet = field(default_factory=PartialPermissionSet)
    specific_entity_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "scope", OverrideScope(self.scope))
            object.__setattr__(self, "entity_type", EntityType(self.entity_type))
        except ValueError as e:
            raise ValidationError(f"Override {self.id}: {e}") from None
        if self.scope is OverrideScope.SPECIFIC:
            if not self.specific_entity_ids:
                raise ValidationError(
                    f"Override {self.id} has scope 'specific' but no entity ids"
                )
            object.__setattr__(self, "specific_entity_ids", tuple(self.specific_entity_ids))
        else:
            object.__setattr__(self, "specific_entity_ids", ())

    def targets(self, entity_id: str | None) -> bool:
        """True if this is a specific override naming entity_id."""
        return (
            self.scope is OverrideScope.SPECIFIC
            and entity_id is not None
            and entity_id in self.specific_entity_ids
        )

    def without_entity_ids(self, entity_ids: Iterable[str]) -> "GroupPermissionOverride | None":
        """Copy with the given ids removed from specific_entity_ids.

        Returns None when nothing would be left, since a specific override
        with no ids is invalid. Overrides with scope=all are returned unchanged.
        """
        if self.scope is OverrideScope.ALL:
            return self
        drop = set(entity_ids)
        remaining = tuple(i for i in self.specific_entity_ids if i not in drop)
        if not remaining:
            return None
        return replace(self, specific_entity_ids=remaining)
