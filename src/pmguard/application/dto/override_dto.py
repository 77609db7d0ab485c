"""Override presentation DTOs."""

from dataclasses import dataclass, field

from pmguard.domain.value_objects import EntityType, OverrideScope


@dataclass
class EntityLabel:
    """Display label of one id named by an override."""

    entity_id: str
    name: str | None

    @property
    def orphaned(self) -> bool:
        """The referenced instance no longer exists."""
        return self.name is None


@dataclass
class OverrideTargets:
    """Labels for the ids a specific override names."""

    override_id: str
    group_id: str
    entity_type: EntityType
    scope: OverrideScope
    labels: list[EntityLabel] = field(default_factory=list)

    @property
    def orphaned_ids(self) -> list[str]:
        return [label.entity_id for label in self.labels if label.orphaned]
