"""Per resource kind ownership policies.

Some resource kinds only let the creator of an instance, or an
administrator, perform certain actions. That gate is checked before the
resolver is consulted.
"""

from dataclasses import dataclass, field

from pmguard.domain.value_objects import EntityType, PermissionAction

ADMIN_ROLE_ID = "role-admin"


@dataclass(frozen=True)
class ResourcePolicy:
    """Ownership requirements of a resource kind."""

    entity_type: EntityType
    requires_ownership_for: frozenset[PermissionAction] = field(default_factory=frozenset)

    def requires_ownership(self, action: PermissionAction) -> bool:
        return action in self.requires_ownership_for


_OWNED_MUTATIONS = frozenset({PermissionAction.UPDATE, PermissionAction.DELETE})

RESOURCE_POLICIES: dict[EntityType, ResourcePolicy] = {
    EntityType.SITES: ResourcePolicy(EntityType.SITES, _OWNED_MUTATIONS),
    EntityType.FINANCIALS: ResourcePolicy(EntityType.FINANCIALS, _OWNED_MUTATIONS),
    EntityType.DESIGNS: ResourcePolicy(EntityType.DESIGNS, _OWNED_MUTATIONS),
}


def policy_for(entity_type: EntityType) -> ResourcePolicy:
    """Policy of a resource kind. Unlisted kinds have no ownership gate."""
    return RESOURCE_POLICIES.get(entity_type) or ResourcePolicy(entity_type)


def is_owner_or_admin(
    user_id: str,
    role_id: str,
    creator_id: str | None,
    admin_role_id: str = ADMIN_ROLE_ID,
) -> bool:
    """Creator-or-administrator check. A missing creator id never matches."""
    if role_id == admin_role_id:
        return True
    return creator_id is not None and user_id == creator_id
