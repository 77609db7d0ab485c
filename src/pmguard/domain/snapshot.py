"""Immutable snapshot of the role and override registries."""

from collections.abc import Iterable
from dataclasses import dataclass

from pmguard.domain.entities import GroupPermissionOverride, Role


@dataclass(frozen=True)
class PermissionSnapshot:
    """Consistent view of the registries handed to the resolver.

    Override order is significant: among conflicting specific overrides the
    last one in sequence order wins.
    """

    roles: tuple[Role, ...] = ()
    overrides: tuple[GroupPermissionOverride, ...] = ()

    @classmethod
    def of(
        cls,
        roles: Iterable[Role] = (),
        overrides: Iterable[GroupPermissionOverride] = (),
    ) -> "PermissionSnapshot":
        return cls(roles=tuple(roles), overrides=tuple(overrides))
