"""Resource guards - the access checks the host application calls."""

from pmguard.application.guards.access import check_access, entity_permissions

__all__ = [
    "check_access",
    "entity_permissions",
]
