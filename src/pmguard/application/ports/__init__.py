"""Application ports - interfaces for external adapters."""

from pmguard.application.ports.entity_name_resolver import EntityNameResolver
from pmguard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "EntityNameResolver",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
