"""Describe override targets use case."""

import logging

from pmguard.application.dto.override_dto import EntityLabel, OverrideTargets
from pmguard.application.ports import EntityNameResolver
from pmguard.domain.exceptions import NotFound
from pmguard.domain.value_objects import OverrideScope

logger = logging.getLogger(__name__)


class DescribeOverrideTargetsUseCase:
    """Label the ids a group override names, flagging ones that no longer exist."""

    def __init__(
        self,
        unit_of_work_factory: type,
        entity_name_resolver: EntityNameResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._names = entity_name_resolver

    async def execute(self, override_id: str) -> OverrideTargets:
        """Raises NotFound for an unknown override. Never prunes stale ids."""
        async with self._uow_factory() as uow:
            override = await uow.overrides.get_by_id(override_id)
        if override is None:
            raise NotFound("Override", override_id)

        targets = OverrideTargets(
            override_id=override.id,
            group_id=override.group_id,
            entity_type=override.entity_type,
            scope=override.scope,
        )
        if override.scope is OverrideScope.ALL:
            return targets

        ids = list(override.specific_entity_ids)
        names = await self._names.get_names(override.entity_type, ids)
        targets.labels = [EntityLabel(entity_id=i, name=names.get(i)) for i in ids]
        if targets.orphaned_ids:
            logger.info(
                "Override %s references %d missing %s",
                override.id,
                len(targets.orphaned_ids),
                override.entity_type.value,
            )
        return targets
