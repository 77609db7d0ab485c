"""Override presentation resources."""

import falcon.asgi

from pmguard.application.use_cases.permission.check_access import CheckAccessUseCase
from pmguard.application.use_cases.permission.describe_override_targets import (
    DescribeOverrideTargetsUseCase,
)
from pmguard.domain.exceptions import PermissionDenied
from pmguard.domain.value_objects import EntityType, PermissionAction


class OverrideTargetsResource:
    """GET /v1/overrides/{override_id}/targets - labels of the ids an override names.

    Restricted to callers who can read user management, since these screens
    belong to permission administration.
    """

    def __init__(
        self,
        describe_targets: DescribeOverrideTargetsUseCase,
        check_access: CheckAccessUseCase,
    ) -> None:
        self._describe = describe_targets
        self._check = check_access

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        override_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        allowed = await self._check.execute(
            user.user_id, EntityType.USER_MANAGEMENT, PermissionAction.READ
        )
        if not allowed:
            raise PermissionDenied("Reading override targets requires user_management read")

        targets = await self._describe.execute(override_id)

        resp.media = {
            "override_id": targets.override_id,
            "group_id": targets.group_id,
            "entity_type": targets.entity_type.value,
            "scope": targets.scope.value,
            "items": [
                {"entity_id": t.entity_id, "name": t.name, "orphaned": t.orphaned}
                for t in targets.labels
            ],
            "orphaned_ids": targets.orphaned_ids,
        }
        resp.status = falcon.HTTP_200
