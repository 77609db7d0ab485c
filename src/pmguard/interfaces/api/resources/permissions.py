"""Permission API resources."""

import falcon.asgi

from pmguard.application.use_cases.permission.check_access import CheckAccessUseCase
from pmguard.application.use_cases.permission.resolve_permissions import (
    ResolvePermissionsUseCase,
    SummarizePermissionsUseCase,
)
from pmguard.domain.exceptions import ValidationError
from pmguard.domain.value_objects import EntityType, PermissionAction


class PermissionSummaryResource:
    """GET /v1/permissions - caller's permissions on every resource kind."""

    def __init__(self, summarize_permissions: SummarizePermissionsUseCase) -> None:
        self._summarize = summarize_permissions

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        summary = await self._summarize.execute(user.user_id)
        resp.media = {
            "user_id": user.user_id,
            "items": {kind.value: perms.to_dict() for kind, perms in summary.items()},
        }
        resp.status = falcon.HTTP_200


class EffectivePermissionsResource:
    """GET /v1/permissions/{entity_type}?entity_id= - caller's effective set."""

    def __init__(self, resolve_permissions: ResolvePermissionsUseCase) -> None:
        self._resolve = resolve_permissions

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_type: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            kind = EntityType.parse(entity_type)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        entity_id = req.get_param("entity_id") or None
        perms = await self._resolve.execute(user.user_id, kind, entity_id)
        resp.media = {
            "entity_type": kind.value,
            "label": kind.label,
            "entity_id": entity_id,
            "permissions": perms.to_dict(),
        }
        resp.status = falcon.HTTP_200


class AccessChecksResource:
    """POST /v1/access-checks - may the caller perform an action?"""

    def __init__(self, check_access: CheckAccessUseCase) -> None:
        self._check = check_access

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            kind = EntityType.parse(body["entity_type"])
            action = PermissionAction.parse(body["action"])
            entity_id = body.get("entity_id") or None
            creator_id = body.get("creator_id") or None
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (TypeError, ValidationError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        allowed = await self._check.execute(
            user.user_id, kind, action, entity_id=entity_id, creator_id=creator_id
        )
        resp.media = {
            "entity_type": kind.value,
            "action": action.value,
            "entity_id": entity_id,
            "allowed": allowed,
        }
        resp.status = falcon.HTTP_200
