"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from pmguard.domain.exceptions import NotFound, PermissionDenied
from pmguard.interfaces.api.resources.health import HealthResource
from pmguard.interfaces.api.resources.overrides import OverrideTargetsResource
from pmguard.interfaces.api.resources.permissions import (
    AccessChecksResource,
    EffectivePermissionsResource,
    PermissionSummaryResource,
)

logger = logging.getLogger(__name__)


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


async def _handle_permission_denied(req, resp, ex, params) -> None:
    logger.debug("Permission denied on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_403
    resp.media = {"error": "Permission denied"}


async def _handle_not_found(req, resp, ex, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": str(ex)}


def create_app(
    health_resource: HealthResource,
    permission_summary_resource: PermissionSummaryResource,
    effective_permissions_resource: EffectivePermissionsResource,
    access_checks_resource: AccessChecksResource,
    override_targets_resource: OverrideTargetsResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_error_handler(PermissionDenied, _handle_permission_denied)
    app.add_error_handler(NotFound, _handle_not_found)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/permissions", permission_summary_resource)
    app.add_route("/v1/permissions/{entity_type}", effective_permissions_resource)
    app.add_route("/v1/access-checks", access_checks_resource)
    app.add_route("/v1/overrides/{override_id}/targets", override_targets_resource)
    return app
