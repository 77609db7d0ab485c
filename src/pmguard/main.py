"""Application entry point and composition root."""

import logging

import psycopg
from psycopg_pool import PoolTimeout

from pmguard import __version__
from pmguard.application.use_cases.permission.check_access import CheckAccessUseCase
from pmguard.application.use_cases.permission.describe_override_targets import (
    DescribeOverrideTargetsUseCase,
)
from pmguard.application.use_cases.permission.resolve_permissions import (
    ResolvePermissionsUseCase,
    SummarizePermissionsUseCase,
)
from pmguard.config import configure_logging, get_settings
from pmguard.infrastructure.auth.keycloak_provider import KeycloakProvider
from pmguard.infrastructure.naming.postgres_entity_name_resolver import (
    PostgresEntityNameResolver,
)
from pmguard.infrastructure.persistence.postgres.connection import create_pool
from pmguard.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from pmguard.interfaces.api.app import create_app
from pmguard.interfaces.api.middleware.auth import AuthMiddleware
from pmguard.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from pmguard.interfaces.api.resources.health import HealthResource
from pmguard.interfaces.api.resources.overrides import OverrideTargetsResource
from pmguard.interfaces.api.resources.permissions import (
    AccessChecksResource,
    EffectivePermissionsResource,
    PermissionSummaryResource,
)

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"pmguard v{__version__}")


def create_pmguard_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    resolve_permissions = ResolvePermissionsUseCase(unit_of_work_factory=uow_factory)
    summarize_permissions = SummarizePermissionsUseCase(unit_of_work_factory=uow_factory)
    check_access = CheckAccessUseCase(
        unit_of_work_factory=uow_factory,
        admin_role_id=settings.admin_role_id,
    )
    describe_targets = DescribeOverrideTargetsUseCase(
        unit_of_work_factory=uow_factory,
        entity_name_resolver=PostgresEntityNameResolver(pool),
    )

    async def database_ready() -> bool:
        try:
            async with pool.connection() as conn:
                await conn.execute("SELECT 1")
        except (psycopg.Error, PoolTimeout) as e:
            logger.warning("Database not ready: %s", e)
            return False
        return True

    return create_app(
        health_resource=HealthResource(readiness_check=database_ready),
        permission_summary_resource=PermissionSummaryResource(summarize_permissions),
        effective_permissions_resource=EffectivePermissionsResource(resolve_permissions),
        access_checks_resource=AccessChecksResource(check_access),
        override_targets_resource=OverrideTargetsResource(describe_targets, check_access),
        middleware=[
            PoolLifespanMiddleware(pool),
            AuthMiddleware(
                keycloak,
                trust_dev_header=settings.debug and settings.environment == "development",
            ),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_pmguard_app(), host="0.0.0.0", port=8000)
