"""Fixtures for API tests."""

import pytest

from pmguard.application.use_cases.permission.check_access import CheckAccessUseCase
from pmguard.application.use_cases.permission.describe_override_targets import (
    DescribeOverrideTargetsUseCase,
)
from pmguard.application.use_cases.permission.resolve_permissions import (
    ResolvePermissionsUseCase,
    SummarizePermissionsUseCase,
)
from pmguard.domain.entities import Group
from pmguard.domain.value_objects import EntityType
from pmguard.interfaces.api.app import create_app
from pmguard.interfaces.api.middleware.auth import AuthMiddleware
from pmguard.interfaces.api.resources.health import HealthResource
from pmguard.interfaces.api.resources.overrides import OverrideTargetsResource
from pmguard.interfaces.api.resources.permissions import (
    AccessChecksResource,
    EffectivePermissionsResource,
    PermissionSummaryResource,
)

from tests.conftest import FakeEntityNameResolver, make_override


@pytest.fixture
def seeded_uow(fake_uow, admin, member, viewer):
    """Fake UoW with one user per system role and a crew group with overrides."""
    fake_uow.users.add_user(admin)
    fake_uow.users.add_user(viewer)
    fake_uow.add_member(member, Group(id="g-crew", name="Field crew"))
    fake_uow.overrides.add_override(
        make_override("o-sites", "g-crew", EntityType.SITES, entity_ids=("site-1", "site-gone"), delete=False)
    )
    return fake_uow


@pytest.fixture
def name_resolver() -> FakeEntityNameResolver:
    return FakeEntityNameResolver({(EntityType.SITES, "site-1"): "North Yard"})


@pytest.fixture
def auth_middleware() -> AuthMiddleware:
    return AuthMiddleware(keycloak_provider=None, trust_dev_header=True)


@pytest.fixture
def app(seeded_uow, uow_factory, name_resolver, auth_middleware):
    """Falcon ASGI app with API resources for testing."""
    check_access = CheckAccessUseCase(unit_of_work_factory=uow_factory)
    describe_targets = DescribeOverrideTargetsUseCase(
        unit_of_work_factory=uow_factory,
        entity_name_resolver=name_resolver,
    )
    return create_app(
        health_resource=HealthResource(),
        permission_summary_resource=PermissionSummaryResource(
            SummarizePermissionsUseCase(unit_of_work_factory=uow_factory)
        ),
        effective_permissions_resource=EffectivePermissionsResource(
            ResolvePermissionsUseCase(unit_of_work_factory=uow_factory)
        ),
        access_checks_resource=AccessChecksResource(check_access),
        override_targets_resource=OverrideTargetsResource(describe_targets, check_access),
        middleware=[auth_middleware],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
