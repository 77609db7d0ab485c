"""Unit tests for Keycloak token identification."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from keycloak.exceptions import KeycloakError

from pmguard.infrastructure.auth.keycloak_provider import KeycloakProvider


@pytest.fixture
def provider() -> KeycloakProvider:
    p = KeycloakProvider(server_url="http://keycloak:8080", realm="pm", client_id="pmguard")
    p._keycloak = MagicMock()
    p._keycloak.a_introspect = AsyncMock()
    return p


@pytest.mark.asyncio
async def test_active_token(provider) -> None:
    provider._keycloak.a_introspect.return_value = {
        "active": True,
        "sub": "user-1",
        "email": "jane@example.com",
        "preferred_username": "jane",
    }

    identity = await provider.identify("token")

    assert identity is not None
    assert identity.subject == "user-1"
    assert identity.email == "jane@example.com"
    assert identity.username == "jane"
    provider._keycloak.a_introspect.assert_awaited_once_with("token")
    provider._keycloak.introspect.assert_not_called()


@pytest.mark.asyncio
async def test_inactive_token(provider) -> None:
    provider._keycloak.a_introspect.return_value = {"active": False, "sub": "user-1"}
    assert await provider.identify("token") is None


@pytest.mark.asyncio
async def test_token_without_subject(provider) -> None:
    provider._keycloak.a_introspect.return_value = {"active": True}
    assert await provider.identify("token") is None


@pytest.mark.asyncio
async def test_introspection_error(provider) -> None:
    provider._keycloak.a_introspect.side_effect = KeycloakError("boom")
    assert await provider.identify("token") is None
