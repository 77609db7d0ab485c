"""Keycloak OIDC provider for bearer token introspection."""

import logging
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class TokenIdentity:
    """Caller identity taken from an active access token."""

    subject: str
    email: str | None
    username: str | None


class KeycloakProvider:
    """Keycloak OIDC - introspects bearer tokens and extracts the subject."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def identify(self, token: str) -> TokenIdentity | None:
        """Return the caller identity, or None for inactive or unverifiable tokens."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None

        subject = token_info.get("sub")
        if not token_info.get("active") or not subject:
            return None
        return TokenIdentity(
            subject=subject,
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
        )
