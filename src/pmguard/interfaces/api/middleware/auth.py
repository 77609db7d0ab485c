"""Auth middleware - resolves the calling user from a bearer token."""

import logging
from dataclasses import dataclass

import falcon.asgi

logger = logging.getLogger(__name__)

DEV_USER_HEADER = "X-User-Id"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user.

    Requests without a valid token get req.context.user = None. When no
    Keycloak provider is configured and trust_dev_header is set, the
    X-User-Id header is taken at face value (local development only).
    """

    def __init__(self, keycloak_provider=None, trust_dev_header: bool = False) -> None:
        self._keycloak = keycloak_provider
        self._trust_dev_header = trust_dev_header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None

        if self._keycloak is None:
            dev_user = req.get_header(DEV_USER_HEADER)
            if self._trust_dev_header and dev_user:
                req.context.user = RequestUser(user_id=dev_user)
            return

        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer "):
            return

        identity = await self._keycloak.identify(auth[7:])
        if identity is None:
            logger.debug("Rejected bearer token for %s %s", req.method, req.path)
            return
        req.context.user = RequestUser(
            user_id=identity.subject,
            email=identity.email,
            username=identity.username,
        )
