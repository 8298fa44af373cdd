"""Application service for the OAuth-style login flow."""

import logging

from hausdog.application.interfaces import IdentityProvider
from hausdog.domain.entities import AuthSession, AuthUser
from hausdog.domain.exceptions import IdentityProviderError

logger = logging.getLogger(__name__)


class AuthService:
    """Exchanges authorization codes and resolves access tokens to users."""

    def __init__(self, provider: IdentityProvider):
        self._provider = provider

    async def complete_login(
        self, code: str | None, code_verifier: str | None = None
    ) -> AuthSession | None:
        """Exchange the callback code for a session.

        Every failure collapses to None: a missing code, a provider-reported
        error, or any exception raised along the way. There is no retry.
        """
        if not code:
            logger.info("Auth callback without code")
            return None
        try:
            session = await self._provider.exchange_code_for_session(code, code_verifier)
        except IdentityProviderError as e:
            logger.warning(
                "Code exchange failed",
                extra={"provider": e.provider, "status_code": e.status_code, "reason": e.message},
            )
            return None
        except Exception:
            logger.exception("Code exchange raised")
            return None
        logger.info("Code exchange successful", extra={"user_id": session.user.id})
        return session

    async def resolve_user(self, access_token: str) -> AuthUser:
        """Return the user behind access_token.

        Raises:
            IdentityProviderError: If the token is rejected.
        """
        return await self._provider.get_user(access_token)
