"""Abstract identity provider interface — port for OAuth-style auth services."""

from abc import ABC, abstractmethod

from hausdog.domain.entities import AuthSession, AuthUser


class IdentityProvider(ABC):
    """Port — defines what the application layer needs from an identity provider."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'supabase')."""
        ...

    @abstractmethod
    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None = None
    ) -> AuthSession:
        """Trade an authorization code for a session.

        Raises:
            IdentityProviderError: If the provider rejects the code.
        """
        ...

    @abstractmethod
    async def get_user(self, access_token: str) -> AuthUser:
        """Resolve the user behind an access token.

        Raises:
            IdentityProviderError: If the token is invalid or expired.
        """
        ...
