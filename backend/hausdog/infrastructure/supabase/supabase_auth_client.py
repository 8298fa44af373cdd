"""Supabase Auth client — implements the IdentityProvider interface.

Talks to the GoTrue REST API exposed at ``{SUPABASE_URL}/auth/v1`` using
httpx. Only the two calls the backend needs are covered: the PKCE code
exchange and user lookup.
"""

import logging
from urllib.parse import urlsplit

import httpx

from hausdog.application.interfaces import IdentityProvider
from hausdog.domain.entities import AuthSession, AuthUser
from hausdog.domain.exceptions import IdentityProviderError

logger = logging.getLogger(__name__)


def code_verifier_cookie_name(supabase_url: str) -> str:
    """Name of the cookie the browser client stores the PKCE verifier under.

    The project ref is the first label of the Supabase host, e.g.
    ``https://abcd.supabase.co`` → ``sb-abcd-auth-token-code-verifier``.
    """
    host = urlsplit(supabase_url).hostname or ""
    project_ref = host.split(".")[0]
    return f"sb-{project_ref}-auth-token-code-verifier"


class SupabaseAuthClient(IdentityProvider):
    """Infrastructure adapter — connects to Supabase Auth."""

    def __init__(
        self,
        supabase_url: str,
        api_key: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = f"{supabase_url.rstrip('/')}/auth/v1"
        self._api_key = api_key
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "supabase"

    def _get_headers(self, access_token: str | None = None) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {access_token or self._api_key}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=30.0)

    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None = None
    ) -> AuthSession:
        payload: dict[str, str] = {"auth_code": code}
        if code_verifier is not None:
            payload["code_verifier"] = code_verifier

        client = await self._get_client()
        should_close = self._http_client is None
        try:
            response = await client.post(
                f"{self._base_url}/token",
                params={"grant_type": "pkce"},
                headers=self._get_headers(),
                json=payload,
            )
            if not response.is_success:
                self._raise_provider_error(response)
            data = response.json()
        finally:
            if should_close:
                await client.aclose()

        user = self._parse_user(data.get("user") or {})
        logger.info("Exchanged auth code for session", extra={"user_id": user.id})
        return AuthSession(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token", ""),
            expires_in=int(data.get("expires_in", 3600)),
            user=user,
        )

    async def get_user(self, access_token: str) -> AuthUser:
        client = await self._get_client()
        should_close = self._http_client is None
        try:
            response = await client.get(
                f"{self._base_url}/user",
                headers=self._get_headers(access_token),
            )
            if not response.is_success:
                self._raise_provider_error(response)
            return self._parse_user(response.json())
        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_user(data: dict) -> AuthUser:
        return AuthUser(id=str(data.get("id", "")), email=data.get("email"))

    def _raise_provider_error(self, response: httpx.Response) -> None:
        """Raise IdentityProviderError from a non-200 httpx Response."""
        try:
            data = response.json()
            message = (
                data.get("error_description")
                or data.get("msg")
                or data.get("message")
                or data.get("error")
                or response.text
            )
        except ValueError:
            message = response.text

        raise IdentityProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=str(message),
        )
