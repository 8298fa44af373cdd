"""Domain entities for authenticated identities."""

from dataclasses import dataclass


@dataclass
class AuthUser:
    """The identity behind a session, as reported by the identity provider."""

    id: str
    email: str | None = None


@dataclass
class AuthSession:
    """Tokens issued by the identity provider after a successful code exchange."""

    access_token: str
    refresh_token: str
    expires_in: int
    user: AuthUser
