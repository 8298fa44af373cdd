"""Domain entity for personal API keys used by scripts and the CLI."""

import hashlib
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

API_KEY_PREFIX = "hd_"
_API_KEY_BYTES = 32


def generate_api_key() -> str:
    """Return a fresh plain-text key: the prefix plus 32 random bytes, base64url."""
    return API_KEY_PREFIX + secrets.token_urlsafe(_API_KEY_BYTES)


def hash_api_key(key: str) -> str:
    """SHA-256 hex digest; only this digest is ever stored."""
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


@dataclass
class ApiKey:
    """A named key belonging to a user. The plain-text secret is never kept."""

    user_id: str
    name: str
    key_hash: str
    id: str = field(default_factory=lambda: str(uuid4()))
    last_used_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
