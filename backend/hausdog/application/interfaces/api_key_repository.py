"""Abstract repository interface (port) for ApiKey persistence."""

from abc import ABC, abstractmethod
from datetime import datetime

from hausdog.domain.entities import ApiKey


class ApiKeyRepository(ABC):
    """Port for API key persistence — keys are looked up by their hash only."""

    @abstractmethod
    async def get_by_id(self, key_id: str) -> ApiKey | None:
        ...

    @abstractmethod
    async def get_by_hash(self, key_hash: str) -> ApiKey | None:
        ...

    @abstractmethod
    async def get_all_for_user(self, user_id: str) -> list[ApiKey]:
        """A user's keys, newest first."""
        ...

    @abstractmethod
    async def create(self, api_key: ApiKey) -> ApiKey:
        ...

    @abstractmethod
    async def mark_used(self, key_id: str, used_at: datetime) -> None:
        """Record the time a key last authenticated a request."""
        ...

    @abstractmethod
    async def delete(self, key_id: str) -> bool:
        """Delete a key. Returns True if deleted, False if not found."""
        ...
