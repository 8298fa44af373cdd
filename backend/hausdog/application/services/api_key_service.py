"""Application service for personal API keys."""

import logging
from datetime import datetime, timezone

from hausdog.application.interfaces import ApiKeyRepository
from hausdog.application.schemas import ApiKeyCreate
from hausdog.domain.entities import API_KEY_PREFIX, ApiKey, generate_api_key, hash_api_key
from hausdog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ApiKeyService:
    """Issues, validates and revokes API keys. Only hashes are persisted."""

    def __init__(self, repository: ApiKeyRepository):
        self._repository = repository

    async def create_key(self, user_id: str, data: ApiKeyCreate) -> tuple[ApiKey, str]:
        """Create a key and return it with its plain-text secret.

        The secret cannot be recovered afterwards.
        """
        logger.info("Creating API key", extra={"user_id": user_id, "key_name": data.name})
        secret = generate_api_key()
        api_key = await self._repository.create(
            ApiKey(user_id=user_id, name=data.name, key_hash=hash_api_key(secret))
        )
        return api_key, secret

    async def validate(self, key: str) -> ApiKey | None:
        """Return the key record for a presented secret, or None if unknown.

        A successful validation records the time of use.
        """
        if not key.startswith(API_KEY_PREFIX):
            logger.debug("Invalid API key format")
            return None
        api_key = await self._repository.get_by_hash(hash_api_key(key))
        if api_key is None:
            logger.debug("API key not found")
            return None
        api_key.last_used_at = datetime.now(timezone.utc)
        await self._repository.mark_used(api_key.id, api_key.last_used_at)
        logger.debug("API key validated", extra={"key_id": api_key.id, "user_id": api_key.user_id})
        return api_key

    async def list_keys(self, user_id: str) -> list[ApiKey]:
        logger.debug("Finding all API keys for user", extra={"user_id": user_id})
        return await self._repository.get_all_for_user(user_id)

    async def delete_key(self, key_id: str, user_id: str) -> bool:
        api_key = await self._repository.get_by_id(key_id)
        if api_key is None or api_key.user_id != user_id:
            raise EntityNotFoundError("ApiKey", key_id)
        logger.info("Deleting API key", extra={"key_id": key_id, "user_id": user_id})
        return await self._repository.delete(key_id)
