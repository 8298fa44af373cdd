"""Concrete repository implementation for ApiKey backed by SQLAlchemy."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.application.interfaces import ApiKeyRepository
from hausdog.domain.entities import ApiKey
from hausdog.infrastructure.database.models import ApiKeyModel


class SQLAlchemyApiKeyRepository(ApiKeyRepository):
    """Implements the ApiKeyRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ApiKeyModel) -> ApiKey:
        return ApiKey(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            key_hash=model.key_hash,
            last_used_at=model.last_used_at,
            created_at=model.created_at,
        )

    async def get_by_id(self, key_id: str) -> ApiKey | None:
        result = await self._session.get(ApiKeyModel, key_id)
        return self._to_entity(result) if result else None

    async def get_by_hash(self, key_hash: str) -> ApiKey | None:
        stmt = select(ApiKeyModel).where(ApiKeyModel.key_hash == key_hash)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all_for_user(self, user_id: str) -> list[ApiKey]:
        stmt = (
            select(ApiKeyModel)
            .where(ApiKeyModel.user_id == user_id)
            .order_by(ApiKeyModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, api_key: ApiKey) -> ApiKey:
        model = ApiKeyModel(
            id=api_key.id,
            user_id=api_key.user_id,
            name=api_key.name,
            key_hash=api_key.key_hash,
            last_used_at=api_key.last_used_at,
            created_at=api_key.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def mark_used(self, key_id: str, used_at: datetime) -> None:
        model = await self._session.get(ApiKeyModel, key_id)
        if model is not None:
            model.last_used_at = used_at
            await self._session.flush()

    async def delete(self, key_id: str) -> bool:
        model = await self._session.get(ApiKeyModel, key_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
