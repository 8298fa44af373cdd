"""Concrete repository implementation for Space backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.application.interfaces import SpaceRepository
from hausdog.domain.entities import Space
from hausdog.infrastructure.database.models import SpaceModel, SystemModel


class SQLAlchemySpaceRepository(SpaceRepository):
    """Implements the SpaceRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SpaceModel, item_count: int | None = None) -> Space:
        """Map ORM model → domain entity."""
        return Space(
            id=model.id,
            property_id=model.property_id,
            name=model.name,
            item_count=item_count,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_by_id(self, space_id: str) -> Space | None:
        result = await self._session.get(SpaceModel, space_id)
        return self._to_entity(result) if result else None

    async def get_all_for_property(self, property_id: str) -> list[Space]:
        stmt = (
            select(SpaceModel, func.count(SystemModel.id))
            .outerjoin(SystemModel, SystemModel.space_id == SpaceModel.id)
            .where(SpaceModel.property_id == property_id)
            .group_by(SpaceModel.id)
            .order_by(SpaceModel.name.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model, count) for model, count in result.all()]

    async def create(self, space: Space) -> Space:
        model = SpaceModel(
            id=space.id,
            property_id=space.property_id,
            name=space.name,
            created_at=space.created_at,
            updated_at=space.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, space: Space) -> Space:
        model = await self._session.get(SpaceModel, space.id)
        if model is None:
            raise ValueError(f"Space {space.id} not found in database")
        model.name = space.name
        model.updated_at = space.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, space_id: str) -> bool:
        model = await self._session.get(SpaceModel, space_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
