"""Concrete repository implementation for System backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.application.interfaces import SystemRepository
from hausdog.domain.entities import System
from hausdog.infrastructure.database.models import SystemModel

_COPIED_FIELDS = (
    "category_id",
    "space_id",
    "name",
    "manufacturer",
    "model",
    "serial_number",
    "install_date",
    "warranty_expires",
    "notes",
)


class SQLAlchemySystemRepository(SystemRepository):
    """Implements the SystemRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SystemModel) -> System:
        return System(
            id=model.id,
            property_id=model.property_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in _COPIED_FIELDS},
        )

    async def get_by_id(self, system_id: str) -> System | None:
        result = await self._session.get(SystemModel, system_id)
        return self._to_entity(result) if result else None

    async def get_all_for_property(self, property_id: str) -> list[System]:
        stmt = (
            select(SystemModel)
            .where(SystemModel.property_id == property_id)
            .order_by(SystemModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, system: System) -> System:
        model = SystemModel(
            id=system.id,
            property_id=system.property_id,
            created_at=system.created_at,
            updated_at=system.updated_at,
            **{name: getattr(system, name) for name in _COPIED_FIELDS},
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, system: System) -> System:
        model = await self._session.get(SystemModel, system.id)
        if model is None:
            raise ValueError(f"System {system.id} not found in database")
        for name in _COPIED_FIELDS:
            setattr(model, name, getattr(system, name))
        model.updated_at = system.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, system_id: str) -> bool:
        model = await self._session.get(SystemModel, system_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
