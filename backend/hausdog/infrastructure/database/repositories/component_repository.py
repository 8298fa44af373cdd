"""Concrete repository implementation for Component backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.application.interfaces import ComponentRepository
from hausdog.domain.entities import Component
from hausdog.infrastructure.database.models import ComponentModel

_COPIED_FIELDS = (
    "name",
    "manufacturer",
    "model",
    "serial_number",
    "install_date",
    "warranty_expires",
    "notes",
)


class SQLAlchemyComponentRepository(ComponentRepository):
    """Implements the ComponentRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ComponentModel) -> Component:
        return Component(
            id=model.id,
            system_id=model.system_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in _COPIED_FIELDS},
        )

    async def get_by_id(self, component_id: str) -> Component | None:
        result = await self._session.get(ComponentModel, component_id)
        return self._to_entity(result) if result else None

    async def get_all_for_system(self, system_id: str) -> list[Component]:
        stmt = (
            select(ComponentModel)
            .where(ComponentModel.system_id == system_id)
            .order_by(ComponentModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, component: Component) -> Component:
        model = ComponentModel(
            id=component.id,
            system_id=component.system_id,
            created_at=component.created_at,
            updated_at=component.updated_at,
            **{name: getattr(component, name) for name in _COPIED_FIELDS},
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, component: Component) -> Component:
        model = await self._session.get(ComponentModel, component.id)
        if model is None:
            raise ValueError(f"Component {component.id} not found in database")
        for name in _COPIED_FIELDS:
            setattr(model, name, getattr(component, name))
        model.updated_at = component.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, component_id: str) -> bool:
        model = await self._session.get(ComponentModel, component_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
