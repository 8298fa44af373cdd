"""Concrete repository implementation for MaintenanceTask backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.application.interfaces import MaintenanceTaskRepository
from hausdog.domain.entities import STATUS_ACTIVE, STATUS_DISMISSED, MaintenanceTask
from hausdog.infrastructure.database.models import MaintenanceTaskModel

_COPIED_FIELDS = (
    "system_id",
    "name",
    "description",
    "interval_months",
    "next_due_date",
    "last_completed_at",
    "source",
    "status",
    "updated_by_id",
)


class SQLAlchemyMaintenanceTaskRepository(MaintenanceTaskRepository):
    """Implements the MaintenanceTaskRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MaintenanceTaskModel) -> MaintenanceTask:
        return MaintenanceTask(
            id=model.id,
            property_id=model.property_id,
            created_by_id=model.created_by_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in _COPIED_FIELDS},
        )

    async def _select(self, *criteria, limit: int | None = None) -> list[MaintenanceTask]:
        stmt = (
            select(MaintenanceTaskModel)
            .where(*criteria)
            .order_by(MaintenanceTaskModel.next_due_date.asc(), MaintenanceTaskModel.name.asc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, task_id: str) -> MaintenanceTask | None:
        result = await self._session.get(MaintenanceTaskModel, task_id)
        return self._to_entity(result) if result else None

    async def get_all_for_property(self, property_id: str) -> list[MaintenanceTask]:
        return await self._select(
            MaintenanceTaskModel.property_id == property_id,
            MaintenanceTaskModel.status != STATUS_DISMISSED,
        )

    async def get_all_for_system(self, system_id: str) -> list[MaintenanceTask]:
        return await self._select(
            MaintenanceTaskModel.system_id == system_id,
            MaintenanceTaskModel.status != STATUS_DISMISSED,
        )

    async def get_upcoming(self, property_ids: list[str], limit: int) -> list[MaintenanceTask]:
        return await self._select(
            MaintenanceTaskModel.property_id.in_(property_ids),
            MaintenanceTaskModel.status == STATUS_ACTIVE,
            limit=limit,
        )

    async def create(self, task: MaintenanceTask) -> MaintenanceTask:
        model = MaintenanceTaskModel(
            id=task.id,
            property_id=task.property_id,
            created_by_id=task.created_by_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
            **{name: getattr(task, name) for name in _COPIED_FIELDS},
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, task: MaintenanceTask) -> MaintenanceTask:
        model = await self._session.get(MaintenanceTaskModel, task.id)
        if model is None:
            raise ValueError(f"MaintenanceTask {task.id} not found in database")
        for name in _COPIED_FIELDS:
            setattr(model, name, getattr(task, name))
        model.updated_at = task.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, task_id: str) -> bool:
        model = await self._session.get(MaintenanceTaskModel, task_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
