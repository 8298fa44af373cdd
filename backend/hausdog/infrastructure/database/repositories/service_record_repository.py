"""Concrete repository implementation for ServiceRecord backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.application.interfaces import ServiceRecordRepository
from hausdog.domain.entities import ServiceRecord
from hausdog.infrastructure.database.models import ServiceRecordModel

_COPIED_FIELDS = (
    "system_id",
    "component_id",
    "document_id",
    "service_date",
    "service_type",
    "provider",
    "cost",
    "notes",
)


class SQLAlchemyServiceRecordRepository(ServiceRecordRepository):
    """Implements the ServiceRecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ServiceRecordModel) -> ServiceRecord:
        return ServiceRecord(
            id=model.id,
            property_id=model.property_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in _COPIED_FIELDS},
        )

    async def get_by_id(self, record_id: str) -> ServiceRecord | None:
        result = await self._session.get(ServiceRecordModel, record_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        property_id: str | None = None,
        system_id: str | None = None,
        component_id: str | None = None,
    ) -> list[ServiceRecord]:
        stmt = select(ServiceRecordModel)

        if property_id is not None:
            stmt = stmt.where(ServiceRecordModel.property_id == property_id)
        if system_id is not None:
            stmt = stmt.where(ServiceRecordModel.system_id == system_id)
        if component_id is not None:
            stmt = stmt.where(ServiceRecordModel.component_id == component_id)

        stmt = stmt.order_by(
            ServiceRecordModel.service_date.desc(),
            ServiceRecordModel.created_at.desc(),
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, record: ServiceRecord) -> ServiceRecord:
        model = ServiceRecordModel(
            id=record.id,
            property_id=record.property_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            **{name: getattr(record, name) for name in _COPIED_FIELDS},
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, record: ServiceRecord) -> ServiceRecord:
        model = await self._session.get(ServiceRecordModel, record.id)
        if model is None:
            raise ValueError(f"ServiceRecord {record.id} not found in database")
        for name in _COPIED_FIELDS:
            setattr(model, name, getattr(record, name))
        model.updated_at = record.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, record_id: str) -> bool:
        model = await self._session.get(ServiceRecordModel, record_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
