"""Application service (use case) for ServiceRecord operations."""

import logging

from hausdog.application.interfaces import ServiceRecordRepository
from hausdog.application.schemas import ServiceRecordCreate, ServiceRecordUpdate
from hausdog.domain.entities import ServiceRecord
from hausdog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("service_date", "service_type")


class ServiceRecordService:
    """Orchestrates service record CRUD logic."""

    def __init__(self, repository: ServiceRecordRepository):
        self._repository = repository

    async def get_record(self, record_id: str) -> ServiceRecord:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("ServiceRecord", record_id)
        return record

    async def list_for_property(self, property_id: str) -> list[ServiceRecord]:
        return await self._repository.get_all(property_id=property_id)

    async def list_for_system(self, system_id: str) -> list[ServiceRecord]:
        return await self._repository.get_all(system_id=system_id)

    async def list_for_component(self, component_id: str) -> list[ServiceRecord]:
        return await self._repository.get_all(component_id=component_id)

    async def create_record(self, property_id: str, data: ServiceRecordCreate) -> ServiceRecord:
        """Log a service event under property_id.

        The caller resolves property_id from whichever targets the request
        names; see ``AccessService.resolve_record_property``.
        """
        logger.info(
            "Creating service record",
            extra={
                "property_id": property_id,
                "system_id": data.system_id,
                "component_id": data.component_id,
                "document_id": data.document_id,
                "service_type": data.service_type,
            },
        )
        record = ServiceRecord(
            property_id=property_id,
            **data.model_dump(exclude={"property_id"}),
        )
        return await self._repository.create(record)

    async def update_record(self, record_id: str, data: ServiceRecordUpdate) -> ServiceRecord:
        record = await self.get_record(record_id)
        logger.info("Updating service record", extra={"record_id": record_id})
        changes = data.model_dump(exclude_unset=True)
        for name in _REQUIRED_FIELDS:
            if changes.get(name, ...) is None:
                del changes[name]
        record.update(**changes)
        return await self._repository.update(record)

    async def delete_record(self, record_id: str) -> bool:
        await self.get_record(record_id)
        logger.info("Deleting service record", extra={"record_id": record_id})
        return await self._repository.delete(record_id)
