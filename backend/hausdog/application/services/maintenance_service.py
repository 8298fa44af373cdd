"""Application service (use case) for recurring maintenance tasks."""

import logging

from hausdog.application.interfaces import MaintenanceTaskRepository, ServiceRecordRepository
from hausdog.application.schemas import (
    MaintenanceTaskComplete,
    MaintenanceTaskCreate,
    MaintenanceTaskUpdate,
)
from hausdog.domain.entities import MaintenanceTask, ServiceRecord
from hausdog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

MAINTENANCE_SERVICE_TYPE = "maintenance"
DEFAULT_UPCOMING_LIMIT = 20

_REQUIRED_FIELDS = ("name", "interval_months", "next_due_date", "status")


class MaintenanceService:
    """Schedules tasks and logs a service record each time one is completed."""

    def __init__(
        self,
        repository: MaintenanceTaskRepository,
        service_records: ServiceRecordRepository,
    ):
        self._repository = repository
        self._service_records = service_records

    async def get_task(self, task_id: str) -> MaintenanceTask:
        task = await self._repository.get_by_id(task_id)
        if task is None:
            raise EntityNotFoundError("MaintenanceTask", task_id)
        return task

    async def list_for_property(self, property_id: str) -> list[MaintenanceTask]:
        logger.debug("Finding all maintenance tasks for property", extra={"property_id": property_id})
        return await self._repository.get_all_for_property(property_id)

    async def list_for_system(self, system_id: str) -> list[MaintenanceTask]:
        logger.debug("Finding all maintenance tasks for system", extra={"system_id": system_id})
        return await self._repository.get_all_for_system(system_id)

    async def list_upcoming(
        self, property_ids: list[str], limit: int = DEFAULT_UPCOMING_LIMIT
    ) -> list[MaintenanceTask]:
        """Active tasks of the given properties, soonest due first."""
        if not property_ids:
            return []
        logger.debug(
            "Finding upcoming maintenance tasks",
            extra={"property_count": len(property_ids), "limit": limit},
        )
        return await self._repository.get_upcoming(property_ids, limit)

    async def create_task(self, user_id: str, data: MaintenanceTaskCreate) -> MaintenanceTask:
        logger.info(
            "Creating maintenance task",
            extra={"user_id": user_id, "property_id": data.property_id},
        )
        task = MaintenanceTask(
            created_by_id=user_id,
            updated_by_id=user_id,
            **data.model_dump(),
        )
        return await self._repository.create(task)

    async def update_task(
        self, task_id: str, user_id: str, data: MaintenanceTaskUpdate
    ) -> MaintenanceTask:
        task = await self.get_task(task_id)
        logger.info("Updating maintenance task", extra={"task_id": task_id, "user_id": user_id})
        changes = data.model_dump(exclude_unset=True)
        for name in _REQUIRED_FIELDS:
            if changes.get(name, ...) is None:
                del changes[name]
        task.update(user_id, **changes)
        return await self._repository.update(task)

    async def complete_task(
        self, task_id: str, user_id: str, data: MaintenanceTaskComplete
    ) -> MaintenanceTask:
        """Log the work as a service record and schedule the next occurrence."""
        task = await self.get_task(task_id)
        logger.info("Completing maintenance task", extra={"task_id": task_id, "user_id": user_id})

        record = await self._service_records.create(
            ServiceRecord(
                property_id=task.property_id,
                system_id=task.system_id,
                service_date=data.completed_on,
                service_type=MAINTENANCE_SERVICE_TYPE,
                provider=data.performed_by,
                cost=data.cost,
                notes=data.description or task.name,
            )
        )
        logger.debug(
            "Logged maintenance service record",
            extra={"task_id": task_id, "record_id": record.id},
        )

        task.complete(user_id, data.completed_on)
        return await self._repository.update(task)

    async def snooze_task(self, task_id: str, user_id: str) -> MaintenanceTask:
        task = await self.get_task(task_id)
        logger.info("Snoozing maintenance task", extra={"task_id": task_id, "user_id": user_id})
        task.snooze(user_id)
        return await self._repository.update(task)

    async def dismiss_task(self, task_id: str, user_id: str) -> MaintenanceTask:
        task = await self.get_task(task_id)
        logger.info("Dismissing maintenance task", extra={"task_id": task_id, "user_id": user_id})
        task.dismiss(user_id)
        return await self._repository.update(task)

    async def delete_task(self, task_id: str) -> bool:
        await self.get_task(task_id)
        logger.info("Deleting maintenance task", extra={"task_id": task_id})
        return await self._repository.delete(task_id)
