"""Abstract repository interface (port) for MaintenanceTask persistence."""

from abc import ABC, abstractmethod

from hausdog.domain.entities import MaintenanceTask


class MaintenanceTaskRepository(ABC):
    """Port for maintenance task persistence."""

    @abstractmethod
    async def get_by_id(self, task_id: str) -> MaintenanceTask | None:
        ...

    @abstractmethod
    async def get_all_for_property(self, property_id: str) -> list[MaintenanceTask]:
        """Tasks of a property that are not dismissed, soonest due first."""
        ...

    @abstractmethod
    async def get_all_for_system(self, system_id: str) -> list[MaintenanceTask]:
        """Tasks of a system that are not dismissed, soonest due first."""
        ...

    @abstractmethod
    async def get_upcoming(self, property_ids: list[str], limit: int) -> list[MaintenanceTask]:
        """Active tasks across the given properties, soonest due first, at most limit."""
        ...

    @abstractmethod
    async def create(self, task: MaintenanceTask) -> MaintenanceTask:
        ...

    @abstractmethod
    async def update(self, task: MaintenanceTask) -> MaintenanceTask:
        ...

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        """Delete a task. Returns True if deleted, False if not found."""
        ...
