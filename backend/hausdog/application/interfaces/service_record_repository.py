"""Abstract repository interface (port) for ServiceRecord persistence."""

from abc import ABC, abstractmethod

from hausdog.domain.entities import ServiceRecord


class ServiceRecordRepository(ABC):
    """Port for service record persistence."""

    @abstractmethod
    async def get_by_id(self, record_id: str) -> ServiceRecord | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        property_id: str | None = None,
        system_id: str | None = None,
        component_id: str | None = None,
    ) -> list[ServiceRecord]:
        """List records matching every given filter, most recent service first."""
        ...

    @abstractmethod
    async def create(self, record: ServiceRecord) -> ServiceRecord:
        ...

    @abstractmethod
    async def update(self, record: ServiceRecord) -> ServiceRecord:
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...
