"""Abstract repository interface (port) for System persistence."""

from abc import ABC, abstractmethod

from hausdog.domain.entities import System


class SystemRepository(ABC):
    """Port for system persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, system_id: str) -> System | None:
        ...

    @abstractmethod
    async def get_all_for_property(self, property_id: str) -> list[System]:
        """List the systems of a property, newest first."""
        ...

    @abstractmethod
    async def create(self, system: System) -> System:
        ...

    @abstractmethod
    async def update(self, system: System) -> System:
        ...

    @abstractmethod
    async def delete(self, system_id: str) -> bool:
        """Delete a system. Returns True if deleted, False if not found."""
        ...
