"""Application service (use case) for System operations."""

import logging

from hausdog.application.interfaces import SystemRepository
from hausdog.application.schemas import SystemCreate, SystemUpdate
from hausdog.domain.entities import System
from hausdog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("name", "category_id")


class SystemService:
    """Orchestrates system CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: SystemRepository):
        self._repository = repository

    async def get_system(self, system_id: str) -> System:
        system = await self._repository.get_by_id(system_id)
        if system is None:
            raise EntityNotFoundError("System", system_id)
        return system

    async def list_systems(self, property_id: str) -> list[System]:
        logger.debug("Finding all systems for property", extra={"property_id": property_id})
        return await self._repository.get_all_for_property(property_id)

    async def create_system(self, data: SystemCreate) -> System:
        logger.info(
            "Creating system",
            extra={"property_id": data.property_id, "system_name": data.name},
        )
        return await self._repository.create(System(**data.model_dump()))

    async def update_system(self, system_id: str, data: SystemUpdate) -> System:
        system = await self.get_system(system_id)
        logger.info("Updating system", extra={"system_id": system_id})
        changes = data.model_dump(exclude_unset=True)
        for name in _REQUIRED_FIELDS:
            if changes.get(name, ...) is None:
                del changes[name]
        system.update(**changes)
        return await self._repository.update(system)

    async def delete_system(self, system_id: str) -> bool:
        await self.get_system(system_id)
        logger.info("Deleting system", extra={"system_id": system_id})
        return await self._repository.delete(system_id)
