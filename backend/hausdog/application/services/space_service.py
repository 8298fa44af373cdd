"""Application service (use case) for Space operations."""

import logging

from hausdog.application.interfaces import SpaceRepository
from hausdog.application.schemas import SpaceCreate, SpaceUpdate
from hausdog.domain.entities import Space
from hausdog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class SpaceService:
    """Orchestrates space CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: SpaceRepository):
        self._repository = repository

    async def get_space(self, space_id: str) -> Space:
        logger.debug("Finding space by id", extra={"space_id": space_id})
        space = await self._repository.get_by_id(space_id)
        if space is None:
            raise EntityNotFoundError("Space", space_id)
        return space

    async def list_spaces(self, property_id: str) -> list[Space]:
        logger.debug("Finding all spaces for property", extra={"property_id": property_id})
        return await self._repository.get_all_for_property(property_id)

    async def create_space(self, data: SpaceCreate) -> Space:
        logger.info(
            "Creating space",
            extra={"property_id": data.property_id, "space_name": data.name},
        )
        return await self._repository.create(
            Space(property_id=data.property_id, name=data.name)
        )

    async def update_space(self, space_id: str, data: SpaceUpdate) -> Space:
        space = await self.get_space(space_id)
        logger.info("Updating space", extra={"space_id": space_id})
        if data.name is not None:
            space.update(name=data.name)
        return await self._repository.update(space)

    async def delete_space(self, space_id: str) -> bool:
        await self.get_space(space_id)
        logger.info("Deleting space", extra={"space_id": space_id})
        return await self._repository.delete(space_id)
