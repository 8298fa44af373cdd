"""Application service (use case) for Component operations."""

import logging

from hausdog.application.interfaces import ComponentRepository
from hausdog.application.schemas import ComponentCreate, ComponentUpdate
from hausdog.domain.entities import Component
from hausdog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ComponentService:
    """Orchestrates component CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ComponentRepository):
        self._repository = repository

    async def get_component(self, component_id: str) -> Component:
        logger.debug("Finding component by id", extra={"component_id": component_id})
        component = await self._repository.get_by_id(component_id)
        if component is None:
            raise EntityNotFoundError("Component", component_id)
        return component

    async def list_components(self, system_id: str) -> list[Component]:
        logger.debug("Finding all components for system", extra={"system_id": system_id})
        return await self._repository.get_all_for_system(system_id)

    async def create_component(self, data: ComponentCreate) -> Component:
        logger.info(
            "Creating component",
            extra={"system_id": data.system_id, "component_name": data.name},
        )
        return await self._repository.create(Component(**data.model_dump()))

    async def update_component(self, component_id: str, data: ComponentUpdate) -> Component:
        component = await self.get_component(component_id)
        logger.info("Updating component", extra={"component_id": component_id})
        changes = data.model_dump(exclude_unset=True)
        if changes.get("name", ...) is None:
            del changes["name"]
        component.update(**changes)
        return await self._repository.update(component)

    async def delete_component(self, component_id: str) -> bool:
        await self.get_component(component_id)
        logger.info("Deleting component", extra={"component_id": component_id})
        return await self._repository.delete(component_id)
