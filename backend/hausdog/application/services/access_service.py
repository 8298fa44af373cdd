"""Ownership checks: every record is reachable only by the owner of its property.

Records owned by another user are reported exactly like missing ones.
"""

from hausdog.application.interfaces import (
    ComponentRepository,
    MaintenanceTaskRepository,
    PropertyRepository,
    ServiceRecordRepository,
    SpaceRepository,
    SystemRepository,
)
from hausdog.domain.entities import (
    Component,
    MaintenanceTask,
    Property,
    ServiceRecord,
    Space,
    System,
)
from hausdog.domain.exceptions import EntityNotFoundError


class AccessService:
    """Walks a record up to its property and compares the owner."""

    def __init__(
        self,
        properties: PropertyRepository,
        spaces: SpaceRepository,
        systems: SystemRepository,
        components: ComponentRepository,
        service_records: ServiceRecordRepository,
        maintenance_tasks: MaintenanceTaskRepository,
    ):
        self._properties = properties
        self._spaces = spaces
        self._systems = systems
        self._components = components
        self._service_records = service_records
        self._maintenance_tasks = maintenance_tasks

    async def ensure_property(self, property_id: str, user_id: str) -> Property:
        prop = await self._properties.get_by_id(property_id)
        if prop is None or prop.user_id != user_id:
            raise EntityNotFoundError("Property", property_id)
        return prop

    async def ensure_space(self, space_id: str, user_id: str) -> Space:
        space = await self._spaces.get_by_id(space_id)
        if space is None:
            raise EntityNotFoundError("Space", space_id)
        await self._owned_or_missing(space.property_id, user_id, "Space", space_id)
        return space

    async def ensure_system(self, system_id: str, user_id: str) -> System:
        system = await self._systems.get_by_id(system_id)
        if system is None:
            raise EntityNotFoundError("System", system_id)
        await self._owned_or_missing(system.property_id, user_id, "System", system_id)
        return system

    async def ensure_component(self, component_id: str, user_id: str) -> Component:
        component = await self._components.get_by_id(component_id)
        if component is None:
            raise EntityNotFoundError("Component", component_id)
        property_id = await self._component_property_id(component)
        if property_id is None:
            raise EntityNotFoundError("Component", component_id)
        await self._owned_or_missing(property_id, user_id, "Component", component_id)
        return component

    async def ensure_service_record(self, record_id: str, user_id: str) -> ServiceRecord:
        record = await self._service_records.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("ServiceRecord", record_id)
        await self._owned_or_missing(record.property_id, user_id, "ServiceRecord", record_id)
        return record

    async def ensure_maintenance_task(self, task_id: str, user_id: str) -> MaintenanceTask:
        task = await self._maintenance_tasks.get_by_id(task_id)
        if task is None:
            raise EntityNotFoundError("MaintenanceTask", task_id)
        await self._owned_or_missing(task.property_id, user_id, "MaintenanceTask", task_id)
        return task

    async def resolve_record_property(
        self,
        user_id: str,
        *,
        property_id: str | None = None,
        system_id: str | None = None,
        component_id: str | None = None,
    ) -> str:
        """Return the property a new service record belongs to.

        Every target given must be owned by user_id and all of them must sit
        in the same property; a target elsewhere is reported as not found.
        """
        placements: list[tuple[str, str, str]] = []
        if property_id is not None:
            await self.ensure_property(property_id, user_id)
            placements.append(("Property", property_id, property_id))
        if system_id is not None:
            system = await self.ensure_system(system_id, user_id)
            placements.append(("System", system_id, system.property_id))
        if component_id is not None:
            component = await self.ensure_component(component_id, user_id)
            owner = await self._component_property_id(component)
            placements.append(("Component", component_id, owner))
        if not placements:
            raise ValueError("a service record needs a property, system or component")

        resolved = placements[0][2]
        for entity_type, entity_id, owner in placements[1:]:
            if owner != resolved:
                raise EntityNotFoundError(entity_type, entity_id)
        return resolved

    async def ensure_space_in_property(self, space_id: str, property_id: str) -> Space:
        """A system may only be placed in a space of its own property."""
        space = await self._spaces.get_by_id(space_id)
        if space is None or space.property_id != property_id:
            raise EntityNotFoundError("Space", space_id)
        return space

    async def ensure_system_in_property(self, system_id: str, property_id: str) -> System:
        system = await self._systems.get_by_id(system_id)
        if system is None or system.property_id != property_id:
            raise EntityNotFoundError("System", system_id)
        return system

    async def _component_property_id(self, component: Component) -> str | None:
        system = await self._systems.get_by_id(component.system_id)
        return system.property_id if system is not None else None

    async def _owned_or_missing(
        self, property_id: str, user_id: str, entity_type: str, entity_id: str
    ) -> None:
        prop = await self._properties.get_by_id(property_id)
        if prop is None or prop.user_id != user_id:
            raise EntityNotFoundError(entity_type, entity_id)
