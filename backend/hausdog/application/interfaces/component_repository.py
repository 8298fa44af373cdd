"""Abstract repository interface (port) for Component persistence."""

from abc import ABC, abstractmethod

from hausdog.domain.entities import Component


class ComponentRepository(ABC):
    """Port for component persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, component_id: str) -> Component | None:
        ...

    @abstractmethod
    async def get_all_for_system(self, system_id: str) -> list[Component]:
        """List the components of a system, newest first."""
        ...

    @abstractmethod
    async def create(self, component: Component) -> Component:
        ...

    @abstractmethod
    async def update(self, component: Component) -> Component:
        ...

    @abstractmethod
    async def delete(self, component_id: str) -> bool:
        """Delete a component. Returns True if deleted, False if not found."""
        ...
