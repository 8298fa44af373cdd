"""Abstract repository interface (port) for Space persistence."""

from abc import ABC, abstractmethod

from hausdog.domain.entities import Space


class SpaceRepository(ABC):
    """Port for space persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, space_id: str) -> Space | None:
        """Retrieve a single space by its UUID."""
        ...

    @abstractmethod
    async def get_all_for_property(self, property_id: str) -> list[Space]:
        """List a property's spaces by name, each with its item_count filled in."""
        ...

    @abstractmethod
    async def create(self, space: Space) -> Space:
        """Persist a new space and return it."""
        ...

    @abstractmethod
    async def update(self, space: Space) -> Space:
        """Update an existing space."""
        ...

    @abstractmethod
    async def delete(self, space_id: str) -> bool:
        """Delete a space. Returns True if deleted, False if not found."""
        ...
