"""Abstract repository interface (port) for Property persistence."""

from abc import ABC, abstractmethod

from hausdog.domain.entities import Property


class PropertyRepository(ABC):
    """Port for property persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, property_id: str) -> Property | None:
        """Retrieve a single property by its UUID."""
        ...

    @abstractmethod
    async def get_by_ingest_token(self, token: str) -> Property | None:
        """Retrieve the property owning an ingest token."""
        ...

    @abstractmethod
    async def get_all_for_user(self, user_id: str) -> list[Property]:
        """List a user's properties, newest first."""
        ...

    @abstractmethod
    async def create(self, prop: Property) -> Property:
        """Persist a new property and return it."""
        ...

    @abstractmethod
    async def update(self, prop: Property) -> Property:
        """Update an existing property."""
        ...

    @abstractmethod
    async def delete(self, property_id: str) -> bool:
        """Delete a property. Returns True if deleted, False if not found."""
        ...
