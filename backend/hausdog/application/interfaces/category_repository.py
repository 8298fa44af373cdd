"""Abstract repository interface (port) for Category reference data."""

from abc import ABC, abstractmethod

from hausdog.domain.entities import Category


class CategoryRepository(ABC):
    """Port for category lookups and seeding."""

    @abstractmethod
    async def get_by_id(self, category_id: str) -> Category | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Category]:
        """All categories ordered by sort_order."""
        ...

    @abstractmethod
    async def create(self, category: Category) -> Category:
        ...
