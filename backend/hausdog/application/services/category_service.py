"""Application service for Category reference data."""

import logging

from hausdog.application.interfaces import CategoryRepository
from hausdog.domain.entities import Category, DEFAULT_CATEGORIES
from hausdog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class CategoryService:
    """Read access to categories plus idempotent seeding of the defaults."""

    def __init__(self, repository: CategoryRepository):
        self._repository = repository

    async def list_categories(self) -> list[Category]:
        return await self._repository.get_all()

    async def get_category(self, category_id: str) -> Category:
        category = await self._repository.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        return category

    async def seed_defaults(self) -> int:
        """Create any missing default category. Returns how many were added."""
        existing = {c.name for c in await self._repository.get_all()}
        added = 0
        for position, (name, icon) in enumerate(DEFAULT_CATEGORIES, start=1):
            if name in existing:
                continue
            await self._repository.create(Category(name=name, icon=icon, sort_order=position))
            added += 1
        if added:
            logger.info("Seeded default categories", extra={"count": added})
        return added
