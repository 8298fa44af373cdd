"""Concrete repository implementation for Category backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.application.interfaces import CategoryRepository
from hausdog.domain.entities import Category
from hausdog.infrastructure.database.models import CategoryModel


class SQLAlchemyCategoryRepository(CategoryRepository):
    """Implements the CategoryRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            icon=model.icon,
            sort_order=model.sort_order,
        )

    async def get_by_id(self, category_id: str) -> Category | None:
        result = await self._session.get(CategoryModel, category_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.sort_order, CategoryModel.name)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, category: Category) -> Category:
        model = CategoryModel(
            id=category.id,
            name=category.name,
            icon=category.icon,
            sort_order=category.sort_order,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
