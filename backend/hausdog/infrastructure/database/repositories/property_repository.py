"""Concrete repository implementation for Property backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.application.interfaces import PropertyRepository
from hausdog.domain.entities import Property
from hausdog.infrastructure.database.models import PropertyModel

_COPIED_FIELDS = (
    "name",
    "street_address",
    "city",
    "state",
    "postal_code",
    "country",
    "county",
    "neighborhood",
    "latitude",
    "longitude",
    "timezone",
    "plus_code",
    "google_place_id",
    "formatted_address",
    "google_place_data",
    "year_built",
    "square_feet",
    "property_type",
    "purchase_date",
    "ingest_token",
)


class SQLAlchemyPropertyRepository(PropertyRepository):
    """Implements the PropertyRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: PropertyModel) -> Property:
        """Map ORM model → domain entity."""
        return Property(
            id=model.id,
            user_id=model.user_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in _COPIED_FIELDS},
        )

    def _to_model(self, entity: Property) -> PropertyModel:
        """Map domain entity → ORM model (for creation)."""
        return PropertyModel(
            id=entity.id,
            user_id=entity.user_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            **{name: getattr(entity, name) for name in _COPIED_FIELDS},
        )

    async def get_by_id(self, property_id: str) -> Property | None:
        result = await self._session.get(PropertyModel, property_id)
        return self._to_entity(result) if result else None

    async def get_by_ingest_token(self, token: str) -> Property | None:
        stmt = select(PropertyModel).where(PropertyModel.ingest_token == token)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all_for_user(self, user_id: str) -> list[Property]:
        stmt = (
            select(PropertyModel)
            .where(PropertyModel.user_id == user_id)
            .order_by(PropertyModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, prop: Property) -> Property:
        model = self._to_model(prop)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, prop: Property) -> Property:
        model = await self._session.get(PropertyModel, prop.id)
        if model is None:
            raise ValueError(f"Property {prop.id} not found in database")
        for name in _COPIED_FIELDS:
            setattr(model, name, getattr(prop, name))
        model.updated_at = prop.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, property_id: str) -> bool:
        model = await self._session.get(PropertyModel, property_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
