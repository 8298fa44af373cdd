"""Application service (use case) for Property operations."""

import logging
from typing import Any

from hausdog.application.interfaces import PropertyRepository
from hausdog.application.schemas import PropertyCreate, PropertyUpdate
from hausdog.domain.entities import Property
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.domain.ingest_token import extract_ingest_token, generate_ingest_token

logger = logging.getLogger(__name__)


class PropertyService:
    """Orchestrates property CRUD, scoped to the owning user."""

    def __init__(self, repository: PropertyRepository):
        self._repository = repository

    async def get_property(self, property_id: str, user_id: str) -> Property:
        """Return the property if it exists and belongs to user_id."""
        prop = await self._repository.get_by_id(property_id)
        if prop is None or prop.user_id != user_id:
            raise EntityNotFoundError("Property", property_id)
        return prop

    async def list_properties(self, user_id: str) -> list[Property]:
        logger.debug("Finding all properties for user", extra={"user_id": user_id})
        return await self._repository.get_all_for_user(user_id)

    async def create_property(self, user_id: str, data: PropertyCreate) -> Property:
        address = data.address
        token = generate_ingest_token(
            address.formatted_address or address.street_address, data.name
        )
        logger.info(
            "Creating property",
            extra={"user_id": user_id, "property_name": data.name},
        )
        prop = Property(
            user_id=user_id,
            name=data.name,
            year_built=data.year_built,
            square_feet=data.square_feet,
            property_type=data.property_type,
            purchase_date=data.purchase_date,
            ingest_token=token,
            **address.model_dump(),
        )
        return await self._repository.create(prop)

    async def update_property(
        self, property_id: str, user_id: str, data: PropertyUpdate
    ) -> Property:
        prop = await self.get_property(property_id, user_id)
        logger.info("Updating property", extra={"property_id": property_id, "user_id": user_id})

        changes: dict[str, Any] = data.model_dump(exclude_unset=True, exclude={"address"})
        if changes.get("name") is None:
            changes.pop("name", None)
        if data.address is not None:
            changes.update(data.address.model_dump())

        prop.update(**changes)
        return await self._repository.update(prop)

    async def delete_property(self, property_id: str, user_id: str) -> bool:
        await self.get_property(property_id, user_id)
        logger.info("Deleting property", extra={"property_id": property_id, "user_id": user_id})
        return await self._repository.delete(property_id)

    async def find_by_ingest_email(self, email_address: str, user_id: str) -> Property:
        """Resolve an inbound-document email address to the user's property."""
        token = extract_ingest_token(email_address)
        prop = await self._repository.get_by_ingest_token(token) if token else None
        if prop is None or prop.user_id != user_id:
            raise EntityNotFoundError("Property", email_address)
        return prop
