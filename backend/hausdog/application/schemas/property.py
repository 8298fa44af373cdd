"""Pydantic DTOs (Data Transfer Objects) for the Property feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from hausdog.application.schemas.address import EMPTY_ADDRESS_DATA, AddressData
from hausdog.application.schemas.common import Name
from hausdog.domain.ingest_token import build_ingest_email
from hausdog.domain.entities import Property


class PropertyCreate(BaseModel):
    """Schema for creating a new property."""

    name: Name = Field(..., examples=["Lake House"])
    address: AddressData = Field(default_factory=lambda: EMPTY_ADDRESS_DATA.model_copy())
    year_built: int | None = Field(None, ge=1800, le=2100)
    square_feet: int | None = Field(None, gt=0)
    property_type: str | None = Field(None, max_length=100, examples=["single_family"])
    purchase_date: date | None = None


class PropertyUpdate(BaseModel):
    """Schema for updating a property — all fields optional.

    A supplied address replaces the stored address as a whole.
    """

    name: Name | None = None
    address: AddressData | None = None
    year_built: int | None = Field(None, ge=1800, le=2100)
    square_feet: int | None = Field(None, gt=0)
    property_type: str | None = Field(None, max_length=100)
    purchase_date: date | None = None


class PropertyResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    user_id: str
    name: str
    address: AddressData
    year_built: int | None
    square_feet: int | None
    property_type: str | None
    purchase_date: date | None
    ingest_token: str | None
    ingest_email: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, prop: Property, ingest_domain: str | None = None) -> "PropertyResponse":
        ingest_email = None
        if prop.ingest_token and ingest_domain:
            ingest_email = build_ingest_email(prop.ingest_token, ingest_domain)
        return cls(
            id=prop.id,
            user_id=prop.user_id,
            name=prop.name,
            address=AddressData.model_validate(prop, from_attributes=True),
            year_built=prop.year_built,
            square_feet=prop.square_feet,
            property_type=prop.property_type,
            purchase_date=prop.purchase_date,
            ingest_token=prop.ingest_token,
            ingest_email=ingest_email,
            created_at=prop.created_at,
            updated_at=prop.updated_at,
        )
