"""Pydantic DTOs (Data Transfer Objects) for the ServiceRecord feature."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer, model_validator

from hausdog.application.schemas.common import Money, Name, ShortText, UuidStr


class ServiceRecordCreate(BaseModel):
    """Schema for logging a service event.

    At least one of property_id, system_id or component_id places the record
    in a property; document_id alone is not enough.
    """

    property_id: UuidStr | None = None
    system_id: UuidStr | None = None
    component_id: UuidStr | None = None
    document_id: UuidStr | None = None
    service_date: date
    service_type: Name = Field(..., examples=["Annual inspection"])
    provider: ShortText | None = None
    cost: Money | None = Field(None, examples=["149.99"])
    notes: str | None = None

    @model_validator(mode="after")
    def _placed_in_a_property(self) -> "ServiceRecordCreate":
        if self.property_id is None and self.system_id is None and self.component_id is None:
            raise ValueError("one of property_id, system_id or component_id is required")
        return self


class ServiceRecordUpdate(BaseModel):
    """Schema for updating a service record — all fields optional."""

    service_date: date | None = None
    service_type: Name | None = None
    provider: ShortText | None = None
    cost: Money | None = None
    notes: str | None = None


class ServiceRecordResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    property_id: str
    system_id: str | None
    component_id: str | None
    document_id: str | None
    service_date: date
    service_type: str
    provider: str | None
    cost: Decimal | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @field_serializer("cost")
    def _cost_as_number(self, cost: Decimal | None) -> float | None:
        return float(cost) if cost is not None else None
