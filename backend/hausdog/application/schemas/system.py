"""Pydantic DTOs (Data Transfer Objects) for the System feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from hausdog.application.schemas.category import CategoryResponse
from hausdog.application.schemas.common import Name, ShortText, UuidStr


class SystemCreate(BaseModel):
    """Schema for creating a new system within a property."""

    property_id: UuidStr
    category_id: UuidStr
    space_id: UuidStr | None = None
    name: Name = Field(..., examples=["Furnace"])
    manufacturer: ShortText | None = None
    model: ShortText | None = None
    serial_number: ShortText | None = None
    install_date: date | None = None
    warranty_expires: date | None = None
    notes: str | None = None


class SystemUpdate(BaseModel):
    """Schema for updating an existing system — all fields optional."""

    category_id: UuidStr | None = None
    space_id: UuidStr | None = None
    name: Name | None = None
    manufacturer: ShortText | None = None
    model: ShortText | None = None
    serial_number: ShortText | None = None
    install_date: date | None = None
    warranty_expires: date | None = None
    notes: str | None = None


class SystemResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    property_id: str
    category_id: str
    space_id: str | None
    name: str
    manufacturer: str | None
    model: str | None
    serial_number: str | None
    install_date: date | None
    warranty_expires: date | None
    notes: str | None
    category: CategoryResponse | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
