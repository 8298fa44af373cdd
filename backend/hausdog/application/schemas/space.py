"""Pydantic DTOs (Data Transfer Objects) for the Space feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from hausdog.application.schemas.common import Name, UuidStr


class SpaceCreate(BaseModel):
    """Schema for creating a new space within a property."""

    property_id: UuidStr
    name: Name = Field(..., examples=["Kitchen"])


class SpaceUpdate(BaseModel):
    """Schema for updating an existing space — all fields optional."""

    name: Name | None = None


class SpaceResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    property_id: str
    name: str
    item_count: int | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
