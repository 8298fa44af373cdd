"""Pydantic DTOs for recurring maintenance tasks."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from hausdog.application.schemas.common import Money, Name, ShortText, UuidStr


class MaintenanceTaskCreate(BaseModel):
    """Schema for scheduling a task on a property, optionally for one system."""

    property_id: UuidStr
    system_id: UuidStr | None = None
    name: Name = Field(..., examples=["Replace furnace filter"])
    description: str | None = None
    interval_months: int = Field(..., ge=1, le=120, examples=[12])
    next_due_date: date


class MaintenanceTaskUpdate(BaseModel):
    """Schema for updating a task — all fields optional."""

    name: Name | None = None
    description: str | None = None
    interval_months: int | None = Field(None, ge=1, le=120)
    next_due_date: date | None = None
    status: Literal["active", "paused", "dismissed"] | None = None


class MaintenanceTaskComplete(BaseModel):
    """Details of the work done, logged as a service record."""

    completed_on: date
    cost: Money | None = None
    performed_by: ShortText | None = None
    description: str | None = None


class MaintenanceTaskResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    property_id: str
    system_id: str | None
    name: str
    description: str | None
    interval_months: int
    next_due_date: date
    last_completed_at: date | None
    source: str
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
