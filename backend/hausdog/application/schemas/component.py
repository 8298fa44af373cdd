"""Pydantic DTOs for the Component feature, including its wire form.

Components travel over HTTP as ``ComponentApi`` with ISO-8601 strings for
every date; services work with the ``Component`` entity holding native
``date``/``datetime`` values. ``to_component_api`` and ``from_component_api``
convert between the two without loss.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from hausdog.application.schemas.common import Name, ShortText, UuidStr
from hausdog.domain.entities import Component


class ComponentCreate(BaseModel):
    """Schema for creating a new component of a system."""

    system_id: UuidStr
    name: Name = Field(..., examples=["Blower motor"])
    manufacturer: ShortText | None = None
    model: ShortText | None = None
    serial_number: ShortText | None = None
    install_date: date | None = None
    warranty_expires: date | None = None
    notes: str | None = None


class ComponentUpdate(BaseModel):
    """Schema for updating an existing component — all fields optional."""

    name: Name | None = None
    manufacturer: ShortText | None = None
    model: ShortText | None = None
    serial_number: ShortText | None = None
    install_date: date | None = None
    warranty_expires: date | None = None
    notes: str | None = None


class ComponentApi(BaseModel):
    """Wire representation — all dates are ISO-8601 strings."""

    id: UuidStr
    system_id: UuidStr
    name: Name
    manufacturer: ShortText | None
    model: ShortText | None
    serial_number: ShortText | None
    install_date: str | None
    warranty_expires: str | None
    notes: str | None
    created_at: str
    updated_at: str

    @field_validator("install_date", "warranty_expires")
    @classmethod
    def _iso_date(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                date.fromisoformat(value)
            except ValueError:
                raise ValueError("must be an ISO-8601 date") from None
        return value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _iso_datetime(cls, value: str) -> str:
        try:
            datetime.fromisoformat(value)
        except ValueError:
            raise ValueError("must be an ISO-8601 datetime") from None
        return value


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def to_component_api(component: Component) -> ComponentApi:
    """Convert the internal component to its wire form."""
    return ComponentApi(
        id=component.id,
        system_id=component.system_id,
        name=component.name,
        manufacturer=component.manufacturer,
        model=component.model,
        serial_number=component.serial_number,
        install_date=_iso(component.install_date),
        warranty_expires=_iso(component.warranty_expires),
        notes=component.notes,
        created_at=component.created_at.isoformat(),
        updated_at=component.updated_at.isoformat(),
    )


def from_component_api(api: ComponentApi) -> Component:
    """Convert the wire form back into an internal component."""
    return Component(
        id=api.id,
        system_id=api.system_id,
        name=api.name,
        manufacturer=api.manufacturer,
        model=api.model,
        serial_number=api.serial_number,
        install_date=date.fromisoformat(api.install_date) if api.install_date else None,
        warranty_expires=(
            date.fromisoformat(api.warranty_expires) if api.warranty_expires else None
        ),
        notes=api.notes,
        created_at=datetime.fromisoformat(api.created_at),
        updated_at=datetime.fromisoformat(api.updated_at),
    )
