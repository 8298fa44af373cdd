"""Pydantic DTO for the last-selected property kept in a cookie."""

from pydantic import BaseModel, Field

from hausdog.application.schemas.common import UuidStr


class CurrentProperty(BaseModel):
    """Lightweight {id, name} reference — a UI convenience, not a domain record."""

    id: UuidStr
    name: str = Field(..., min_length=1)
