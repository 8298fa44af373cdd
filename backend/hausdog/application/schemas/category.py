"""Pydantic DTOs for the Category reference data."""

from pydantic import BaseModel


class CategoryResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    icon: str | None
    sort_order: int

    model_config = {"from_attributes": True}
