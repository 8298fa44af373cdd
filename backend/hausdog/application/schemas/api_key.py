"""Pydantic DTOs for personal API keys."""

from datetime import datetime

from pydantic import BaseModel, Field

from hausdog.application.schemas.common import Name


class ApiKeyCreate(BaseModel):
    name: Name = Field(..., examples=["Home Assistant"])


class ApiKeyResponse(BaseModel):
    """Schema returned to the client. Never carries the secret."""

    id: str
    name: str
    last_used_at: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ApiKeyCreatedResponse(ApiKeyResponse):
    """Returned once, at creation: the only time the plain-text key is shown."""

    secret: str
