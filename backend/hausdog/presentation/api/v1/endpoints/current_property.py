"""Endpoints for the last-selected property cookie."""

from fastapi import APIRouter, Body, Request, Response

from hausdog.application.schemas import CurrentProperty
from hausdog.presentation.current_property_cookie import (
    get_current_property,
    set_current_property,
)

router = APIRouter(prefix="/current-property", tags=["Current Property"])


@router.get("", response_model=CurrentProperty | None)
async def read_current_property(request: Request) -> CurrentProperty | None:
    """Return the stored property reference, or null when unset or unreadable."""
    return get_current_property(request)


@router.put("", response_model=CurrentProperty | None)
async def write_current_property(
    response: Response,
    value: CurrentProperty | None = Body(None),
) -> CurrentProperty | None:
    """Remember the given property, or forget it when the body is null."""
    set_current_property(response, value)
    return value
