"""Property CRUD endpoints, scoped to the signed-in user."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hausdog.config import get_settings
from hausdog.application.schemas import PropertyCreate, PropertyResponse, PropertyUpdate
from hausdog.application.services import PropertyService
from hausdog.domain.entities import AuthUser
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.infrastructure.dependencies import get_current_user, get_property_service

router = APIRouter(prefix="/properties", tags=["Properties"])


def _to_response(prop) -> PropertyResponse:
    return PropertyResponse.from_entity(prop, get_settings().ingest_email_domain)


@router.get("", response_model=list[PropertyResponse])
async def list_properties(
    user: AuthUser = Depends(get_current_user),
    service: PropertyService = Depends(get_property_service),
) -> list[PropertyResponse]:
    """List the signed-in user's properties, newest first."""
    return [_to_response(p) for p in await service.list_properties(user.id)]


@router.get("/by-ingest-email", response_model=PropertyResponse)
async def get_property_by_ingest_email(
    email: str = Query(..., min_length=3, description="Inbound document address"),
    user: AuthUser = Depends(get_current_user),
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    """Resolve an ingest email address to the property it routes to."""
    try:
        prop = await service.find_by_ingest_email(email, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(prop)


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str,
    user: AuthUser = Depends(get_current_user),
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    try:
        prop = await service.get_property(property_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(prop)


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(
    data: PropertyCreate,
    user: AuthUser = Depends(get_current_user),
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    """Create a property; its ingest token is generated here."""
    prop = await service.create_property(user.id, data)
    return _to_response(prop)


@router.put("/{property_id}", response_model=PropertyResponse)
async def update_property(
    property_id: str,
    data: PropertyUpdate,
    user: AuthUser = Depends(get_current_user),
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    try:
        prop = await service.update_property(property_id, user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(prop)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property(
    property_id: str,
    user: AuthUser = Depends(get_current_user),
    service: PropertyService = Depends(get_property_service),
) -> None:
    """Delete a property together with everything recorded under it."""
    try:
        await service.delete_property(property_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
