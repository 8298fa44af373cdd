"""Space CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from hausdog.application.schemas import SpaceCreate, SpaceResponse, SpaceUpdate
from hausdog.application.services import AccessService, SpaceService
from hausdog.domain.entities import AuthUser
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.infrastructure.dependencies import (
    get_access_service,
    get_current_user,
    get_space_service,
)

router = APIRouter(tags=["Spaces"])


@router.get("/properties/{property_id}/spaces", response_model=list[SpaceResponse])
async def list_spaces(
    property_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SpaceService = Depends(get_space_service),
) -> list[SpaceResponse]:
    """List a property's spaces by name, each with the number of systems in it."""
    try:
        await access.ensure_property(property_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    spaces = await service.list_spaces(property_id)
    return [SpaceResponse.model_validate(s, from_attributes=True) for s in spaces]


@router.get("/spaces/{space_id}", response_model=SpaceResponse)
async def get_space(
    space_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SpaceService = Depends(get_space_service),
) -> SpaceResponse:
    try:
        await access.ensure_space(space_id, user.id)
        space = await service.get_space(space_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SpaceResponse.model_validate(space, from_attributes=True)


@router.post("/spaces", response_model=SpaceResponse, status_code=status.HTTP_201_CREATED)
async def create_space(
    data: SpaceCreate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SpaceService = Depends(get_space_service),
) -> SpaceResponse:
    try:
        await access.ensure_property(data.property_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    space = await service.create_space(data)
    return SpaceResponse.model_validate(space, from_attributes=True)


@router.put("/spaces/{space_id}", response_model=SpaceResponse)
async def update_space(
    space_id: str,
    data: SpaceUpdate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SpaceService = Depends(get_space_service),
) -> SpaceResponse:
    try:
        await access.ensure_space(space_id, user.id)
        space = await service.update_space(space_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SpaceResponse.model_validate(space, from_attributes=True)


@router.delete("/spaces/{space_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_space(
    space_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SpaceService = Depends(get_space_service),
) -> None:
    """Delete a space; systems located in it are kept with no space."""
    try:
        await access.ensure_space(space_id, user.id)
        await service.delete_space(space_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
