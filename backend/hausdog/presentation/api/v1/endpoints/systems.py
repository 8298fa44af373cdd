"""System CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from hausdog.application.schemas import (
    CategoryResponse,
    SystemCreate,
    SystemResponse,
    SystemUpdate,
)
from hausdog.application.services import AccessService, CategoryService, SystemService
from hausdog.domain.entities import AuthUser, Category, System
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.infrastructure.dependencies import (
    get_access_service,
    get_category_service,
    get_current_user,
    get_system_service,
)

router = APIRouter(tags=["Systems"])


def _to_response(system: System, categories: dict[str, Category]) -> SystemResponse:
    response = SystemResponse.model_validate(system, from_attributes=True)
    category = categories.get(system.category_id)
    if category is not None:
        response.category = CategoryResponse.model_validate(category, from_attributes=True)
    return response


async def _categories_by_id(service: CategoryService) -> dict[str, Category]:
    return {c.id: c for c in await service.list_categories()}


@router.get("/properties/{property_id}/systems", response_model=list[SystemResponse])
async def list_systems(
    property_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SystemService = Depends(get_system_service),
    category_service: CategoryService = Depends(get_category_service),
) -> list[SystemResponse]:
    """List a property's systems with their category embedded."""
    try:
        await access.ensure_property(property_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    systems = await service.list_systems(property_id)
    categories = await _categories_by_id(category_service)
    return [_to_response(s, categories) for s in systems]


@router.get("/systems/{system_id}", response_model=SystemResponse)
async def get_system(
    system_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SystemService = Depends(get_system_service),
    category_service: CategoryService = Depends(get_category_service),
) -> SystemResponse:
    try:
        await access.ensure_system(system_id, user.id)
        system = await service.get_system(system_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(system, await _categories_by_id(category_service))


@router.post("/systems", response_model=SystemResponse, status_code=status.HTTP_201_CREATED)
async def create_system(
    data: SystemCreate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SystemService = Depends(get_system_service),
    category_service: CategoryService = Depends(get_category_service),
) -> SystemResponse:
    try:
        await access.ensure_property(data.property_id, user.id)
        category = await category_service.get_category(data.category_id)
        if data.space_id is not None:
            await access.ensure_space_in_property(data.space_id, data.property_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    system = await service.create_system(data)
    return _to_response(system, {category.id: category})


@router.put("/systems/{system_id}", response_model=SystemResponse)
async def update_system(
    system_id: str,
    data: SystemUpdate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SystemService = Depends(get_system_service),
    category_service: CategoryService = Depends(get_category_service),
) -> SystemResponse:
    try:
        current = await access.ensure_system(system_id, user.id)
        if data.category_id is not None:
            await category_service.get_category(data.category_id)
        if data.space_id is not None:
            await access.ensure_space_in_property(data.space_id, current.property_id)
        system = await service.update_system(system_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(system, await _categories_by_id(category_service))


@router.delete("/systems/{system_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_system(
    system_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: SystemService = Depends(get_system_service),
) -> None:
    try:
        await access.ensure_system(system_id, user.id)
        await service.delete_system(system_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
