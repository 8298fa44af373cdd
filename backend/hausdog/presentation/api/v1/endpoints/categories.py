"""Read-only category endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from hausdog.application.schemas import CategoryResponse
from hausdog.application.services import CategoryService
from hausdog.domain.entities import AuthUser
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.infrastructure.dependencies import get_category_service, get_current_user

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    _user: AuthUser = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    categories = await service.list_categories()
    return [CategoryResponse.model_validate(c, from_attributes=True) for c in categories]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    _user: AuthUser = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    try:
        category = await service.get_category(category_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CategoryResponse.model_validate(category, from_attributes=True)
