"""API key endpoints — issue, list and revoke personal keys."""

from fastapi import APIRouter, Depends, HTTPException, status

from hausdog.application.schemas import ApiKeyCreate, ApiKeyCreatedResponse, ApiKeyResponse
from hausdog.application.services import ApiKeyService
from hausdog.domain.entities import AuthUser
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.infrastructure.dependencies import get_api_key_service, get_current_user

router = APIRouter(prefix="/api-keys", tags=["API Keys"])


@router.get("", response_model=list[ApiKeyResponse])
async def list_api_keys(
    user: AuthUser = Depends(get_current_user),
    service: ApiKeyService = Depends(get_api_key_service),
) -> list[ApiKeyResponse]:
    keys = await service.list_keys(user.id)
    return [ApiKeyResponse.model_validate(k, from_attributes=True) for k in keys]


@router.post("", response_model=ApiKeyCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_api_key(
    data: ApiKeyCreate,
    user: AuthUser = Depends(get_current_user),
    service: ApiKeyService = Depends(get_api_key_service),
) -> ApiKeyCreatedResponse:
    """Issue a key. The secret in the response is never shown again."""
    api_key, secret = await service.create_key(user.id, data)
    return ApiKeyCreatedResponse(
        id=api_key.id,
        name=api_key.name,
        last_used_at=api_key.last_used_at,
        created_at=api_key.created_at,
        secret=secret,
    )


@router.delete("/{key_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_api_key(
    key_id: str,
    user: AuthUser = Depends(get_current_user),
    service: ApiKeyService = Depends(get_api_key_service),
) -> None:
    try:
        await service.delete_key(key_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
