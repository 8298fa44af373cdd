"""Component CRUD endpoints.

Responses use the wire form (``ComponentApi``) with ISO-8601 date strings.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from hausdog.application.schemas import (
    ComponentApi,
    ComponentCreate,
    ComponentUpdate,
    to_component_api,
)
from hausdog.application.services import AccessService, ComponentService
from hausdog.domain.entities import AuthUser
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.infrastructure.dependencies import (
    get_access_service,
    get_component_service,
    get_current_user,
)

router = APIRouter(tags=["Components"])


@router.get("/systems/{system_id}/components", response_model=list[ComponentApi])
async def list_components(
    system_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ComponentService = Depends(get_component_service),
) -> list[ComponentApi]:
    try:
        await access.ensure_system(system_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [to_component_api(c) for c in await service.list_components(system_id)]


@router.get("/components/{component_id}", response_model=ComponentApi)
async def get_component(
    component_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ComponentService = Depends(get_component_service),
) -> ComponentApi:
    try:
        await access.ensure_component(component_id, user.id)
        component = await service.get_component(component_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_component_api(component)


@router.post("/components", response_model=ComponentApi, status_code=status.HTTP_201_CREATED)
async def create_component(
    data: ComponentCreate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ComponentService = Depends(get_component_service),
) -> ComponentApi:
    try:
        await access.ensure_system(data.system_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_component_api(await service.create_component(data))


@router.put("/components/{component_id}", response_model=ComponentApi)
async def update_component(
    component_id: str,
    data: ComponentUpdate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ComponentService = Depends(get_component_service),
) -> ComponentApi:
    try:
        await access.ensure_component(component_id, user.id)
        component = await service.update_component(component_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_component_api(component)


@router.delete("/components/{component_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_component(
    component_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ComponentService = Depends(get_component_service),
) -> None:
    try:
        await access.ensure_component(component_id, user.id)
        await service.delete_component(component_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
