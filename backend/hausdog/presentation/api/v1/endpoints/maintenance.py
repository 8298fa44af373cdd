"""Maintenance task endpoints — recurring chores, their completion and snoozing."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hausdog.application.schemas import (
    MaintenanceTaskComplete,
    MaintenanceTaskCreate,
    MaintenanceTaskResponse,
    MaintenanceTaskUpdate,
)
from hausdog.application.services import AccessService, MaintenanceService, PropertyService
from hausdog.domain.entities import AuthUser, MaintenanceTask
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.infrastructure.dependencies import (
    get_access_service,
    get_current_user,
    get_maintenance_service,
    get_property_service,
)

router = APIRouter(tags=["Maintenance"])


def _to_response(task: MaintenanceTask) -> MaintenanceTaskResponse:
    return MaintenanceTaskResponse.model_validate(task, from_attributes=True)


@router.get(
    "/properties/{property_id}/maintenance",
    response_model=list[MaintenanceTaskResponse],
)
async def list_property_tasks(
    property_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> list[MaintenanceTaskResponse]:
    """Tasks of a property that have not been dismissed, soonest due first."""
    try:
        await access.ensure_property(property_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [_to_response(t) for t in await service.list_for_property(property_id)]


@router.get(
    "/systems/{system_id}/maintenance",
    response_model=list[MaintenanceTaskResponse],
)
async def list_system_tasks(
    system_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> list[MaintenanceTaskResponse]:
    try:
        await access.ensure_system(system_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [_to_response(t) for t in await service.list_for_system(system_id)]


@router.get("/maintenance/upcoming", response_model=list[MaintenanceTaskResponse])
async def list_upcoming_tasks(
    limit: int = Query(20, ge=1, le=100),
    user: AuthUser = Depends(get_current_user),
    properties: PropertyService = Depends(get_property_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> list[MaintenanceTaskResponse]:
    """Active tasks across all of the caller's properties."""
    property_ids = [p.id for p in await properties.list_properties(user.id)]
    return [_to_response(t) for t in await service.list_upcoming(property_ids, limit)]


@router.get("/maintenance/{task_id}", response_model=MaintenanceTaskResponse)
async def get_task(
    task_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
) -> MaintenanceTaskResponse:
    try:
        task = await access.ensure_maintenance_task(task_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(task)


@router.post(
    "/maintenance",
    response_model=MaintenanceTaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    data: MaintenanceTaskCreate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> MaintenanceTaskResponse:
    try:
        await access.ensure_property(data.property_id, user.id)
        if data.system_id is not None:
            await access.ensure_system_in_property(data.system_id, data.property_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(await service.create_task(user.id, data))


@router.put("/maintenance/{task_id}", response_model=MaintenanceTaskResponse)
async def update_task(
    task_id: str,
    data: MaintenanceTaskUpdate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> MaintenanceTaskResponse:
    try:
        await access.ensure_maintenance_task(task_id, user.id)
        task = await service.update_task(task_id, user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(task)


@router.post("/maintenance/{task_id}/complete", response_model=MaintenanceTaskResponse)
async def complete_task(
    task_id: str,
    data: MaintenanceTaskComplete,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> MaintenanceTaskResponse:
    """Log the work as a service record and advance the next due date."""
    try:
        await access.ensure_maintenance_task(task_id, user.id)
        task = await service.complete_task(task_id, user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(task)


@router.post("/maintenance/{task_id}/snooze", response_model=MaintenanceTaskResponse)
async def snooze_task(
    task_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> MaintenanceTaskResponse:
    try:
        await access.ensure_maintenance_task(task_id, user.id)
        task = await service.snooze_task(task_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(task)


@router.post("/maintenance/{task_id}/dismiss", response_model=MaintenanceTaskResponse)
async def dismiss_task(
    task_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> MaintenanceTaskResponse:
    try:
        await access.ensure_maintenance_task(task_id, user.id)
        task = await service.dismiss_task(task_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(task)


@router.delete("/maintenance/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> None:
    try:
        await access.ensure_maintenance_task(task_id, user.id)
        await service.delete_task(task_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
