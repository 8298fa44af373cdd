"""Service record endpoints — history logged against a property, its systems and components."""

from fastapi import APIRouter, Depends, HTTPException, status

from hausdog.application.schemas import (
    ServiceRecordCreate,
    ServiceRecordResponse,
    ServiceRecordUpdate,
)
from hausdog.application.services import AccessService, ServiceRecordService
from hausdog.domain.entities import AuthUser
from hausdog.domain.exceptions import EntityNotFoundError
from hausdog.infrastructure.dependencies import (
    get_access_service,
    get_current_user,
    get_service_record_service,
)

router = APIRouter(tags=["Service Records"])


@router.get(
    "/properties/{property_id}/service-records",
    response_model=list[ServiceRecordResponse],
)
async def list_property_records(
    property_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ServiceRecordService = Depends(get_service_record_service),
) -> list[ServiceRecordResponse]:
    """Every service record of a property, including document-only ones."""
    try:
        await access.ensure_property(property_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    records = await service.list_for_property(property_id)
    return [ServiceRecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.get(
    "/systems/{system_id}/service-records",
    response_model=list[ServiceRecordResponse],
)
async def list_system_records(
    system_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ServiceRecordService = Depends(get_service_record_service),
) -> list[ServiceRecordResponse]:
    """Service history of a system, most recent first."""
    try:
        await access.ensure_system(system_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    records = await service.list_for_system(system_id)
    return [ServiceRecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.get(
    "/components/{component_id}/service-records",
    response_model=list[ServiceRecordResponse],
)
async def list_component_records(
    component_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ServiceRecordService = Depends(get_service_record_service),
) -> list[ServiceRecordResponse]:
    try:
        await access.ensure_component(component_id, user.id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    records = await service.list_for_component(component_id)
    return [ServiceRecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.get("/service-records/{record_id}", response_model=ServiceRecordResponse)
async def get_record(
    record_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ServiceRecordService = Depends(get_service_record_service),
) -> ServiceRecordResponse:
    try:
        await access.ensure_service_record(record_id, user.id)
        record = await service.get_record(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ServiceRecordResponse.model_validate(record, from_attributes=True)


@router.post(
    "/service-records",
    response_model=ServiceRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_record(
    data: ServiceRecordCreate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ServiceRecordService = Depends(get_service_record_service),
) -> ServiceRecordResponse:
    """Log a service event on a property, optionally against a system or component."""
    try:
        property_id = await access.resolve_record_property(
            user.id,
            property_id=data.property_id,
            system_id=data.system_id,
            component_id=data.component_id,
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    record = await service.create_record(property_id, data)
    return ServiceRecordResponse.model_validate(record, from_attributes=True)


@router.put("/service-records/{record_id}", response_model=ServiceRecordResponse)
async def update_record(
    record_id: str,
    data: ServiceRecordUpdate,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ServiceRecordService = Depends(get_service_record_service),
) -> ServiceRecordResponse:
    try:
        await access.ensure_service_record(record_id, user.id)
        record = await service.update_record(record_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ServiceRecordResponse.model_validate(record, from_attributes=True)


@router.delete("/service-records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: str,
    user: AuthUser = Depends(get_current_user),
    access: AccessService = Depends(get_access_service),
    service: ServiceRecordService = Depends(get_service_record_service),
) -> None:
    try:
        await access.ensure_service_record(record_id, user.id)
        await service.delete_record(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
