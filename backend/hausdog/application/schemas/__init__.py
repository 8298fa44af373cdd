from .address import AddressData, EMPTY_ADDRESS_DATA
from .api_key import ApiKeyCreate, ApiKeyCreatedResponse, ApiKeyResponse
from .category import CategoryResponse
from .component import (
    ComponentApi,
    ComponentCreate,
    ComponentUpdate,
    from_component_api,
    to_component_api,
)
from .current_property import CurrentProperty
from .maintenance_task import (
    MaintenanceTaskComplete,
    MaintenanceTaskCreate,
    MaintenanceTaskResponse,
    MaintenanceTaskUpdate,
)
from .property import PropertyCreate, PropertyUpdate, PropertyResponse
from .service_record import (
    ServiceRecordCreate,
    ServiceRecordUpdate,
    ServiceRecordResponse,
)
from .space import SpaceCreate, SpaceUpdate, SpaceResponse
from .system import SystemCreate, SystemUpdate, SystemResponse

__all__ = [
    "AddressData",
    "EMPTY_ADDRESS_DATA",
    "ApiKeyCreate",
    "ApiKeyCreatedResponse",
    "ApiKeyResponse",
    "CategoryResponse",
    "ComponentApi",
    "ComponentCreate",
    "ComponentUpdate",
    "from_component_api",
    "to_component_api",
    "CurrentProperty",
    "MaintenanceTaskComplete",
    "MaintenanceTaskCreate",
    "MaintenanceTaskResponse",
    "MaintenanceTaskUpdate",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyResponse",
    "ServiceRecordCreate",
    "ServiceRecordUpdate",
    "ServiceRecordResponse",
    "SpaceCreate",
    "SpaceUpdate",
    "SpaceResponse",
    "SystemCreate",
    "SystemUpdate",
    "SystemResponse",
]
