from .access_service import AccessService
from .api_key_service import ApiKeyService
from .auth_service import AuthService
from .category_service import CategoryService
from .component_service import ComponentService
from .maintenance_service import MaintenanceService
from .property_service import PropertyService
from .service_record_service import ServiceRecordService
from .space_service import SpaceService
from .system_service import SystemService

__all__ = [
    "AccessService",
    "ApiKeyService",
    "AuthService",
    "CategoryService",
    "ComponentService",
    "MaintenanceService",
    "PropertyService",
    "ServiceRecordService",
    "SpaceService",
    "SystemService",
]
