from .api_key_repository import ApiKeyRepository
from .category_repository import CategoryRepository
from .component_repository import ComponentRepository
from .identity_provider import IdentityProvider
from .maintenance_task_repository import MaintenanceTaskRepository
from .property_repository import PropertyRepository
from .service_record_repository import ServiceRecordRepository
from .space_repository import SpaceRepository
from .system_repository import SystemRepository

__all__ = [
    "ApiKeyRepository",
    "CategoryRepository",
    "ComponentRepository",
    "IdentityProvider",
    "MaintenanceTaskRepository",
    "PropertyRepository",
    "ServiceRecordRepository",
    "SpaceRepository",
    "SystemRepository",
]
