from .api_key import ApiKeyModel
from .category import CategoryModel
from .component import ComponentModel
from .maintenance_task import MaintenanceTaskModel
from .property import PropertyModel
from .service_record import ServiceRecordModel
from .space import SpaceModel
from .system import SystemModel

__all__ = [
    "ApiKeyModel",
    "CategoryModel",
    "ComponentModel",
    "MaintenanceTaskModel",
    "PropertyModel",
    "ServiceRecordModel",
    "SpaceModel",
    "SystemModel",
]
