from .api_key_repository import SQLAlchemyApiKeyRepository
from .category_repository import SQLAlchemyCategoryRepository
from .component_repository import SQLAlchemyComponentRepository
from .maintenance_task_repository import SQLAlchemyMaintenanceTaskRepository
from .property_repository import SQLAlchemyPropertyRepository
from .service_record_repository import SQLAlchemyServiceRecordRepository
from .space_repository import SQLAlchemySpaceRepository
from .system_repository import SQLAlchemySystemRepository

__all__ = [
    "SQLAlchemyApiKeyRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyComponentRepository",
    "SQLAlchemyMaintenanceTaskRepository",
    "SQLAlchemyPropertyRepository",
    "SQLAlchemyServiceRecordRepository",
    "SQLAlchemySpaceRepository",
    "SQLAlchemySystemRepository",
]
