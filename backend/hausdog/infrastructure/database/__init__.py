from .base import Base
from .session import get_engine, get_session_factory, get_db_session
from .models import (
    ApiKeyModel,
    CategoryModel,
    ComponentModel,
    MaintenanceTaskModel,
    PropertyModel,
    ServiceRecordModel,
    SpaceModel,
    SystemModel,
)

__all__ = [
    "Base",
    "get_engine",
    "get_session_factory",
    "get_db_session",
    "ApiKeyModel",
    "CategoryModel",
    "ComponentModel",
    "MaintenanceTaskModel",
    "PropertyModel",
    "ServiceRecordModel",
    "SpaceModel",
    "SystemModel",
]
