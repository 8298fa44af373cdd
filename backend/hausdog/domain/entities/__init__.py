from .api_key import ApiKey, API_KEY_PREFIX, generate_api_key, hash_api_key
from .auth_session import AuthSession, AuthUser
from .category import Category, DEFAULT_CATEGORIES
from .component import Component
from .maintenance_task import (
    MaintenanceTask,
    STATUS_ACTIVE,
    STATUS_DISMISSED,
    STATUS_PAUSED,
    TASK_STATUSES,
    add_months,
)
from .property import Property
from .service_record import ServiceRecord
from .space import Space
from .system import System

__all__ = [
    "ApiKey",
    "API_KEY_PREFIX",
    "generate_api_key",
    "hash_api_key",
    "AuthSession",
    "AuthUser",
    "Category",
    "DEFAULT_CATEGORIES",
    "Component",
    "MaintenanceTask",
    "STATUS_ACTIVE",
    "STATUS_DISMISSED",
    "STATUS_PAUSED",
    "TASK_STATUSES",
    "add_months",
    "Property",
    "ServiceRecord",
    "Space",
    "System",
]
