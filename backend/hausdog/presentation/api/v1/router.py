"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from hausdog.presentation.api.v1.endpoints.health import router as health_router
from hausdog.presentation.api.v1.endpoints.properties import router as properties_router
from hausdog.presentation.api.v1.endpoints.categories import router as categories_router
from hausdog.presentation.api.v1.endpoints.spaces import router as spaces_router
from hausdog.presentation.api.v1.endpoints.systems import router as systems_router
from hausdog.presentation.api.v1.endpoints.components import router as components_router
from hausdog.presentation.api.v1.endpoints.service_records import router as service_records_router
from hausdog.presentation.api.v1.endpoints.maintenance import router as maintenance_router
from hausdog.presentation.api.v1.endpoints.api_keys import router as api_keys_router
from hausdog.presentation.api.v1.endpoints.current_property import (
    router as current_property_router,
)

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(properties_router)
router.include_router(categories_router)
router.include_router(spaces_router)
router.include_router(systems_router)
router.include_router(components_router)
router.include_router(service_records_router)
router.include_router(maintenance_router)
router.include_router(api_keys_router)
router.include_router(current_property_router)
