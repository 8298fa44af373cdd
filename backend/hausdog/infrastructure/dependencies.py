"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from hausdog.config import get_settings
from hausdog.application.interfaces import IdentityProvider
from hausdog.application.services import (
    AccessService,
    ApiKeyService,
    AuthService,
    CategoryService,
    ComponentService,
    MaintenanceService,
    PropertyService,
    ServiceRecordService,
    SpaceService,
    SystemService,
)
from hausdog.domain.entities import API_KEY_PREFIX, AuthUser
from hausdog.domain.exceptions import IdentityProviderError
from hausdog.infrastructure.database.session import get_db_session
from hausdog.infrastructure.database.repositories import (
    SQLAlchemyApiKeyRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyComponentRepository,
    SQLAlchemyMaintenanceTaskRepository,
    SQLAlchemyPropertyRepository,
    SQLAlchemyServiceRecordRepository,
    SQLAlchemySpaceRepository,
    SQLAlchemySystemRepository,
)
from hausdog.infrastructure.supabase import SupabaseAuthClient

ACCESS_TOKEN_COOKIE = "hausdog_access_token"
REFRESH_TOKEN_COOKIE = "hausdog_refresh_token"


async def get_property_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PropertyService, None]:
    """Provides a PropertyService instance with its repository wired up."""
    yield PropertyService(SQLAlchemyPropertyRepository(session))


async def get_category_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CategoryService, None]:
    yield CategoryService(SQLAlchemyCategoryRepository(session))


async def get_space_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SpaceService, None]:
    yield SpaceService(SQLAlchemySpaceRepository(session))


async def get_system_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SystemService, None]:
    yield SystemService(SQLAlchemySystemRepository(session))


async def get_component_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ComponentService, None]:
    yield ComponentService(SQLAlchemyComponentRepository(session))


async def get_service_record_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ServiceRecordService, None]:
    yield ServiceRecordService(SQLAlchemyServiceRecordRepository(session))


async def get_maintenance_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MaintenanceService, None]:
    """Completion logs a service record in the same transaction as the task update."""
    yield MaintenanceService(
        SQLAlchemyMaintenanceTaskRepository(session),
        SQLAlchemyServiceRecordRepository(session),
    )


async def get_api_key_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ApiKeyService, None]:
    yield ApiKeyService(SQLAlchemyApiKeyRepository(session))


async def get_access_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AccessService, None]:
    """Provides ownership checks over every repository sharing the request session."""
    yield AccessService(
        properties=SQLAlchemyPropertyRepository(session),
        spaces=SQLAlchemySpaceRepository(session),
        systems=SQLAlchemySystemRepository(session),
        components=SQLAlchemyComponentRepository(session),
        service_records=SQLAlchemyServiceRecordRepository(session),
        maintenance_tasks=SQLAlchemyMaintenanceTaskRepository(session),
    )


def get_identity_provider() -> IdentityProvider:
    settings = get_settings()
    return SupabaseAuthClient(
        supabase_url=settings.supabase_url,
        api_key=settings.supabase_key,
    )


def get_auth_service(
    provider: IdentityProvider = Depends(get_identity_provider),
) -> AuthService:
    return AuthService(provider)


def _extract_access_token(request: Request) -> str | None:
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


async def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
    api_keys: ApiKeyService = Depends(get_api_key_service),
) -> AuthUser:
    """Resolve the caller from the session cookie or a Bearer header.

    Bearer values with the API key prefix are checked against the stored
    key hashes; anything else goes to the identity provider. Raises 401
    when no token is present or it is rejected.
    """
    token = _extract_access_token(request)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    if token.startswith(API_KEY_PREFIX):
        api_key = await api_keys.validate(token)
        if api_key is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")
        return AuthUser(id=api_key.user_id)
    try:
        return await auth_service.resolve_user(token)
    except IdentityProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired session"
        ) from e
