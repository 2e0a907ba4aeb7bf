"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator, Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from salonflow.config import get_settings
from salonflow.application.interfaces import AuthAdapter
from salonflow.application.services import (
    BusinessSettingsService,
    DashboardService,
    ResourceConfig,
    ResourceHandler,
)
from salonflow.domain.entities import Principal
from salonflow.domain.exceptions import AuthenticationError
from salonflow.infrastructure.auth.remote_auth_adapter import RemoteAuthAdapter
from salonflow.infrastructure.database.models import MODEL_REGISTRY
from salonflow.infrastructure.database.session import get_db_session
from salonflow.infrastructure.database.repositories import (
    SQLAlchemyBusinessSettingsRepository,
    SQLAlchemyDashboardRepository,
    SQLAlchemyResourceStore,
)

_BEARER_PREFIX = "bearer "


def get_auth_adapter() -> AuthAdapter:
    """Provides the identity-provider adapter configured from settings."""
    settings = get_settings()
    return RemoteAuthAdapter(
        base_url=settings.auth_provider_url,
        api_key=settings.auth_provider_key,
        timeout=settings.auth_timeout_seconds,
    )


async def get_current_principal(
    request: Request,
    auth: AuthAdapter = Depends(get_auth_adapter),
) -> Principal:
    """Resolve the caller from the ``Authorization: Bearer <token>`` header.

    Raises:
        AuthenticationError: missing header, wrong scheme or rejected token.
    """
    header = request.headers.get("Authorization", "")
    if not header.lower().startswith(_BEARER_PREFIX):
        raise AuthenticationError("Missing bearer token")
    token = header[len(_BEARER_PREFIX):].strip()
    principal = await auth.validate_token(token)
    if principal is None:
        raise AuthenticationError("Invalid or expired token")
    return principal


def resource_handler_provider(
    config: ResourceConfig,
) -> Callable[..., AsyncGenerator[ResourceHandler, None]]:
    """Build a dependency that yields a ResourceHandler bound to ``config``."""
    model = MODEL_REGISTRY[config.table]

    async def get_resource_handler(
        session: AsyncSession = Depends(get_db_session),
    ) -> AsyncGenerator[ResourceHandler, None]:
        store = SQLAlchemyResourceStore(session, model, config.resource_type)
        yield ResourceHandler(config, store)

    return get_resource_handler


async def get_business_settings_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[BusinessSettingsService, None]:
    """Provides a BusinessSettingsService with its repository wired up."""
    repository = SQLAlchemyBusinessSettingsRepository(session)
    yield BusinessSettingsService(repository)


async def get_dashboard_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DashboardService, None]:
    """Provides a DashboardService with its read-model repository wired up."""
    repository = SQLAlchemyDashboardRepository(session)
    yield DashboardService(repository)
