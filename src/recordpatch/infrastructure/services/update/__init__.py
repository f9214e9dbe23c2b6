"""Update service backends.

The change tracker dispatches update requests to one of these services.
"""

from sqlalchemy import create_engine

from recordpatch.core.config import Settings, get_settings
from recordpatch.infrastructure.services.update.http_update_service import (
    HttpUpdateService,
    HttpUpdateSettings,
)
from recordpatch.infrastructure.services.update.schemas import (
    EntityReferencePayload,
    MoneyPayload,
    OptionSetValuePayload,
    UpdatePayload,
)
from recordpatch.infrastructure.services.update.sql_update_service import SqlUpdateService
from recordpatch.infrastructure.services.update.update_service import UpdateService


def create_update_service(settings: Settings | None = None) -> UpdateService:
    """Create the update service selected by ``update_service_backend``.

    Args:
        settings: Optional settings instance. If not provided, will load from environment.

    Returns:
        The configured update service.
    """
    if settings is None:
        settings = get_settings()

    if settings.update_service_backend == "sql":
        engine = create_engine(settings.database_url, echo=settings.db_echo)
        return SqlUpdateService(engine)

    return HttpUpdateService(
        HttpUpdateSettings(
            base_url=settings.update_service_url,
            api_key=settings.update_service_api_key,
            api_key_header=settings.update_service_api_key_header,
            timeout_seconds=settings.update_service_timeout_seconds,
        )
    )


__all__ = [
    "EntityReferencePayload",
    "HttpUpdateService",
    "HttpUpdateSettings",
    "MoneyPayload",
    "OptionSetValuePayload",
    "SqlUpdateService",
    "UpdatePayload",
    "UpdateService",
    "create_update_service",
]
