"""Unit tests for update service selection."""

from recordpatch.core.config import Settings
from recordpatch.infrastructure.services.update import (
    HttpUpdateService,
    SqlUpdateService,
    create_update_service,
)


def test_creates_http_service_by_default():
    """Test that the HTTP backend is the default."""
    settings = Settings(update_service_api_key="rp_key")

    service = create_update_service(settings)

    assert isinstance(service, HttpUpdateService)
    assert service.settings.base_url == settings.update_service_url
    assert service.settings.api_key == "rp_key"
    service.close()


def test_creates_sql_service():
    """Test that the SQL backend is selected from settings."""
    settings = Settings(update_service_backend="sql", database_url="sqlite://")

    service = create_update_service(settings)

    assert isinstance(service, SqlUpdateService)
    assert str(service.engine.url) == "sqlite://"
    service.engine.dispose()
