"""Pytest configuration for all tests."""

import uuid

import pytest

from recordpatch.core.config import Settings, get_settings
from recordpatch.core.logging import configure_logging
from recordpatch.domain.entities import Money, Record


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure console logging once for the test session."""
    configure_logging(Settings(environment="testing", log_format="console", log_level="DEBUG"))


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Make sure no test sees settings cached by another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def contact() -> Record:
    """A contact record with no attributes."""
    return Record("contact", uuid.uuid4())


@pytest.fixture
def baggins() -> Record:
    """A contact record with a last name."""
    return Record("contact", uuid.uuid4(), {"lastname": "Baggins"})


@pytest.fixture
def account_with_revenue() -> Record:
    """An account record holding a Money attribute."""
    return Record("account", uuid.uuid4(), {"revenue": Money(1000)})
