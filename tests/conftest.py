"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Settings and logger singletons are rebuilt per test
2. Shared ValidationError samples for result tests
"""

import pytest

from result_edge.core.config import get_settings
from result_edge.core.container import get_logger
from result_edge.core.enums import ValidationSeverity
from result_edge.core.errors import ValidationError


@pytest.fixture(autouse=True)
def clear_singletons():
    """Clear cached settings and logger before and after each test.

    Tests that patch environment variables or settings must not leak a
    cached instance into later tests.
    """
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


@pytest.fixture
def email_error() -> ValidationError:
    """Validation error for an email field."""
    return ValidationError(
        identifier="Email",
        message="Invalid email format",
        code="EMAIL_001",
        severity=ValidationSeverity.ERROR,
    )


@pytest.fixture
def phone_warning() -> ValidationError:
    """Validation warning for a phone field."""
    return ValidationError(
        identifier="Phone",
        message="Invalid phone",
        code="PHONE_001",
        severity=ValidationSeverity.WARNING,
    )
