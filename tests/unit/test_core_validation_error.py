"""Unit tests for ValidationError records and core enums.

Tests cover:
- Defaults (all None, severity ERROR)
- Keyword construction and post-construction mutation
- Edge values (empty, long strings, explicit None)
- String representation
- ResultStatus and ValidationSeverity members
"""

import pytest

from result_edge.core.enums import ResultStatus, ValidationSeverity
from result_edge.core.errors import ValidationError


@pytest.mark.unit
class TestValidationError:
    """Test ValidationError record."""

    def test_defaults(self):
        """Test parameterless construction."""
        error = ValidationError()

        assert error.identifier is None
        assert error.message is None
        assert error.code is None
        assert error.severity == ValidationSeverity.ERROR

    def test_message_only(self):
        """Test construction with message only keeps other defaults."""
        error = ValidationError(message="Invalid email format")

        assert error.message == "Invalid email format"
        assert error.identifier is None
        assert error.code is None
        assert error.severity == ValidationSeverity.ERROR

    def test_all_fields(self):
        """Test construction with every field."""
        error = ValidationError(
            identifier="Email",
            message="Invalid email format",
            code="EMAIL_001",
            severity=ValidationSeverity.WARNING,
        )

        assert error.identifier == "Email"
        assert error.message == "Invalid email format"
        assert error.code == "EMAIL_001"
        assert error.severity == ValidationSeverity.WARNING

    def test_fields_are_mutable(self):
        """Test fields can be reassigned after construction."""
        error = ValidationError(message="Initial message")

        error.message = "Updated message"
        error.identifier = "UpdatedField"
        error.code = "UPD_001"
        error.severity = ValidationSeverity.INFO

        assert error.message == "Updated message"
        assert error.identifier == "UpdatedField"
        assert error.code == "UPD_001"
        assert error.severity == ValidationSeverity.INFO

    def test_accepts_empty_and_long_strings(self):
        """Test empty and long messages are stored unchanged."""
        assert ValidationError(message="").message == ""
        assert len(ValidationError(message="x" * 1000).message) == 1000

    def test_accepts_explicit_none(self):
        """Test explicit None values are kept."""
        error = ValidationError(identifier=None, message=None, code=None)

        assert error.identifier is None
        assert error.message is None
        assert error.code is None

    def test_str_with_identifier(self):
        """Test str() prefixes the identifier."""
        error = ValidationError(identifier="Age", message="Age must be between 0 and 120")

        assert str(error) == "Age: Age must be between 0 and 120"

    def test_str_without_identifier(self):
        """Test str() of a document-level failure."""
        assert str(ValidationError(message="Document is empty")) == "Document is empty"
        assert str(ValidationError()) == ""

    def test_positional_arguments_rejected(self):
        """Test fields are keyword-only."""
        with pytest.raises(TypeError):
            ValidationError("Email", "Invalid")  # type: ignore[misc]


@pytest.mark.unit
class TestCoreEnums:
    """Test core enum members."""

    def test_result_status_members_in_order(self):
        """Test the closed status taxonomy and its declaration order."""
        assert [status.name for status in ResultStatus] == [
            "OK",
            "ERROR",
            "FORBIDDEN",
            "UNAUTHORIZED",
            "INVALID",
            "NOT_FOUND",
            "CONFLICT",
            "CRITICAL_ERROR",
            "UNAVAILABLE",
        ]

    def test_result_status_values(self):
        """Test string values."""
        assert ResultStatus.OK == "ok"
        assert ResultStatus.NOT_FOUND == "not_found"
        assert ResultStatus.CRITICAL_ERROR == "critical_error"

    def test_validation_severity_values(self):
        """Test severity members."""
        assert ValidationSeverity.ERROR == "error"
        assert ValidationSeverity.WARNING == "warning"
        assert ValidationSeverity.INFO == "info"
