"""Unit tests for Result.map propagation.

Tests cover:
- Successful transforms (type change, complex payloads)
- Failure short-circuit for every failure status
- Chained maps (composition and stop-at-first-failure)
- Identity map equivalence
- Transform exceptions propagating unchanged
"""

from unittest.mock import MagicMock

import pytest

from result_edge.core.enums import ResultStatus
from result_edge.core.result import Result


@pytest.mark.unit
class TestMapSuccess:
    """Test map() on successful results."""

    def test_map_transforms_value(self):
        """Test map() applies the transform to the value."""
        mapped = Result.success(42).map(str)

        assert mapped.is_success
        assert mapped.value == "42"
        assert mapped.status == ResultStatus.OK

    def test_map_string_to_int(self):
        """Test map() can change payload type."""
        assert Result.success("123").map(int).value == 123

    def test_map_to_complex_object(self):
        """Test map() can build a collection payload."""
        mapped = Result.success(42).map(lambda x: [x, x * 2, x * 3])

        assert mapped.value == [42, 84, 126]

    def test_map_keeps_success_message_and_correlation_id(self):
        """Test map() carries success metadata forward."""
        source = Result(value=1, success_message="done", correlation_id="corr-9")

        mapped = source.map(lambda x: x + 1)

        assert mapped.success_message == "done"
        assert mapped.correlation_id == "corr-9"

    def test_identity_map_is_equivalent(self):
        """Test map(identity) keeps value, status and messages."""
        source = Result.success({"id": 1}, "Loaded")

        mapped = source.map(lambda x: x)

        assert mapped == source

    def test_transform_exception_propagates(self):
        """Test exceptions raised by the transform are not caught."""
        with pytest.raises(ValueError):
            Result.success("not a number").map(int)


@pytest.mark.unit
class TestMapFailure:
    """Test map() on failed results."""

    @pytest.mark.parametrize(
        "result",
        [
            Result.error("Error 1", "Error 2"),
            Result.error(),
            Result.not_found(),
            Result.not_found("Resource not found", "ID: 123"),
            Result.unauthorized(),
            Result.forbidden(),
            Result.conflict(),
            Result.conflict("Version mismatch", "Resource modified"),
            Result.critical_error("Database failure", "Connection lost"),
            Result.unavailable("Service unavailable", "Retry later"),
        ],
    )
    def test_map_preserves_failure_and_skips_transform(self, result):
        """Test failure status and errors pass through without calling transform."""
        transform = MagicMock()

        mapped = result.map(transform)

        transform.assert_not_called()
        assert mapped.is_success is False
        assert mapped.status == result.status
        assert mapped.errors == result.errors
        assert mapped.value is None

    def test_map_preserves_validation_errors(self, email_error, phone_warning):
        """Test INVALID results keep validation errors in order."""
        mapped = Result[int].invalid(email_error, phone_warning).map(str)

        assert mapped.status == ResultStatus.INVALID
        assert [e.identifier for e in mapped.validation_errors] == ["Email", "Phone"]

    def test_map_keeps_correlation_id_on_failure(self):
        """Test correlation id rides along with the failure."""
        mapped = Result.error_with_correlation_id("corr-1", "boom").map(str)

        assert mapped.correlation_id == "corr-1"

    def test_error_scenario_maps_to_same_errors(self):
        """Test Error("a", "b").map(str) keeps status and errors."""
        mapped = Result.error("a", "b").map(str)

        assert mapped.status == ResultStatus.ERROR
        assert mapped.errors == ("a", "b")
        assert mapped.value is None


@pytest.mark.unit
class TestMapChaining:
    """Test chained map() calls."""

    def test_chained_maps_compose(self):
        """Test success(5).map(x*2).map(x+1) yields 11."""
        mapped = Result.success(5).map(lambda x: x * 2).map(lambda x: x + 1)

        assert mapped.status == ResultStatus.OK
        assert mapped.value == 11

    def test_chained_maps_with_type_change(self):
        """Test three chained transforms including a type change."""
        mapped = (
            Result.success(10)
            .map(lambda x: x * 2)
            .map(lambda x: x + 5)
            .map(str)
        )

        assert mapped.value == "25"

    def test_chain_stops_at_first_failure(self):
        """Test no transform in the chain runs after a failure."""
        first, second = MagicMock(), MagicMock()

        mapped = Result.error("Initial error").map(first).map(second)

        first.assert_not_called()
        second.assert_not_called()
        assert mapped.status == ResultStatus.ERROR
        assert mapped.errors == ("Initial error",)
