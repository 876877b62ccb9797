"""
Unit tests for the Result type and Error.
"""

# Third-party imports
import pytest

# Local imports
from userhub.domain.common.result import Error, Result
from userhub.domain.exceptions import DomainException, InvalidResultAccessError

SAMPLE_ERROR = Error("Sample.Code", "Something went wrong.")


@pytest.mark.unit
class TestError:
    """Test Error value."""

    def test_error_fields(self):
        assert SAMPLE_ERROR.code == "Sample.Code"
        assert SAMPLE_ERROR.message == "Something went wrong."

    def test_errors_compare_by_value(self):
        assert Error("A", "m") == Error("A", "m")
        assert Error("A", "m") != Error("B", "m")

    def test_error_is_immutable(self):
        with pytest.raises(AttributeError):
            SAMPLE_ERROR.code = "Other"

    def test_to_dict(self):
        assert SAMPLE_ERROR.to_dict() == {"code": "Sample.Code", "message": "Something went wrong."}

    def test_str(self):
        assert str(SAMPLE_ERROR) == "Sample.Code: Something went wrong."


@pytest.mark.unit
class TestResultConstruction:
    """Test creating results."""

    def test_success(self):
        result = Result.success(42)

        assert result.is_success is True
        assert result.is_failure is False
        assert result.value == 42

    def test_failure(self):
        result = Result.failure(SAMPLE_ERROR)

        assert result.is_success is False
        assert result.is_failure is True
        assert result.error == SAMPLE_ERROR

    def test_success_may_wrap_none(self):
        result = Result.success(None)

        assert result.is_success
        assert result.value is None

    def test_of_value_is_success(self):
        assert Result.of("hello") == Result.success("hello")

    def test_of_error_is_failure(self):
        result = Result.of(SAMPLE_ERROR)

        assert result.is_failure
        assert result.error is SAMPLE_ERROR

    def test_inconsistent_construction_rejected(self):
        with pytest.raises(ValueError):
            Result(True, 1, SAMPLE_ERROR)
        with pytest.raises(ValueError):
            Result(False, None, None)


@pytest.mark.unit
class TestResultAccess:
    """Test reading the wrong side of a result."""

    def test_value_of_failure_raises(self):
        result = Result.failure(SAMPLE_ERROR)

        with pytest.raises(InvalidResultAccessError) as exc_info:
            _ = result.value

        assert exc_info.value.attempted == "value"
        assert exc_info.value.state == "failure"

    def test_error_of_success_raises(self):
        result = Result.success("ok")

        with pytest.raises(InvalidResultAccessError, match="Cannot access error when result is a success"):
            _ = result.error

    def test_access_error_is_runtime_and_domain_error(self):
        error = InvalidResultAccessError("value", "failure")

        assert isinstance(error, RuntimeError)
        assert isinstance(error, DomainException)
        assert error.details == {"attempted": "value", "state": "failure"}


@pytest.mark.unit
class TestResultBehaviour:
    """Test immutability, equality and mapping."""

    def test_result_is_immutable(self):
        result = Result.success(1)

        with pytest.raises(AttributeError):
            result._value = 2

    def test_equality(self):
        assert Result.success(1) == Result.success(1)
        assert Result.success(1) != Result.success(2)
        assert Result.failure(SAMPLE_ERROR) == Result.failure(Error("Sample.Code", "Something went wrong."))
        assert Result.success(1) != 1

    def test_hashable(self):
        assert len({Result.success(1), Result.success(1), Result.failure(SAMPLE_ERROR)}) == 2

    def test_map_success(self):
        assert Result.success(2).map(lambda v: v * 10) == Result.success(20)

    def test_map_failure_passes_through(self):
        called = []
        result = Result.failure(SAMPLE_ERROR).map(called.append)

        assert result.error == SAMPLE_ERROR
        assert called == []

    def test_repr(self):
        assert repr(Result.success(1)) == "Result.success(1)"
        assert repr(Result.failure(SAMPLE_ERROR)).startswith("Result.failure(Error(")
