"""Tests for error types and their structured metadata."""

import pytest

from pattern_spine.errors import (
    BadParamsError,
    DemonstrationFailure,
    ErrorCategory,
    PatternNotFoundError,
    PatternSpineError,
)


class TestPatternNotFoundError:
    def test_error_contains_pattern_name(self):
        error = PatternNotFoundError("visitor")
        assert "visitor" in str(error)
        assert error.pattern_name == "visitor"
        assert error.category == ErrorCategory.NOT_FOUND

    def test_available_names_in_message(self):
        error = PatternNotFoundError("visitor", available=["singleton", "factory"])
        assert "Available: singleton, factory" in error.message

    def test_is_spine_error(self):
        with pytest.raises(PatternSpineError):
            raise PatternNotFoundError("visitor")


class TestDemonstrationFailure:
    def test_wraps_cause(self):
        cause = ValueError("Unknown type: dragon")
        error = DemonstrationFailure("factory", cause, params={"kind": "dragon"})

        assert error.message == "ValueError: Unknown type: dragon"
        assert error.cause is cause
        assert error.__cause__ is cause
        assert error.category == ErrorCategory.DEMONSTRATION

    def test_to_dict(self):
        error = DemonstrationFailure("factory", ValueError("Unknown type: dragon"), params={"kind": "dragon"})
        data = error.to_dict()

        assert data["error_type"] == "DemonstrationFailure"
        assert data["category"] == "DEMONSTRATION"
        assert data["context"] == {"pattern": "factory", "params": {"kind": "dragon"}}
        assert data["cause"] == "ValueError: Unknown type: dragon"


class TestBadParamsError:
    def test_has_details(self):
        error = BadParamsError("bad", invalid_params=["colour"])
        assert error.invalid_params == ["colour"]
        assert error.category == ErrorCategory.VALIDATION

    def test_with_context_is_fluent(self):
        error = BadParamsError("bad").with_context(pattern="singleton", hint="none")
        assert error.context.pattern == "singleton"
        assert error.context.metadata == {"hint": "none"}
        assert error.to_dict()["context"] == {"pattern": "singleton", "hint": "none"}
