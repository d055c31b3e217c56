"""Tests for command layer."""

from pattern_spine.app.commands import (
    DescribePatternCommand,
    DescribePatternRequest,
    ListPatternsCommand,
    ListPatternsRequest,
    RunAllPatternsCommand,
    RunAllPatternsRequest,
    RunPatternCommand,
    RunPatternRequest,
)
from pattern_spine.app.models import ErrorCode
from pattern_spine.registry import PatternRegistry, list_patterns


class _BrokenRegistry(PatternRegistry):
    """Registry whose lookups fail with an unexpected error."""

    @property
    def examples(self):
        raise RuntimeError("registry offline")

    def get(self, name):
        raise RuntimeError("registry offline")


class TestListPatternsCommand:
    """Test suite for ListPatternsCommand."""

    def test_list_all_patterns(self) -> None:
        result = ListPatternsCommand().execute(ListPatternsRequest())

        assert result.success is True
        assert result.error is None
        assert [p.name for p in result.patterns] == list_patterns()
        assert result.total_count == len(result.patterns)
        assert result.filtered is False

    def test_list_by_category(self) -> None:
        result = ListPatternsCommand().execute(ListPatternsRequest(category="creational"))

        assert result.success is True
        assert result.filtered is True
        assert [p.name for p in result.patterns] == ["singleton", "factory", "builder"]

    def test_list_unknown_category(self) -> None:
        result = ListPatternsCommand().execute(ListPatternsRequest(category="quantum"))

        assert result.success is False
        assert result.error.code == ErrorCode.INVALID_PARAMS

    def test_list_empty_registry(self, empty_registry) -> None:
        result = ListPatternsCommand(empty_registry).execute(ListPatternsRequest())

        assert result.success is True
        assert result.patterns == []
        assert result.total_count == 0


class TestDescribePatternCommand:
    """Test suite for DescribePatternCommand."""

    def test_describe_existing_pattern(self) -> None:
        result = DescribePatternCommand().execute(DescribePatternRequest(name="factory"))

        assert result.success is True
        assert result.pattern.name == "factory"
        assert result.pattern.category == "creational"
        assert result.pattern.parameters == ["kind"]

    def test_describe_nonexistent_pattern(self) -> None:
        result = DescribePatternCommand().execute(DescribePatternRequest(name="visitor"))

        assert result.success is False
        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.error.details["pattern"] == "visitor"
        assert result.pattern is None


class TestRunPatternCommand:
    """Test suite for RunPatternCommand."""

    def test_run_success(self, sample_registry) -> None:
        result = RunPatternCommand(sample_registry).execute(RunPatternRequest(name="singleton"))

        assert result.success is True
        assert result.lines
        assert result.duration_seconds is not None

    def test_run_not_found(self, sample_registry) -> None:
        result = RunPatternCommand(sample_registry).execute(RunPatternRequest(name="builder"))

        assert result.success is False
        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.lines == []

    def test_run_demonstration_failure(self, sample_registry) -> None:
        result = RunPatternCommand(sample_registry).execute(
            RunPatternRequest(name="factory", params={"kind": "dragon"})
        )

        assert result.success is False
        assert result.error.code == ErrorCode.DEMONSTRATION_FAILURE
        assert "Unknown type" in result.error.message
        assert result.lines == []

    def test_run_invalid_params(self, sample_registry) -> None:
        result = RunPatternCommand(sample_registry).execute(
            RunPatternRequest(name="factory", params={"species": "cat"})
        )

        assert result.success is False
        assert result.error.code == ErrorCode.INVALID_PARAMS
        assert result.error.details["invalid"] == ["species"]


class TestRunAllPatternsCommand:
    """Test suite for RunAllPatternsCommand."""

    def test_run_all_records_failures(self, sample_registry, failing_example) -> None:
        registry = PatternRegistry([*sample_registry, failing_example])
        result = RunAllPatternsCommand(registry).execute(RunAllPatternsRequest())

        assert result.success is True
        assert [r.name for r in result.results] == ["singleton", "factory", "exploding"]
        assert result.failed_count == 1

    def test_run_all_by_category(self) -> None:
        result = RunAllPatternsCommand().execute(RunAllPatternsRequest(category="structural"))

        assert result.success is True
        assert [r.name for r in result.results] == ["adapter", "decorator"]

    def test_run_all_unknown_category(self) -> None:
        result = RunAllPatternsCommand().execute(RunAllPatternsRequest(category="quantum"))

        assert result.success is False
        assert result.error.code == ErrorCode.INVALID_PARAMS

    def test_run_all_unknown_name(self, sample_registry) -> None:
        result = RunAllPatternsCommand(sample_registry).execute(RunAllPatternsRequest(names=["visitor"]))

        assert result.success is False
        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.results == []


class TestUnexpectedErrors:
    """Unexpected exceptions surface as INTERNAL_ERROR instead of escaping."""

    def test_list_internal_error(self) -> None:
        result = ListPatternsCommand(_BrokenRegistry()).execute(ListPatternsRequest())

        assert result.failed()
        assert result.error.code == ErrorCode.INTERNAL_ERROR
        assert "registry offline" in result.error.message

    def test_describe_internal_error(self) -> None:
        result = DescribePatternCommand(_BrokenRegistry()).execute(DescribePatternRequest(name="factory"))

        assert result.failed()
        assert result.error.code == ErrorCode.INTERNAL_ERROR

    def test_run_internal_error(self) -> None:
        result = RunPatternCommand(_BrokenRegistry()).execute(RunPatternRequest(name="factory"))

        assert result.failed()
        assert result.error.code == ErrorCode.INTERNAL_ERROR
        assert result.error.message == "Execution error: registry offline"

    def test_run_all_internal_error(self) -> None:
        result = RunAllPatternsCommand(_BrokenRegistry()).execute(RunAllPatternsRequest())

        assert result.failed()
        assert result.error.code == ErrorCode.INTERNAL_ERROR
        assert result.results == []
