"""Tests for DemonstrationRunner."""

import pytest

from pattern_spine.errors import BadParamsError, DemonstrationFailure, PatternNotFoundError
from pattern_spine.models import DemonstrationStatus
from pattern_spine.registry import PatternRegistry, list_patterns
from pattern_spine.runner import DemonstrationRunner, get_runner


class TestRun:
    """Tests for running a single example."""

    @pytest.mark.parametrize("name", list_patterns())
    def test_every_registered_pattern_produces_output(self, name):
        result = DemonstrationRunner().run(name)
        assert result.status == DemonstrationStatus.COMPLETED
        assert result.succeeded
        assert len(result.lines) > 0
        assert all(isinstance(line, str) for line in result.lines)

    def test_unknown_name_raises_not_found(self, sample_registry):
        with pytest.raises(PatternNotFoundError):
            DemonstrationRunner(sample_registry).run("builder")

    def test_singleton_is_idempotent(self, sample_registry):
        runner = DemonstrationRunner(sample_registry)
        first = runner.run("singleton")
        second = runner.run("singleton")
        assert first.lines == second.lines

    def test_factory_unknown_type_raises_failure(self, sample_registry):
        runner = DemonstrationRunner(sample_registry)
        with pytest.raises(DemonstrationFailure) as exc_info:
            runner.run("factory", {"kind": "dragon"})
        assert "Unknown type" in str(exc_info.value)
        assert exc_info.value.pattern_name == "factory"
        assert isinstance(exc_info.value.cause, ValueError)

    def test_factory_known_type(self, sample_registry):
        result = DemonstrationRunner(sample_registry).run("factory", {"kind": "cat"})
        assert result.lines == ("cat says Meow",)

    def test_unknown_param_rejected(self, sample_registry):
        with pytest.raises(BadParamsError) as exc_info:
            DemonstrationRunner(sample_registry).run("singleton", {"colour": "red"})
        assert exc_info.value.invalid_params == ["colour"]

    def test_failure_discards_partial_output(self, failing_example):
        runner = DemonstrationRunner(PatternRegistry([failing_example]))
        with pytest.raises(DemonstrationFailure) as exc_info:
            runner.run("exploding")
        assert "RuntimeError: boom" == exc_info.value.message

    def test_default_runner_is_shared(self):
        assert get_runner() is get_runner()


class TestRunAll:
    """Tests for running many examples."""

    def test_runs_everything_in_registration_order(self):
        results = DemonstrationRunner().run_all()
        assert [r.name for r in results] == list_patterns()
        assert all(r.succeeded for r in results)

    def test_failure_is_recorded_and_run_continues(self, sample_registry, failing_example):
        registry = PatternRegistry([sample_registry.get("singleton"), failing_example, sample_registry.get("factory")])
        results = DemonstrationRunner(registry).run_all()

        assert [r.name for r in results] == ["singleton", "exploding", "factory"]
        failed = results[1]
        assert failed.status == DemonstrationStatus.FAILED
        assert failed.error_code == "DemonstrationFailure"
        assert failed.error == "RuntimeError: boom"
        assert failed.lines == ()
        assert results[0].succeeded and results[2].succeeded

    def test_fail_fast_stops_after_first_failure(self, sample_registry, failing_example):
        registry = PatternRegistry([failing_example, sample_registry.get("singleton")])
        results = DemonstrationRunner(registry).run_all(fail_fast=True)
        assert [r.name for r in results] == ["exploding"]

    def test_name_filter_keeps_given_order(self, sample_registry):
        results = DemonstrationRunner(sample_registry).run_all(["factory", "singleton"])
        assert [r.name for r in results] == ["factory", "singleton"]

    def test_unknown_name_fails_before_running_anything(self, sample_registry):
        with pytest.raises(PatternNotFoundError):
            DemonstrationRunner(sample_registry).run_all(["singleton", "visitor"])

    def test_empty_registry(self, empty_registry):
        assert DemonstrationRunner(empty_registry).run_all() == []
