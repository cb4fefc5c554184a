"""Tests for the end-of-run diagnostic policy."""

import dataclasses

import pytest

from tachometer.config.schema import PolicyThresholds
from tachometer.diagnostics.policy import (
    Diagnostic,
    DiagnosticPolicy,
    DiagnosticStatus,
    evaluate_exposure,
)
from tachometer.engine.conversions import rpm_to_rad_per_sec
from tachometer.exposure.flight_hours import ExposureTotals

HOUR = 3600


class TestDiagnosticPolicy:
    @pytest.mark.parametrize("caution, redline, status, code", [
        (0, 0, DiagnosticStatus.SUCCESSFUL, 0),
        (0, 1 * HOUR, DiagnosticStatus.SUCCESSFUL, 0),
        (3 * HOUR, 0, DiagnosticStatus.SUCCESSFUL, 0),
        (3 * HOUR, 1 * HOUR, DiagnosticStatus.SUCCESSFUL, 0),
        (0, 1 * HOUR + 1, DiagnosticStatus.MAINTENANCE_REQUIRED, 1),
        (3 * HOUR + 1, 0, DiagnosticStatus.MAINTENANCE_REQUIRED, 1),
        (0, 4 * HOUR, DiagnosticStatus.MAINTENANCE_REQUIRED, 1),
        (0, 4 * HOUR + 1, DiagnosticStatus.SYSTEM_FAILURE, 2),
        (50 * HOUR, 4 * HOUR + 1, DiagnosticStatus.SYSTEM_FAILURE, 2),
    ])
    def test_decision_table(self, policy, caution, redline, status, code):
        diag = policy.evaluate(caution, redline)
        assert diag.status == status
        assert diag.code == code

    def test_messages(self, policy):
        assert "SUCCESSFUL" in policy.evaluate(0, 0).message
        assert "MAINTENANCE REQUIRED" in policy.evaluate(10801, 0).message
        assert "SYSTEM FAILURE" in policy.evaluate(0, 14401).message

    def test_failure_takes_precedence(self, policy):
        """Caution over limit and redline over failure limit -> failure, not maintenance."""
        diag = policy.evaluate(10 * HOUR, 5 * HOUR)
        assert diag.status == DiagnosticStatus.SYSTEM_FAILURE

    def test_custom_thresholds(self):
        policy = DiagnosticPolicy(PolicyThresholds(
            failure_redline_seconds=100,
            maintenance_redline_seconds=10,
            maintenance_caution_seconds=50,
        ))
        assert policy.evaluate(0, 10).code == 0
        assert policy.evaluate(0, 11).code == 1
        assert policy.evaluate(51, 0).code == 1
        assert policy.evaluate(0, 101).code == 2

    def test_invalid_thresholds(self):
        with pytest.raises(ValueError):
            PolicyThresholds(
                failure_redline_seconds=HOUR,
                maintenance_redline_seconds=2 * HOUR,
                maintenance_caution_seconds=HOUR,
            )
        with pytest.raises(ValueError):
            PolicyThresholds(
                failure_redline_seconds=HOUR,
                maintenance_redline_seconds=0,
                maintenance_caution_seconds=-1,
            )

    def test_diagnostic_is_immutable(self, policy):
        diag = policy.evaluate(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            diag.code = 2

    def test_factories(self):
        assert Diagnostic.successful().code == 0
        assert Diagnostic.maintenance().code == 1
        assert Diagnostic.failure().code == 2
        assert Diagnostic.failure("custom").message == "custom"

    def test_evaluate_exposure(self):
        totals = ExposureTotals(total_seconds=20000, caution_seconds=0, redline_seconds=14401)
        assert evaluate_exposure(totals).status == DiagnosticStatus.SYSTEM_FAILURE


class TestRedlineScenario:
    def test_one_hour_at_redline_boundary(self, engine, accumulator, policy):
        """Exactly 1 h at 9800 rpm is still Successful; one more second tips it."""
        engine.update(rpm_to_rad_per_sec(9800))
        for _ in range(60):
            accumulator.record(engine.state, 60.0)

        assert accumulator.redline_seconds == 3600
        assert policy.evaluate(accumulator.caution_seconds, accumulator.redline_seconds).status \
            == DiagnosticStatus.SUCCESSFUL

        accumulator.record(engine.state, 1.0)
        assert accumulator.redline_seconds == 3601
        assert policy.evaluate(accumulator.caution_seconds, accumulator.redline_seconds).status \
            == DiagnosticStatus.MAINTENANCE_REQUIRED
