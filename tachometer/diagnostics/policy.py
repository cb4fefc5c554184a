"""End-of-run diagnostic verdict from accumulated caution/redline exposure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tachometer.config.constants import DIAGNOSTIC_MESSAGES
from tachometer.config.schema import PolicyThresholds
from tachometer.exposure.flight_hours import ExposureTotals


class DiagnosticStatus(Enum):
    SUCCESSFUL = 0
    MAINTENANCE_REQUIRED = 1
    SYSTEM_FAILURE = 2


@dataclass(frozen=True)
class Diagnostic:
    status: DiagnosticStatus
    message: str
    code: int             # report value, not a process exit code

    @classmethod
    def successful(cls, message: str = DIAGNOSTIC_MESSAGES["successful"]) -> Diagnostic:
        return cls(DiagnosticStatus.SUCCESSFUL, message, 0)

    @classmethod
    def maintenance(cls, message: str = DIAGNOSTIC_MESSAGES["maintenance"]) -> Diagnostic:
        return cls(DiagnosticStatus.MAINTENANCE_REQUIRED, message, 1)

    @classmethod
    def failure(cls, message: str = DIAGNOSTIC_MESSAGES["failure"]) -> Diagnostic:
        return cls(DiagnosticStatus.SYSTEM_FAILURE, message, 2)


class DiagnosticPolicy:
    """Maps cumulative exposure to a verdict.

    Rules, first match wins (all comparisons strict, so ties resolve to the
    lower severity):
        redline > failure limit                         -> SYSTEM_FAILURE
        redline > maintenance limit or caution > limit  -> MAINTENANCE_REQUIRED
        otherwise                                       -> SUCCESSFUL
    """

    def __init__(self, thresholds: Optional[PolicyThresholds] = None):
        self.thresholds = thresholds or PolicyThresholds.default()

    def evaluate(self, caution_seconds: int, redline_seconds: int) -> Diagnostic:
        t = self.thresholds
        if redline_seconds > t.failure_redline_seconds:
            return Diagnostic.failure()
        if (redline_seconds > t.maintenance_redline_seconds
                or caution_seconds > t.maintenance_caution_seconds):
            return Diagnostic.maintenance()
        return Diagnostic.successful()


def evaluate_exposure(
    totals: ExposureTotals, policy: Optional[DiagnosticPolicy] = None,
) -> Diagnostic:
    policy = policy or DiagnosticPolicy()
    return policy.evaluate(totals.caution_seconds, totals.redline_seconds)
