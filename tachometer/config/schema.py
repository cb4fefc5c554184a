"""Immutable configuration objects for the classifier, policy, and stimulus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from tachometer.config.constants import (
    BAND_RPM_LIMITS,
    FAILURE_REDLINE_SECONDS,
    MAINTENANCE_CAUTION_SECONDS,
    MAINTENANCE_REDLINE_SECONDS,
    STIMULUS_DISTRIBUTION,
    TICK_SECONDS,
    TOTAL_TICKS,
)


@dataclass(frozen=True)
class BandThresholds:
    """Upper inclusive filtered-RPM limit of each named band.

    Bands are contiguous by construction: Climb starts at idle_max + 1,
    Cruise at climb_max + 1, and so on.
    """

    idle_min: int
    idle_max: int
    climb_max: int
    cruise_max: int
    caution_max: int
    redline_max: int

    def __post_init__(self):
        limits = [
            self.idle_min, self.idle_max, self.climb_max,
            self.cruise_max, self.caution_max, self.redline_max,
        ]
        if self.idle_min < 1:
            raise ValueError(f"idle_min must be >= 1, got {self.idle_min}")
        if any(b <= a for a, b in zip(limits, limits[1:])):
            raise ValueError(f"Band limits must be strictly ascending, got {limits}")

    @classmethod
    def default(cls) -> BandThresholds:
        return cls(
            idle_min=BAND_RPM_LIMITS["idle"][0],
            idle_max=BAND_RPM_LIMITS["idle"][1],
            climb_max=BAND_RPM_LIMITS["climb"][1],
            cruise_max=BAND_RPM_LIMITS["cruise"][1],
            caution_max=BAND_RPM_LIMITS["caution"][1],
            redline_max=BAND_RPM_LIMITS["redline"][1],
        )


@dataclass(frozen=True)
class PolicyThresholds:
    """Exposure limits (seconds) for the diagnostic verdict. Comparisons are strict."""

    failure_redline_seconds: int
    maintenance_redline_seconds: int
    maintenance_caution_seconds: int

    def __post_init__(self):
        for name in ("failure_redline_seconds", "maintenance_redline_seconds",
                     "maintenance_caution_seconds"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.maintenance_redline_seconds > self.failure_redline_seconds:
            raise ValueError(
                "maintenance_redline_seconds must not exceed failure_redline_seconds"
            )

    @classmethod
    def default(cls) -> PolicyThresholds:
        return cls(
            failure_redline_seconds=FAILURE_REDLINE_SECONDS,
            maintenance_redline_seconds=MAINTENANCE_REDLINE_SECONDS,
            maintenance_caution_seconds=MAINTENANCE_CAUTION_SECONDS,
        )


@dataclass(frozen=True)
class StimulusBand:
    """One weighted RPM range of the stimulus distribution."""

    name: str
    probability: float
    rpm_min: float
    rpm_max: float


@dataclass(frozen=True)
class StimulusProfile:
    """Probability distribution over RPM ranges used by the stimulus source."""

    bands: Tuple[StimulusBand, ...]

    @property
    def probabilities(self) -> Tuple[float, ...]:
        return tuple(b.probability for b in self.bands)

    @classmethod
    def default(cls) -> StimulusProfile:
        return cls(bands=tuple(StimulusBand(*entry) for entry in STIMULUS_DISTRIBUTION))


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters for one tachometer run."""

    tick_seconds: float = TICK_SECONDS
    total_ticks: int = TOTAL_TICKS
    seed: Optional[int] = None     # None -> unseeded (non-reproducible) run
    bands: BandThresholds = field(default_factory=BandThresholds.default)
    policy: PolicyThresholds = field(default_factory=PolicyThresholds.default)
    stimulus: StimulusProfile = field(default_factory=StimulusProfile.default)

    def __post_init__(self):
        if self.tick_seconds < 0:
            raise ValueError(f"tick_seconds must be non-negative, got {self.tick_seconds}")
        if self.total_ticks < 0:
            raise ValueError(f"total_ticks must be non-negative, got {self.total_ticks}")

    @property
    def simulated_hours(self) -> float:
        return self.tick_seconds * self.total_ticks / 3600.0
