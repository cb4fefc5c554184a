"""Synthetic angular-rate sources that drive the engine state model."""

import logging
from typing import Iterable, List, Optional, Protocol

import numpy as np

from tachometer.config.schema import StimulusProfile
from tachometer.engine.conversions import rpm_to_rad_per_sec

logger = logging.getLogger(__name__)


class StimulusSource(Protocol):
    def next_rate(self) -> float:
        """Return the next angular rate in rad/s."""
        ...


class WeightedRpmSource:
    """Picks an RPM range by weight, then an RPM uniformly inside it."""

    def __init__(
        self,
        profile: Optional[StimulusProfile] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.profile = profile or StimulusProfile.default()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.p = np.array(self.profile.probabilities, dtype=np.float64)

        # Validate distribution
        assert len(self.profile.bands) > 0, "Stimulus profile must define at least one band"
        assert np.all(self.p >= 0), "Stimulus probabilities must be non-negative"
        assert np.isclose(self.p.sum(), 1.0), (
            f"Stimulus probabilities must sum to 1.0, got {self.p.sum()}"
        )
        for band in self.profile.bands:
            assert 0 <= band.rpm_min <= band.rpm_max, (
                f"Invalid RPM range for {band.name}: ({band.rpm_min}, {band.rpm_max})"
            )

    @classmethod
    def from_seed(
        cls, seed: Optional[int], profile: Optional[StimulusProfile] = None,
    ) -> "WeightedRpmSource":
        return cls(profile=profile, rng=np.random.default_rng(seed))

    def next_rpm(self) -> float:
        band = self.profile.bands[self.rng.choice(len(self.profile.bands), p=self.p)]
        rpm = float(self.rng.uniform(band.rpm_min, band.rpm_max))
        logger.debug(f"Stimulus picked {band.name}: rpm={rpm:.1f}")
        return rpm

    def next_rate(self) -> float:
        return rpm_to_rad_per_sec(self.next_rpm())


class ScriptedRateSource:
    """Replays a fixed sequence of angular rates (for deterministic runs)."""

    def __init__(self, rates: Iterable[float]):
        self.rates: List[float] = [float(r) for r in rates]
        self.position = 0

    @classmethod
    def from_rpm(cls, rpm_values: Iterable[float]) -> "ScriptedRateSource":
        return cls(rpm_to_rad_per_sec(v) for v in rpm_values)

    @property
    def remaining(self) -> int:
        return len(self.rates) - self.position

    def next_rate(self) -> float:
        if self.position >= len(self.rates):
            raise ValueError(f"Scripted rate sequence exhausted after {len(self.rates)} values")
        rate = self.rates[self.position]
        self.position += 1
        return rate
