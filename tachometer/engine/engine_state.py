"""Engine state model: angular rate in, filtered RPM and power band out."""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from tachometer.config.schema import BandThresholds
from tachometer.engine.band_notifier import BandNotifier, BandTransition
from tachometer.engine.conversions import rad_per_sec_to_rpm, round_half_away_from_zero
from tachometer.engine.power_band import PowerBand, classify

logger = logging.getLogger(__name__)


class InvalidRateError(ValueError):
    """Angular rate is negative or not finite."""


@dataclass
class EngineState:
    raw_rpm: float = 0.0          # unfiltered RPM from the last update
    filtered_rpm: int = 0         # raw_rpm rounded half away from zero
    band: PowerBand = PowerBand.POWER_OFF


class EngineStateModel:
    """Owns the current EngineState and reclassifies it on every update.

    The "filter" is a single-sample rounding stage, not a temporal low-pass.
    """

    def __init__(
        self,
        thresholds: Optional[BandThresholds] = None,
        notifier: Optional[BandNotifier] = None,
    ):
        self.thresholds = thresholds or BandThresholds.default()
        self.notifier = notifier
        self._state = EngineState()

    def update(self, angular_rate_rad_per_sec: float) -> None:
        """Convert an angular rate (rad/s) to RPM and reclassify.

        Raises:
            InvalidRateError: if the rate is negative, NaN or infinite. The
                state is left untouched.
        """
        omega = float(angular_rate_rad_per_sec)
        if not math.isfinite(omega):
            raise InvalidRateError(f"Angular rate must be finite, got {omega}")
        if omega < 0:
            raise InvalidRateError(f"Angular rate must be non-negative, got {omega}")

        raw_rpm = rad_per_sec_to_rpm(omega)
        filtered_rpm = round_half_away_from_zero(raw_rpm)
        band = classify(filtered_rpm, self.thresholds)

        previous = self._state.band
        self._state.raw_rpm = raw_rpm
        self._state.filtered_rpm = filtered_rpm
        self._state.band = band

        logger.debug(f"omega={omega:.3f} rad/s -> rpm={filtered_rpm} ({band.label})")

        if band != previous and self.notifier is not None:
            self.notifier.notify(BandTransition(previous, band, filtered_rpm))

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def raw_rpm(self) -> float:
        return self._state.raw_rpm

    @property
    def filtered_rpm(self) -> int:
        return self._state.filtered_rpm

    @property
    def band(self) -> PowerBand:
        return self._state.band

    @property
    def is_power_off(self) -> bool:
        return self._state.band == PowerBand.POWER_OFF
