"""Time-in-band ("flight hours") accumulation."""

import math
from dataclasses import dataclass, replace

from tachometer.config.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from tachometer.engine.conversions import round_half_away_from_zero
from tachometer.engine.engine_state import EngineState
from tachometer.engine.power_band import REDLINE_BANDS, PowerBand


@dataclass
class ExposureTotals:
    total_seconds: int = 0       # engine running (any band but PowerOff)
    caution_seconds: int = 0     # Caution only
    redline_seconds: int = 0     # RedLine + OverLimit


class ExposureAccumulator:
    """Running sums of engine time, caution time and redline/over-limit time.

    Each accumulate() call is independent; totals are order-insensitive sums
    and never decrease.
    """

    def __init__(self):
        self.totals = ExposureTotals()

    def accumulate(self, band: PowerBand, delta_seconds: float) -> None:
        """Add delta_seconds (rounded to the nearest second) to the totals for band.

        Raises:
            ValueError: if delta_seconds is negative or not finite.
        """
        if not math.isfinite(delta_seconds) or delta_seconds < 0:
            raise ValueError(f"delta_seconds must be a finite non-negative number, got {delta_seconds}")

        delta = round_half_away_from_zero(delta_seconds)

        if band != PowerBand.POWER_OFF:
            self.totals.total_seconds += delta
        if band == PowerBand.CAUTION:
            self.totals.caution_seconds += delta
        if band in REDLINE_BANDS:
            self.totals.redline_seconds += delta

    def record(self, state: EngineState, delta_seconds: float) -> None:
        self.accumulate(state.band, delta_seconds)

    def snapshot(self) -> ExposureTotals:
        return replace(self.totals)

    @property
    def total_seconds(self) -> int:
        return self.totals.total_seconds

    @property
    def caution_seconds(self) -> int:
        return self.totals.caution_seconds

    @property
    def redline_seconds(self) -> int:
        return self.totals.redline_seconds

    # Derived h/m/s breakdown of total_seconds (truncating)
    @property
    def hours(self) -> int:
        return self.totals.total_seconds // SECONDS_PER_HOUR

    @property
    def minutes(self) -> int:
        return (self.totals.total_seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def seconds(self) -> int:
        return self.totals.total_seconds % SECONDS_PER_MINUTE
