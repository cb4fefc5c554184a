"""Power band enumeration and the pure RPM -> band classifier."""

from enum import IntEnum
from typing import Optional

from tachometer.config.constants import BAND_LABELS
from tachometer.config.schema import BandThresholds

_DEFAULT_THRESHOLDS = BandThresholds.default()


class PowerBand(IntEnum):
    """Engine power bands, ordered by severity."""

    POWER_OFF = 0
    IDLE = 1
    CLIMB = 2
    CRUISE = 3
    CAUTION = 4
    REDLINE = 5
    OVER_LIMIT = 6

    @property
    def label(self) -> str:
        """Name used in the flight log ("PowerOff", "RedLine", ...)."""
        return BAND_LABELS[self.value]

    @classmethod
    def from_label(cls, label: str) -> "PowerBand":
        try:
            return cls(BAND_LABELS.index(label))
        except ValueError:
            raise ValueError(f"Unknown power band label: {label!r}") from None


REDLINE_BANDS = frozenset({PowerBand.REDLINE, PowerBand.OVER_LIMIT})


def classify(filtered_rpm: int, thresholds: Optional[BandThresholds] = None) -> PowerBand:
    """Map a filtered RPM to its power band.

    Total over all integers: zero, sub-idle and negative values are POWER_OFF,
    anything above the redline limit is OVER_LIMIT.
    """
    t = thresholds or _DEFAULT_THRESHOLDS

    if filtered_rpm < t.idle_min:
        return PowerBand.POWER_OFF
    if filtered_rpm <= t.idle_max:
        return PowerBand.IDLE
    if filtered_rpm <= t.climb_max:
        return PowerBand.CLIMB
    if filtered_rpm <= t.cruise_max:
        return PowerBand.CRUISE
    if filtered_rpm <= t.caution_max:
        return PowerBand.CAUTION
    if filtered_rpm <= t.redline_max:
        return PowerBand.REDLINE
    return PowerBand.OVER_LIMIT
