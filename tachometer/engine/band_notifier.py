"""Advisory logging on band transitions, kept out of the classifier."""

import logging
from dataclasses import dataclass
from enum import IntEnum

from tachometer.config.constants import (
    BAND_ADVISORIES,
    BAND_RPM_LIMITS,
    ZONE_LIMITS,
    ZONE_MESSAGES,
)
from tachometer.engine.power_band import PowerBand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BandTransition:
    previous: PowerBand
    current: PowerBand
    filtered_rpm: int


class RpmZone(IntEnum):
    """Coarse pilot-facing safety zones."""

    BELOW_IDLE = 0
    NORMAL = 1
    CAUTION = 2
    REDLINE = 3


_ZONE_KEYS = {
    RpmZone.BELOW_IDLE: "BelowIdle",
    RpmZone.NORMAL: "Normal",
    RpmZone.CAUTION: "Caution",
    RpmZone.REDLINE: "RedLine",
}


def rpm_zone(rpm: int) -> RpmZone:
    if rpm < BAND_RPM_LIMITS["idle"][0]:
        return RpmZone.BELOW_IDLE
    if rpm <= ZONE_LIMITS["normal_max"]:
        return RpmZone.NORMAL
    if rpm <= ZONE_LIMITS["caution_max"]:
        return RpmZone.CAUTION
    return RpmZone.REDLINE


def zone_message(rpm: int) -> str:
    return ZONE_MESSAGES[_ZONE_KEYS[rpm_zone(rpm)]]


class BandNotifier:
    """Logs the advisory for each band the engine enters.

    Caution and above go out at WARNING, everything else at INFO.
    """

    def __init__(self, warn_from: PowerBand = PowerBand.CAUTION):
        self.warn_from = warn_from
        self.transitions_seen = 0

    def notify(self, transition: BandTransition) -> None:
        self.transitions_seen += 1
        level = logging.WARNING if transition.current >= self.warn_from else logging.INFO
        logger.log(
            level,
            f"{transition.previous.label} -> {transition.current.label} "
            f"at {transition.filtered_rpm} rpm: {BAND_ADVISORIES[transition.current.label]} "
            f"[{zone_message(transition.filtered_rpm)}]",
        )
