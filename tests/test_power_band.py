"""Tests for the power band classifier."""

import pytest

from tachometer.config.schema import BandThresholds
from tachometer.engine.power_band import PowerBand, classify


class TestClassify:
    @pytest.mark.parametrize("rpm, expected", [
        (0, PowerBand.POWER_OFF),
        (1, PowerBand.POWER_OFF),
        (999, PowerBand.POWER_OFF),
        (1000, PowerBand.IDLE),
        (3500, PowerBand.IDLE),
        (3501, PowerBand.CLIMB),
        (6000, PowerBand.CLIMB),
        (6001, PowerBand.CRUISE),
        (9000, PowerBand.CRUISE),
        (9001, PowerBand.CAUTION),
        (9799, PowerBand.CAUTION),
        (9800, PowerBand.REDLINE),
        (10200, PowerBand.REDLINE),
        (10201, PowerBand.OVER_LIMIT),
        (50000, PowerBand.OVER_LIMIT),
    ])
    def test_range_edges(self, rpm, expected):
        assert classify(rpm) == expected

    def test_negative_is_power_off(self):
        assert classify(-1) == PowerBand.POWER_OFF
        assert classify(-20000) == PowerBand.POWER_OFF

    def test_monotonic_over_sweep(self):
        """Bands never go down as RPM rises, and every band is reached."""
        bands = [classify(r) for r in range(-100, 12001)]
        assert all(b2 >= b1 for b1, b2 in zip(bands, bands[1:]))
        assert set(bands) == set(PowerBand)

    def test_each_band_is_one_contiguous_range(self):
        bands = [classify(r) for r in range(0, 12001)]
        changes = sum(1 for b1, b2 in zip(bands, bands[1:]) if b1 != b2)
        assert changes == len(PowerBand) - 1

    def test_custom_thresholds(self):
        t = BandThresholds(
            idle_min=500, idle_max=1000, climb_max=2000,
            cruise_max=3000, caution_max=4000, redline_max=5000,
        )
        assert classify(499, t) == PowerBand.POWER_OFF
        assert classify(500, t) == PowerBand.IDLE
        assert classify(4001, t) == PowerBand.REDLINE
        assert classify(5001, t) == PowerBand.OVER_LIMIT

    def test_thresholds_must_ascend(self):
        with pytest.raises(ValueError):
            BandThresholds(
                idle_min=1000, idle_max=3500, climb_max=3000,
                cruise_max=9000, caution_max=9799, redline_max=10200,
            )


class TestPowerBand:
    def test_labels(self):
        assert [b.label for b in PowerBand] == [
            "PowerOff", "Idle", "Climb", "Cruise", "Caution", "RedLine", "OverLimit",
        ]

    def test_severity_order(self):
        assert PowerBand.POWER_OFF < PowerBand.IDLE < PowerBand.OVER_LIMIT

    def test_from_label(self):
        assert PowerBand.from_label("RedLine") == PowerBand.REDLINE
        with pytest.raises(ValueError):
            PowerBand.from_label("Afterburner")
