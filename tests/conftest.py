"""Shared test fixtures."""

import numpy as np
import pytest

from tachometer.config.schema import BandThresholds, PolicyThresholds, SimulationConfig
from tachometer.diagnostics.policy import DiagnosticPolicy
from tachometer.engine.engine_state import EngineStateModel
from tachometer.exposure.flight_hours import ExposureAccumulator


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def thresholds():
    return BandThresholds.default()


@pytest.fixture
def policy():
    return DiagnosticPolicy(PolicyThresholds.default())


@pytest.fixture
def engine(thresholds):
    return EngineStateModel(thresholds)


@pytest.fixture
def accumulator():
    return ExposureAccumulator()


@pytest.fixture
def short_config():
    """10 ticks of 60 s, seeded."""
    return SimulationConfig(tick_seconds=60.0, total_ticks=10, seed=42)
