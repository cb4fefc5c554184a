"""Orchestrate one tachometer run: stimulus -> engine state -> exposure -> log rows."""

import logging
from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, List, Optional, Union

from tachometer.config.schema import SimulationConfig
from tachometer.diagnostics.policy import Diagnostic, DiagnosticPolicy
from tachometer.engine.band_notifier import BandNotifier
from tachometer.engine.engine_state import EngineStateModel
from tachometer.exposure.flight_hours import ExposureAccumulator, ExposureTotals
from tachometer.simulation.stimulus import StimulusSource, WeightedRpmSource

logger = logging.getLogger(__name__)


@dataclass
class FlightLogRow:
    time_step: Union[int, float]   # tick_index * tick_seconds
    total_seconds: int
    hours: int
    minutes: int
    seconds: int
    rpm: int
    band: str
    caution_seconds: int
    redline_seconds: int

    def to_dict(self) -> Dict[str, Union[int, float, str]]:
        # Field order is the flight log column order
        return asdict(self)


@dataclass
class SimulationResult:
    totals: ExposureTotals
    diagnostic: Diagnostic
    rows: List[FlightLogRow] = field(default_factory=list)


class TachometerSimulation:
    """Runs a fixed number of ticks in strict sequence.

    Each tick samples the stimulus, updates the engine state, accumulates
    exposure for the new band and emits a log row, in that order.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        source: Optional[StimulusSource] = None,
        notifier: Optional[BandNotifier] = None,
    ):
        self.config = config or SimulationConfig()
        self.source = source or WeightedRpmSource.from_seed(
            self.config.seed, self.config.stimulus,
        )
        self.engine = EngineStateModel(self.config.bands, notifier)
        self.exposure = ExposureAccumulator()
        self.policy = DiagnosticPolicy(self.config.policy)

    def step(self, tick: int) -> FlightLogRow:
        self.engine.update(self.source.next_rate())
        self.exposure.record(self.engine.state, self.config.tick_seconds)

        time_step = tick * self.config.tick_seconds
        if float(time_step).is_integer():
            time_step = int(time_step)

        return FlightLogRow(
            time_step=time_step,
            total_seconds=self.exposure.total_seconds,
            hours=self.exposure.hours,
            minutes=self.exposure.minutes,
            seconds=self.exposure.seconds,
            rpm=self.engine.filtered_rpm,
            band=self.engine.band.label,
            caution_seconds=self.exposure.caution_seconds,
            redline_seconds=self.exposure.redline_seconds,
        )

    def evaluate(self) -> Diagnostic:
        return self.policy.evaluate(self.exposure.caution_seconds, self.exposure.redline_seconds)

    def run(
        self,
        sink: Optional[Callable[[FlightLogRow], None]] = None,
        keep_rows: bool = True,
    ) -> SimulationResult:
        """Run all ticks, passing each row to sink (in tick order) as it is produced.

        Args:
            sink: Called once per row, e.g. FlightLogWriter.append.
            keep_rows: Also collect rows on the result.

        Returns:
            SimulationResult with final totals and the diagnostic verdict.
        """
        logger.info(
            f"Starting run: {self.config.total_ticks} ticks x {self.config.tick_seconds}s "
            f"({self.config.simulated_hours:.1f} simulated hours, seed={self.config.seed})"
        )

        rows: List[FlightLogRow] = []
        for tick in range(self.config.total_ticks):
            row = self.step(tick)
            if sink is not None:
                sink(row)
            if keep_rows:
                rows.append(row)

        diagnostic = self.evaluate()
        logger.info(
            f"Run complete: total={self.exposure.total_seconds}s "
            f"caution={self.exposure.caution_seconds}s redline={self.exposure.redline_seconds}s "
            f"-> {diagnostic.status.name}"
        )
        return SimulationResult(
            totals=self.exposure.snapshot(),
            diagnostic=diagnostic,
            rows=rows,
        )
