"""Command-line interface for the tachometer simulator."""

import logging
import sys
from pathlib import Path

import click

from tachometer.config.constants import DEFAULT_LOG_PATH, TICK_SECONDS, TOTAL_TICKS
from tachometer.config.schema import SimulationConfig
from tachometer.engine.band_notifier import BandNotifier
from tachometer.simulation.tachometer_run import TachometerSimulation
from tachometer.storage.flight_log_writer import FORMATS, FlightLogWriter
from tachometer.validation.log_checks import check_flight_log_file


@click.command()
@click.option("--ticks", default=TOTAL_TICKS, show_default=True, help="Number of ticks to simulate.")
@click.option("--tick-seconds", default=TICK_SECONDS, show_default=True, help="Simulated seconds per tick.")
@click.option("--seed", default=None, type=int, help="RNG seed (omit for an unseeded run).")
@click.option("--output", default=DEFAULT_LOG_PATH, show_default=True, help="Flight log path.")
@click.option("--format", "fmt", default="csv", type=click.Choice(FORMATS), show_default=True,
              help="Flight log format.")
@click.option("--check/--no-check", default=False, help="Run consistency checks on the written log.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def main(ticks, tick_seconds, seed, output, fmt, check, verbose):
    """Jet engine tachometer simulator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)

    try:
        config = SimulationConfig(tick_seconds=tick_seconds, total_ticks=ticks, seed=seed)
    except ValueError as e:
        raise click.BadParameter(str(e))

    output_path = Path(output)
    sim = TachometerSimulation(config, notifier=BandNotifier())

    try:
        writer = FlightLogWriter(output_path, fmt).open()
    except OSError as e:
        click.echo(f"Failed to open {output_path}: {e}", err=True)
        sys.exit(1)

    with writer:
        result = sim.run(sink=writer.append, keep_rows=False)

    diag = result.diagnostic
    click.echo(f"{diag.message} (code {diag.code})")
    click.echo(
        f"Caution time (sec): {result.totals.caution_seconds}, "
        f"Redline/OverLimit time (sec): {result.totals.redline_seconds}"
    )

    if check:
        report = check_flight_log_file(output_path, thresholds=config.bands,
                                       tick_seconds=config.tick_seconds)
        click.echo(report.summary())
        if not report.passed:
            logger.error(f"Flight log {output_path} failed consistency checks")

    click.echo(f"Simulation Finished. Check {output_path}")


if __name__ == "__main__":
    main()
