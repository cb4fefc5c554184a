"""Consistency checks for a written flight log."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from tachometer.config.constants import FLIGHT_LOG_COLUMNS, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from tachometer.config.schema import BandThresholds
from tachometer.engine.power_band import classify
from tachometer.storage.flight_log_writer import read_flight_log

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    check: str
    passed: bool
    message: str = ""


@dataclass
class CheckReport:
    results: List[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def n_passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def n_failed(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    def add(self, check: str, bad_rows, what: str) -> None:
        bad = np.asarray(bad_rows, dtype=bool)
        n_bad = int(bad.sum())
        message = ""
        if n_bad:
            first = int(np.flatnonzero(bad)[0])
            message = f"{n_bad} rows {what} (first at row {first})"
        self.results.append(CheckResult(check, n_bad == 0, message))

    def summary(self) -> str:
        lines = [f"Log checks: {self.n_passed} passed, {self.n_failed} failed"]
        for r in self.results:
            status = "PASS" if r.passed else "FAIL"
            lines.append(f"  [{status}] {r.check} {r.message}".rstrip())
        return "\n".join(lines)


def check_flight_log(
    df: pd.DataFrame,
    thresholds: Optional[BandThresholds] = None,
    tick_seconds: Optional[float] = None,
) -> CheckReport:
    """Check a flight log frame row by row.

    Args:
        df: Flight log as read by read_flight_log().
        thresholds: Band limits the run was classified with.
        tick_seconds: If set, time_step must equal row_index * tick_seconds.

    Returns:
        CheckReport with pass/fail for each check.
    """
    report = CheckReport()

    columns_ok = list(df.columns) == FLIGHT_LOG_COLUMNS
    report.results.append(CheckResult(
        "columns", columns_ok,
        "" if columns_ok else f"expected {FLIGHT_LOG_COLUMNS}, got {list(df.columns)}",
    ))
    if not columns_ok or df.empty:
        return report

    total = df["total_seconds"]
    caution = df["caution_seconds"]
    redline = df["redline_seconds"]

    # Ordering
    report.add("time_step_increasing", df["time_step"].diff().fillna(0) < 0, "go back in time")
    if tick_seconds is not None:
        expected = pd.Series(np.arange(len(df)) * tick_seconds, index=df.index)
        report.add("time_step_spacing", ~np.isclose(df["time_step"], expected), "off the tick grid")

    # Monotonic totals
    for col in ("total_seconds", "caution_seconds", "redline_seconds"):
        report.add(f"{col}_monotonic", df[col].diff().fillna(0) < 0, "decrease")

    # Sub-totals bounded by total
    report.add("caution_le_total", caution > total, "have caution > total")
    report.add("redline_le_total", redline > total, "have redline > total")

    # h/m/s breakdown
    hms = df["hours"] * SECONDS_PER_HOUR + df["minutes"] * SECONDS_PER_MINUTE + df["seconds"]
    bad_range = (df["minutes"] >= 60) | (df["seconds"] >= 60)
    report.add("hms_matches_total", (hms != total) | bad_range, "disagree with total_seconds")

    # Band is the classification of rpm
    expected_band = df["rpm"].map(lambda r: classify(int(r), thresholds).label)
    report.add("band_matches_rpm", expected_band != df["band"], "misclassified")

    # Exposure only grows in the bands that own it
    band = df["band"]
    d_total = total.diff().fillna(total)
    d_caution = caution.diff().fillna(caution)
    d_redline = redline.diff().fillna(redline)
    report.add("power_off_adds_nothing", (band == "PowerOff") & (d_total != 0), "grow total while PowerOff")
    report.add("caution_only_in_caution", (band != "Caution") & (d_caution != 0), "grow caution outside Caution")
    report.add(
        "redline_only_in_redline",
        ~band.isin(["RedLine", "OverLimit"]) & (d_redline != 0),
        "grow redline outside RedLine/OverLimit",
    )

    return report


def check_flight_log_file(path: Path, **kwargs) -> CheckReport:
    df = read_flight_log(path)
    logger.info(f"Checking {len(df)} rows from {path}")
    return check_flight_log(df, **kwargs)


if __name__ == "__main__":
    import sys
    if len(sys.argv) < 2:
        print("Usage: python -m tachometer.validation.log_checks <flight_log.csv>")
        sys.exit(1)

    report = check_flight_log_file(Path(sys.argv[1]))
    print(report.summary())
    sys.exit(0 if report.passed else 1)
