"""Write and read the per-tick flight log (CSV or Parquet)."""

import logging
from pathlib import Path
from typing import IO, List, Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from tachometer.config.constants import FLIGHT_LOG_COLUMNS
from tachometer.simulation.tachometer_run import FlightLogRow
from tachometer.storage.schema_definition import FLIGHT_LOG_SCHEMA

logger = logging.getLogger(__name__)

FORMATS = ("csv", "parquet")


def rows_to_frame(rows: List[FlightLogRow]) -> pd.DataFrame:
    df = pd.DataFrame([row.to_dict() for row in rows], columns=FLIGHT_LOG_COLUMNS)
    return df[FLIGHT_LOG_COLUMNS]


class FlightLogWriter:
    """Collects rows in tick order and writes them to one log file.

    The file is opened (and truncated) by open(), before any tick runs, so an
    unwritable path fails the run up front. Use as a context manager:

        with FlightLogWriter(path) as writer:
            sim.run(sink=writer.append)
    """

    def __init__(self, path: Path, fmt: str = "csv"):
        if fmt not in FORMATS:
            raise ValueError(f"Unknown flight log format {fmt!r}, expected one of {FORMATS}")
        self.path = Path(path)
        self.fmt = fmt
        self.rows: List[FlightLogRow] = []
        self._handle: Optional[IO] = None

    def open(self) -> "FlightLogWriter":
        """Create/truncate the output file.

        Raises:
            OSError: if the path cannot be opened for writing.
        """
        if self._handle is not None:
            return self
        if self.fmt == "csv":
            self._handle = open(self.path, "w", newline="")
        else:
            self._handle = open(self.path, "wb")
        self.rows = []
        return self

    def append(self, row: FlightLogRow) -> None:
        if self._handle is None:
            raise RuntimeError("FlightLogWriter.append() called before open()")
        self.rows.append(row)

    def close(self) -> Path:
        """Write all collected rows (header first) and close the file."""
        if self._handle is None:
            return self.path

        df = rows_to_frame(self.rows)
        try:
            if self.fmt == "csv":
                df.to_csv(self._handle, index=False)
            else:
                df["time_step"] = df["time_step"].astype("float64")
                table = pa.Table.from_pandas(df, schema=FLIGHT_LOG_SCHEMA, preserve_index=False)
                pq.write_table(table, self._handle)
        finally:
            self._handle.close()
            self._handle = None

        logger.info(f"Wrote {len(df)} rows to {self.path}")
        return self.path

    def __enter__(self) -> "FlightLogWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None and self._handle is not None:
            # Failed run: write the header only
            self.rows = []
        self.close()


def write_flight_log(rows: List[FlightLogRow], path: Path, fmt: str = "csv") -> Path:
    with FlightLogWriter(path, fmt) as writer:
        for row in rows:
            writer.append(row)
    return writer.path


def read_flight_log(path: Path) -> pd.DataFrame:
    """Read a flight log written by FlightLogWriter (format from the suffix)."""
    path = Path(path)
    if path.suffix == ".parquet":
        return pq.read_table(path).to_pandas()
    return pd.read_csv(path)
