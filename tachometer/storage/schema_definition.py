"""PyArrow schema for the flight log."""

import pyarrow as pa

from tachometer.config.constants import FLIGHT_LOG_COLUMNS


def build_flight_log_schema() -> pa.Schema:
    """Build the PyArrow schema for flight log files.

    9 columns: time_step (float64, seconds), six int64 counters/readings and
    the band label string, in FLIGHT_LOG_COLUMNS order.
    """
    types = {
        "time_step": pa.float64(),
        "total_seconds": pa.int64(),
        "hours": pa.int64(),
        "minutes": pa.int64(),
        "seconds": pa.int64(),
        "rpm": pa.int64(),
        "band": pa.string(),
        "caution_seconds": pa.int64(),
        "redline_seconds": pa.int64(),
    }
    return pa.schema([pa.field(col, types[col]) for col in FLIGHT_LOG_COLUMNS])


FLIGHT_LOG_SCHEMA = build_flight_log_schema()
