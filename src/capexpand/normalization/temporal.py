"""
Timestamp parsing for ETL outputs.

Upstream pipelines write timestamps in several layouts (ISO with space or
``T`` separator, with or without seconds, date only, Unix epoch seconds).
Every cell is parsed independently, but any unparseable cell rejects the
whole column.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

import numpy as np
import pandas as pd

from capexpand.utils.logging import get_logger

log = get_logger(__name__)

# Tried in order, first match wins
DATETIME_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M",
)


class DateParseError(ValueError):
    """Raised when a timestamp cell matches none of the accepted layouts."""

    def __init__(self, row: int, value: Any) -> None:
        self.row = row
        self.value = value
        super().__init__(f"Could not parse datetime at row {row}: {value!r}")


def _parse_epoch(value: float) -> pd.Timestamp | None:
    """Convert Unix epoch seconds to a naive UTC timestamp."""
    if not np.isfinite(value):
        return None
    try:
        return pd.Timestamp(value, unit="s")
    except (OverflowError, ValueError):
        return None


def _parse_native(value: Any) -> pd.Timestamp | None:
    """Convert a non-string cell, returning None if it is not time-like."""
    if isinstance(value, (datetime, date, np.datetime64)):
        ts = pd.Timestamp(value)
        if pd.isna(ts):
            return None
        if ts.tzinfo is not None:
            ts = ts.tz_convert("UTC").tz_localize(None)
        return ts
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        return _parse_epoch(float(value))
    return None


def parse_datetime_column(values: Iterable[Any]) -> pd.Series:
    """
    Parse a column of heterogeneous timestamps.

    String cells are tried against DATETIME_FORMATS in order, then as Unix
    epoch seconds. Native datetime values pass through; plain numbers are
    read as epoch seconds.

    Args:
        values: Raw timestamp cells (strings, numbers or datetimes).

    Returns:
        Series of datetime64[ns] values with the same length and order.

    Raises:
        DateParseError: If any cell cannot be parsed.
    """
    raw = pd.Series(list(values) if not isinstance(values, pd.Series) else values)
    raw = raw.reset_index(drop=True)
    parsed = pd.Series(pd.NaT, index=raw.index, dtype="datetime64[ns]")

    is_str = raw.map(lambda v: isinstance(v, str)).astype(bool)
    strings = raw[is_str].map(str.strip)

    pending = strings
    for fmt in DATETIME_FORMATS:
        if pending.empty:
            break
        attempt = pd.to_datetime(pending, format=fmt, errors="coerce")
        matched = attempt.notna()
        parsed.loc[attempt.index[matched]] = attempt[matched]
        pending = pending[~matched]

    if not pending.empty:
        epochs = pd.to_numeric(pending, errors="coerce")
        for idx, seconds in epochs.items():
            if pd.notna(seconds):
                ts = _parse_epoch(float(seconds))
                if ts is not None:
                    parsed.loc[idx] = ts
        log.debug("Parsed timestamps as Unix epoch", rows=int(epochs.notna().sum()))

    for idx, value in raw[~is_str].items():
        ts = _parse_native(value)
        if ts is not None:
            parsed.loc[idx] = ts

    failed = parsed.isna()
    if failed.any():
        row = int(failed.idxmax())
        raise DateParseError(row, raw.iloc[row])

    return parsed
