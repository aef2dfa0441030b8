"""
Hourly load series ingestion.

Loads baseline power demand and data-center load. Both files share the same
shape: a timestamp column and one MW column.
"""

from pathlib import Path
from typing import ClassVar

import pandas as pd
import pandera.pandas as pa

from capexpand.config.settings import DEFAULT_DATA_CENTER_PATH, DEFAULT_DEMAND_PATH
from capexpand.ingestion.base import TableLoader
from capexpand.normalization.columns import (
    DATA_CENTER_COLUMNS,
    DEMAND_COLUMNS,
    TIMESTAMP,
    coerce_float,
)
from capexpand.normalization.temporal import parse_datetime_column
from capexpand.schemas.timeseries import DataCenterLoadSchema, PowerDemandSchema
from capexpand.utils.logging import get_logger

log = get_logger(__name__)


class _HourlySeriesLoader(TableLoader):
    """Shared logic for single-value hourly series."""

    value_column: ClassVar[str]

    def __init__(
        self,
        path: Path | str,
        schema: type[pa.DataFrameModel],
        *,
        require_timestamp: bool = False,
    ) -> None:
        super().__init__(path, schema)
        self.require_timestamp = require_timestamp

    def _transform(self, df: pd.DataFrame) -> pd.DataFrame:
        if TIMESTAMP.canonical in df.columns:
            df = df.copy()
            parsed = parse_datetime_column(df[TIMESTAMP.canonical])
            df[TIMESTAMP.canonical] = parsed.to_numpy()
        elif self.require_timestamp:
            msg = f"No timestamp column found in {self.kind} file"
            raise ValueError(msg)
        else:
            log.warning(
                "No timestamp column found, loading values without timestamps",
                kind=self.kind,
                columns=list(df.columns),
            )

        keep = [c for c in (TIMESTAMP.canonical, self.value_column) if c in df.columns]
        return coerce_float(df[keep], self.value_column)


class PowerDemandLoader(_HourlySeriesLoader):
    """Loader for hourly baseline power demand."""

    kind = "power demand"
    synonyms = DEMAND_COLUMNS
    value_column = "load_mw"

    def __init__(
        self, path: Path | str = DEFAULT_DEMAND_PATH, *, require_timestamp: bool = False
    ) -> None:
        """Initialize power demand loader."""
        super().__init__(path, PowerDemandSchema, require_timestamp=require_timestamp)


class DataCenterLoadLoader(_HourlySeriesLoader):
    """Loader for hourly data-center power demand."""

    kind = "data center power"
    synonyms = DATA_CENTER_COLUMNS
    value_column = "power_dc_mw"

    def __init__(
        self, path: Path | str = DEFAULT_DATA_CENTER_PATH, *, require_timestamp: bool = False
    ) -> None:
        """Initialize data-center load loader."""
        super().__init__(path, DataCenterLoadSchema, require_timestamp=require_timestamp)


def load_power_demand(
    path: Path | str = DEFAULT_DEMAND_PATH,
    *,
    validate: bool = True,
    require_timestamp: bool = False,
) -> pd.DataFrame:
    """
    Load hourly power demand.

    Args:
        path: Demand CSV.
        validate: Whether to validate against schema.
        require_timestamp: Fail if the file has no recognized timestamp column.

    Returns:
        DataFrame with columns timestamp (datetime64) and load_mw (float).

    Raises:
        LoadError: If the file is missing or malformed.
    """
    loader = PowerDemandLoader(path, require_timestamp=require_timestamp)
    return loader.load(validate=validate)


def load_power_dc(
    path: Path | str = DEFAULT_DATA_CENTER_PATH,
    *,
    validate: bool = True,
    require_timestamp: bool = False,
) -> pd.DataFrame:
    """
    Load hourly data-center power demand.

    Args:
        path: Data-center load CSV.
        validate: Whether to validate against schema.
        require_timestamp: Fail if the file has no recognized timestamp column.

    Returns:
        DataFrame with columns timestamp (datetime64) and power_dc_mw (float).

    Raises:
        LoadError: If the file is missing or malformed.
    """
    loader = DataCenterLoadLoader(path, require_timestamp=require_timestamp)
    return loader.load(validate=validate)
