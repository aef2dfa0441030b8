"""
Pandera schemas for hourly load series.

The timestamp column is optional: a file without any recognized timestamp
spelling still loads unless strict timestamp handling is requested.
"""

import numpy as np
import pandas as pd
import pandera.pandas as pa
from pandera.typing import DataFrame, Series


def _timestamps_increasing(df: pd.DataFrame) -> bool:
    if "timestamp" not in df.columns:
        return True
    return bool(df["timestamp"].is_monotonic_increasing)


class PowerDemandSchema(pa.DataFrameModel):
    """Schema for hourly baseline power demand."""

    timestamp: Series[pa.DateTime] | None = pa.Field(
        unique=True,
        description="Start of the hour",
    )
    load_mw: Series[float] = pa.Field(
        ge=0.0,
        description="Baseline demand in MW",
    )

    @pa.check("load_mw", name="finite")
    def load_is_finite(cls, series: Series[float]) -> Series[bool]:
        """Reject infinite demand values."""
        return np.isfinite(series)

    @pa.dataframe_check(name="timestamps_increasing")
    def timestamps_increasing(cls, df: DataFrame) -> bool:
        """Timestamps must be strictly increasing."""
        return _timestamps_increasing(df)

    class Config:
        """Schema configuration."""

        name = "PowerDemandSchema"
        strict = True
        coerce = True


class DataCenterLoadSchema(pa.DataFrameModel):
    """Schema for hourly data-center load, summed with demand at solve time."""

    timestamp: Series[pa.DateTime] | None = pa.Field(
        unique=True,
        description="Start of the hour",
    )
    power_dc_mw: Series[float] = pa.Field(
        ge=0.0,
        description="Data-center load in MW",
    )

    @pa.check("power_dc_mw", name="finite")
    def load_is_finite(cls, series: Series[float]) -> Series[bool]:
        """Reject infinite load values."""
        return np.isfinite(series)

    @pa.dataframe_check(name="timestamps_increasing")
    def timestamps_increasing(cls, df: DataFrame) -> bool:
        """Timestamps must be strictly increasing."""
        return _timestamps_increasing(df)

    class Config:
        """Schema configuration."""

        name = "DataCenterLoadSchema"
        strict = True
        coerce = True
