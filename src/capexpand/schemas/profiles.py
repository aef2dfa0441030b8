"""
Pandera schema for capacity-factor profiles.

Technology columns are discovered at load time, so only the timestamp is
declared; the remaining columns are checked as a group.
"""

import numpy as np
import pandas as pd
import pandera.pandas as pa
from pandera.typing import DataFrame, Series


class CapacityFactorSchema(pa.DataFrameModel):
    """Schema for hourly capacity factors, one float column per technology."""

    timestamp: Series[pa.DateTime] = pa.Field(
        unique=True,
        description="Start of the hour",
    )

    @pa.dataframe_check(name="timestamps_increasing")
    def timestamps_increasing(cls, df: DataFrame) -> bool:
        """Timestamps must be strictly increasing."""
        return bool(df["timestamp"].is_monotonic_increasing)

    @pa.dataframe_check(name="technology_columns_float")
    def technology_columns_float(cls, df: DataFrame) -> bool:
        """Every technology column must be a finite float series."""
        tech = df.drop(columns=["timestamp"])
        if not all(pd.api.types.is_float_dtype(dtype) for dtype in tech.dtypes):
            return False
        return bool(np.isfinite(tech.to_numpy(dtype=float)).all())

    class Config:
        """Schema configuration."""

        name = "CapacityFactorSchema"
        strict = False  # Technology columns are not declared
        coerce = True
