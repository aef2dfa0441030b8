"""
Capacity-factor profile ingestion.

The file is wide: one timestamp column plus one column per renewable
technology. The technology set is whatever columns the file carries.
"""

from pathlib import Path

import pandas as pd

from capexpand.config.settings import DEFAULT_CAPACITY_FACTORS_PATH
from capexpand.ingestion.base import TableLoader
from capexpand.normalization.columns import (
    CAPACITY_FACTOR_COLUMNS,
    TIMESTAMP,
    coerce_float,
)
from capexpand.normalization.temporal import parse_datetime_column
from capexpand.schemas.profiles import CapacityFactorSchema
from capexpand.utils.logging import get_logger

log = get_logger(__name__)


class CapacityFactorLoader(TableLoader[CapacityFactorSchema]):
    """Loader for hourly capacity-factor profiles."""

    kind = "capacity factor profiles"
    synonyms = CAPACITY_FACTOR_COLUMNS

    def __init__(self, path: Path | str = DEFAULT_CAPACITY_FACTORS_PATH) -> None:
        """Initialize capacity-factor loader."""
        super().__init__(path, CapacityFactorSchema)

    def _transform(self, df: pd.DataFrame) -> pd.DataFrame:
        if TIMESTAMP.canonical not in df.columns:
            msg = "No timestamp column found in capacity factors file"
            raise ValueError(msg)

        df = df.copy()
        df[TIMESTAMP.canonical] = parse_datetime_column(df[TIMESTAMP.canonical]).to_numpy()

        tech_cols = technology_columns(df)
        for col in tech_cols:
            df = coerce_float(df, col)

        if not tech_cols:
            log.warning("Capacity factor file has no technology columns", path=str(self.path))
        else:
            values = df[tech_cols]
            if ((values < 0.0) | (values > 1.0)).any().any():
                log.warning("Capacity factors outside [0, 1]", path=str(self.path))
            log.info(
                "Discovered capacity factor technologies",
                technologies=tech_cols,
            )

        return df[[TIMESTAMP.canonical, *tech_cols]]


def technology_columns(df: pd.DataFrame) -> list[str]:
    """Return the technology columns of a capacity-factor table."""
    return [str(col) for col in df.columns if col != TIMESTAMP.canonical]


def load_cf_profiles(
    path: Path | str = DEFAULT_CAPACITY_FACTORS_PATH, *, validate: bool = True
) -> pd.DataFrame:
    """
    Load capacity-factor profiles.

    Args:
        path: Capacity-factor CSV.
        validate: Whether to validate against schema.

    Returns:
        Wide DataFrame with a timestamp column and one float column per
        technology (original spelling kept).

    Raises:
        LoadError: If the file is missing, has no timestamp column, or is
            malformed.
    """
    loader = CapacityFactorLoader(path)
    return loader.load(validate=validate)
