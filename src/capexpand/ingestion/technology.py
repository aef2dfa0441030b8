"""
Per-technology table ingestion.

Loads existing capacity and technology cost/performance parameters, and
converts them into the lookup structures the model consumes.
"""

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from capexpand.config.settings import DEFAULT_CAPACITY_PATH, DEFAULT_TECH_PARAMS_PATH
from capexpand.ingestion.base import TableLoader
from capexpand.normalization.columns import (
    CAPACITY_COLUMNS,
    TECH_PARAMS_COLUMNS,
    coerce_float,
    coerce_string,
)
from capexpand.schemas.technology import (
    ExistingCapacitySchema,
    TechnologyParametersSchema,
)
from capexpand.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class TechnologyParameters:
    """Cost and performance parameters of one technology."""

    capex_eur_per_kw: float
    var_cost_eur_per_mwh: float
    efficiency: float
    lifetime_years: float


class ExistingCapacityLoader(TableLoader[ExistingCapacitySchema]):
    """Loader for installed capacity by technology."""

    kind = "existing capacity"
    synonyms = CAPACITY_COLUMNS

    def __init__(self, path: Path | str = DEFAULT_CAPACITY_PATH) -> None:
        """Initialize existing capacity loader."""
        super().__init__(path, ExistingCapacitySchema)

    def _transform(self, df: pd.DataFrame) -> pd.DataFrame:
        df = coerce_string(df, "technology")
        df = coerce_float(df, "existing_capacity_mw")
        return df[["technology", "existing_capacity_mw"]].reset_index(drop=True)


class TechnologyParametersLoader(TableLoader[TechnologyParametersSchema]):
    """Loader for technology cost and performance parameters."""

    kind = "technology parameters"
    synonyms = TECH_PARAMS_COLUMNS

    def __init__(self, path: Path | str = DEFAULT_TECH_PARAMS_PATH) -> None:
        """Initialize technology parameters loader."""
        super().__init__(path, TechnologyParametersSchema)

    def _transform(self, df: pd.DataFrame) -> pd.DataFrame:
        columns = [group.canonical for group in self.synonyms]

        df = coerce_string(df, "technology")
        for col in columns[1:]:
            df = coerce_float(df, col)
        df = df[columns].reset_index(drop=True)

        out_of_range = df[(df["efficiency"] < 0.0) | (df["efficiency"] > 1.0)]
        if not out_of_range.empty:
            log.warning(
                "Efficiency outside [0, 1]",
                technologies=out_of_range["technology"].tolist(),
            )

        return df


def load_existing_capacity(
    path: Path | str = DEFAULT_CAPACITY_PATH, *, validate: bool = True
) -> pd.DataFrame:
    """
    Load existing capacity by technology.

    Args:
        path: Capacity CSV.
        validate: Whether to validate against schema.

    Returns:
        DataFrame with columns technology (str) and existing_capacity_mw (float).

    Raises:
        LoadError: If the file is missing or malformed.
    """
    loader = ExistingCapacityLoader(path)
    return loader.load(validate=validate)


def load_tech_params(
    path: Path | str = DEFAULT_TECH_PARAMS_PATH, *, validate: bool = True
) -> pd.DataFrame:
    """
    Load technology parameters.

    Args:
        path: Technology parameters CSV.
        validate: Whether to validate against schema.

    Returns:
        DataFrame with columns technology, capex_eur_per_kw,
        var_cost_eur_per_mwh, efficiency and lifetime_years.

    Raises:
        LoadError: If the file is missing or malformed.
    """
    loader = TechnologyParametersLoader(path)
    return loader.load(validate=validate)


def capacity_by_technology(df: pd.DataFrame) -> dict[str, float]:
    """Map technology name to existing capacity in MW."""
    return {
        str(tech): float(cap)
        for tech, cap in zip(df["technology"], df["existing_capacity_mw"], strict=True)
    }


def parameters_by_technology(df: pd.DataFrame) -> dict[str, TechnologyParameters]:
    """Map technology name to its parameter record."""
    return {
        str(row.technology): TechnologyParameters(
            capex_eur_per_kw=float(row.capex_eur_per_kw),
            var_cost_eur_per_mwh=float(row.var_cost_eur_per_mwh),
            efficiency=float(row.efficiency),
            lifetime_years=float(row.lifetime_years),
        )
        for row in df.itertuples(index=False)
    }
