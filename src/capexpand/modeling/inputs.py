"""
Model input preparation.

Aligns the five loaded tables on a common hourly grid and converts them into
the typed structures the assembler indexes.
"""

from dataclasses import dataclass, field

import pandas as pd

from capexpand.ingestion.profiles import technology_columns
from capexpand.ingestion.technology import (
    TechnologyParameters,
    capacity_by_technology,
    parameters_by_technology,
)
from capexpand.normalization.columns import TIMESTAMP
from capexpand.utils.logging import get_logger

log = get_logger(__name__)


class InputAlignmentError(ValueError):
    """Raised when loaded tables cannot be combined into one model."""


@dataclass(frozen=True)
class ModelInputs:
    """
    Hourly model inputs on a shared time grid.

    Attributes:
        demand_mw: Baseline demand per hour.
        data_center_mw: Data-center load per hour.
        existing_capacity: Installed MW per technology (0 if absent).
        parameters: Cost/performance record per technology.
        capacity_factors: Capacity-factor series per renewable technology.
        timestamps: Hour timestamps, or None if no input carried any.
    """

    demand_mw: pd.Series
    data_center_mw: pd.Series
    existing_capacity: dict[str, float]
    parameters: dict[str, TechnologyParameters]
    capacity_factors: dict[str, pd.Series] = field(default_factory=dict)
    timestamps: pd.Series | None = None

    @property
    def n_hours(self) -> int:
        """Number of hourly periods T."""
        return len(self.demand_mw)

    @property
    def technologies(self) -> list[str]:
        """All technologies, in parameter-table order."""
        return list(self.parameters)

    @property
    def renewable_technologies(self) -> list[str]:
        """Technologies with a capacity-factor series."""
        return [tech for tech in self.parameters if tech in self.capacity_factors]

    @property
    def dispatchable_technologies(self) -> list[str]:
        """Technologies without a capacity-factor series."""
        return [tech for tech in self.parameters if tech not in self.capacity_factors]

    @property
    def total_load(self) -> pd.Series:
        """Demand plus data-center load per hour."""
        return self.demand_mw + self.data_center_mw

    def capacity_of(self, technology: str) -> float:
        """Existing capacity of a technology in MW."""
        return self.existing_capacity.get(technology, 0.0)


def _series(df: pd.DataFrame, column: str) -> pd.Series:
    return df[column].reset_index(drop=True).astype(float)


def _pick_timestamps(*tables: pd.DataFrame) -> pd.Series | None:
    """Return the first timestamp column found, warning when tables disagree."""
    found = [
        df["timestamp"].reset_index(drop=True) for df in tables if "timestamp" in df.columns
    ]
    if not found:
        return None

    reference = found[0]
    for other in found[1:]:
        if not reference.equals(other):
            log.warning(
                "Timestamps differ between input tables, using demand timestamps",
                first=str(reference.iloc[0]) if len(reference) else None,
                other_first=str(other.iloc[0]) if len(other) else None,
            )
            break
    return reference


def build_model_inputs(
    demand: pd.DataFrame,
    data_center: pd.DataFrame,
    capacity: pd.DataFrame,
    parameters: pd.DataFrame,
    capacity_factors: pd.DataFrame,
) -> ModelInputs:
    """
    Combine loaded tables into model inputs.

    Args:
        demand: Table from load_power_demand().
        data_center: Table from load_power_dc().
        capacity: Table from load_existing_capacity().
        parameters: Table from load_tech_params().
        capacity_factors: Table from load_cf_profiles().

    Returns:
        ModelInputs on the demand table's hourly grid.

    Raises:
        InputAlignmentError: If the hourly tables differ in length, no
            technology parameters are given, or a technology is named
            like the hour column.
    """
    n_hours = len(demand)
    lengths = {
        "power demand": n_hours,
        "data center power": len(data_center),
        "capacity factors": len(capacity_factors),
    }
    if len(set(lengths.values())) != 1:
        msg = f"Hourly inputs differ in length: {lengths}"
        raise InputAlignmentError(msg)
    if n_hours == 0:
        msg = "Hourly inputs are empty"
        raise InputAlignmentError(msg)

    params = parameters_by_technology(parameters)
    if not params:
        msg = "No technology parameters given"
        raise InputAlignmentError(msg)
    if TIMESTAMP.canonical in params:
        msg = f"Technology name '{TIMESTAMP.canonical}' is reserved for the hour column"
        raise InputAlignmentError(msg)

    existing = capacity_by_technology(capacity)
    unknown_capacity = sorted(set(existing) - set(params))
    if unknown_capacity:
        log.warning(
            "Ignoring existing capacity without technology parameters",
            technologies=unknown_capacity,
        )

    cf_series: dict[str, pd.Series] = {}
    unknown_profiles: list[str] = []
    for tech in technology_columns(capacity_factors):
        if tech in params:
            cf_series[tech] = _series(capacity_factors, tech)
        else:
            unknown_profiles.append(tech)
    if unknown_profiles:
        log.warning(
            "Ignoring capacity factor profiles without technology parameters",
            technologies=unknown_profiles,
        )

    inputs = ModelInputs(
        demand_mw=_series(demand, "load_mw"),
        data_center_mw=_series(data_center, "power_dc_mw"),
        existing_capacity={tech: existing.get(tech, 0.0) for tech in params},
        parameters=params,
        capacity_factors=cf_series,
        timestamps=_pick_timestamps(demand, data_center, capacity_factors),
    )

    log.info(
        "Prepared model inputs",
        hours=inputs.n_hours,
        technologies=len(inputs.technologies),
        renewable=len(inputs.renewable_technologies),
        dispatchable=len(inputs.dispatchable_technologies),
    )
    return inputs
