"""Pandera schemas for per-technology tables."""

import numpy as np
import pandera.pandas as pa
from pandera.typing import Series


class ExistingCapacitySchema(pa.DataFrameModel):
    """Schema for installed capacity by technology."""

    technology: Series[str] = pa.Field(
        unique=True,
        str_length={"min_value": 1},
        description="Technology name",
    )
    existing_capacity_mw: Series[float] = pa.Field(
        ge=0.0,
        description="Installed capacity in MW",
    )

    @pa.check("existing_capacity_mw", name="finite")
    def capacity_is_finite(cls, series: Series[float]) -> Series[bool]:
        """Reject infinite capacities."""
        return np.isfinite(series)

    class Config:
        """Schema configuration."""

        name = "ExistingCapacitySchema"
        strict = True
        coerce = True


class TechnologyParametersSchema(pa.DataFrameModel):
    """
    Schema for technology cost and performance parameters.

    Efficiency is expected in [0, 1] but not enforced here; the loader
    logs out-of-range values.
    """

    technology: Series[str] = pa.Field(
        unique=True,
        str_length={"min_value": 1},
        description="Technology name",
    )
    capex_eur_per_kw: Series[float] = pa.Field(
        description="Capital expenditure in EUR per kW",
    )
    var_cost_eur_per_mwh: Series[float] = pa.Field(
        description="Variable operating cost in EUR per MWh",
    )
    efficiency: Series[float] = pa.Field(
        description="Conversion efficiency (nominally 0-1)",
    )
    lifetime_years: Series[float] = pa.Field(
        gt=0.0,
        description="Economic lifetime in years",
    )

    @pa.check(
        "capex_eur_per_kw",
        "var_cost_eur_per_mwh",
        "efficiency",
        "lifetime_years",
        name="finite",
    )
    def values_are_finite(cls, series: Series[float]) -> Series[bool]:
        """Reject infinite parameter values."""
        return np.isfinite(series)

    class Config:
        """Schema configuration."""

        name = "TechnologyParametersSchema"
        strict = True
        coerce = True
