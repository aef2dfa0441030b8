"""Tests for Pandera schema definitions."""

import numpy as np
import pandas as pd
import pytest
from pandera.errors import SchemaError, SchemaErrors

from capexpand.schemas import (
    CapacityFactorSchema,
    DataCenterLoadSchema,
    ExistingCapacitySchema,
    PowerDemandSchema,
    TechnologyParametersSchema,
)

# Eager and lazy validation report failures differently across pandera releases
SCHEMA_ERRORS = (SchemaError, SchemaErrors)


def _hours(n: int) -> pd.Series:
    return pd.Series(pd.date_range("2023-01-01", periods=n, freq="h"))


class TestPowerDemandSchema:
    """Tests for PowerDemandSchema."""

    def test_valid_data(self) -> None:
        """Test that valid data passes validation."""
        df = pd.DataFrame({"timestamp": _hours(3), "load_mw": [100.0, 120.0, 90.0]})
        result = PowerDemandSchema.validate(df)
        assert len(result) == 3

    def test_timestamp_optional(self) -> None:
        """Test that the timestamp column may be absent."""
        df = pd.DataFrame({"load_mw": [100.0, 120.0]})
        result = PowerDemandSchema.validate(df)
        assert list(result.columns) == ["load_mw"]

    def test_negative_load(self) -> None:
        """Test that negative demand fails validation."""
        df = pd.DataFrame({"timestamp": _hours(1), "load_mw": [-1.0]})
        with pytest.raises(SCHEMA_ERRORS):
            PowerDemandSchema.validate(df)

    def test_infinite_load(self) -> None:
        """Test that infinite demand fails validation."""
        df = pd.DataFrame({"timestamp": _hours(1), "load_mw": [np.inf]})
        with pytest.raises(SCHEMA_ERRORS):
            PowerDemandSchema.validate(df)

    def test_unsorted_timestamps(self) -> None:
        """Test that timestamps must increase."""
        df = pd.DataFrame({"timestamp": _hours(2)[::-1].reset_index(drop=True), "load_mw": [1.0, 2.0]})
        with pytest.raises(SCHEMA_ERRORS):
            PowerDemandSchema.validate(df)

    def test_extra_column_rejected(self) -> None:
        """Test strict column set."""
        df = pd.DataFrame({"load_mw": [1.0], "other": [1.0]})
        with pytest.raises(SCHEMA_ERRORS):
            PowerDemandSchema.validate(df)


class TestDataCenterLoadSchema:
    """Tests for DataCenterLoadSchema."""

    def test_valid_data(self) -> None:
        """Test that valid data passes validation."""
        df = pd.DataFrame({"timestamp": _hours(2), "power_dc_mw": [10.0, 0.0]})
        assert len(DataCenterLoadSchema.validate(df)) == 2

    def test_duplicate_timestamps(self) -> None:
        """Test that repeated hours fail validation."""
        ts = pd.Series([pd.Timestamp("2023-01-01")] * 2)
        df = pd.DataFrame({"timestamp": ts, "power_dc_mw": [10.0, 12.0]})
        with pytest.raises(SCHEMA_ERRORS):
            DataCenterLoadSchema.validate(df)

    def test_coerces_numeric(self) -> None:
        """Test that integer loads are coerced to float."""
        df = pd.DataFrame({"power_dc_mw": [10, 12]})
        result = DataCenterLoadSchema.validate(df)
        assert result["power_dc_mw"].dtype == "float64"


class TestExistingCapacitySchema:
    """Tests for ExistingCapacitySchema."""

    def test_valid_data(self) -> None:
        """Test that valid data passes validation."""
        df = pd.DataFrame({"technology": ["Wind", "Gas"], "existing_capacity_mw": [100.0, 0.0]})
        assert len(ExistingCapacitySchema.validate(df)) == 2

    def test_duplicate_technology(self) -> None:
        """Test that technologies must be unique."""
        df = pd.DataFrame({"technology": ["Wind", "Wind"], "existing_capacity_mw": [1.0, 2.0]})
        with pytest.raises(SCHEMA_ERRORS):
            ExistingCapacitySchema.validate(df)

    def test_empty_technology(self) -> None:
        """Test that technology names must not be empty."""
        df = pd.DataFrame({"technology": [""], "existing_capacity_mw": [1.0]})
        with pytest.raises(SCHEMA_ERRORS):
            ExistingCapacitySchema.validate(df)


class TestTechnologyParametersSchema:
    """Tests for TechnologyParametersSchema."""

    @pytest.fixture
    def valid_df(self) -> pd.DataFrame:
        """Two valid technology records."""
        return pd.DataFrame(
            {
                "technology": ["Wind", "Gas"],
                "capex_eur_per_kw": [1200.0, 500.0],
                "var_cost_eur_per_mwh": [0.0, 60.0],
                "efficiency": [1.0, 0.55],
                "lifetime_years": [25.0, 30.0],
            }
        )

    def test_valid_data(self, valid_df: pd.DataFrame) -> None:
        """Test that valid data passes validation."""
        assert len(TechnologyParametersSchema.validate(valid_df)) == 2

    def test_efficiency_not_enforced(self, valid_df: pd.DataFrame) -> None:
        """Test that efficiency outside [0, 1] passes."""
        valid_df.loc[0, "efficiency"] = 3.0
        assert len(TechnologyParametersSchema.validate(valid_df)) == 2

    def test_nonpositive_lifetime(self, valid_df: pd.DataFrame) -> None:
        """Test that lifetime must be positive."""
        valid_df.loc[1, "lifetime_years"] = 0.0
        with pytest.raises(SCHEMA_ERRORS):
            TechnologyParametersSchema.validate(valid_df)

    def test_infinite_capex(self, valid_df: pd.DataFrame) -> None:
        """Test that parameters must be finite."""
        valid_df.loc[0, "capex_eur_per_kw"] = np.inf
        with pytest.raises(SCHEMA_ERRORS):
            TechnologyParametersSchema.validate(valid_df)

    def test_missing_column(self, valid_df: pd.DataFrame) -> None:
        """Test that every parameter is required."""
        with pytest.raises(SCHEMA_ERRORS):
            TechnologyParametersSchema.validate(valid_df.drop(columns=["efficiency"]))


class TestCapacityFactorSchema:
    """Tests for CapacityFactorSchema."""

    def test_valid_data(self) -> None:
        """Test that arbitrary technology columns are accepted."""
        df = pd.DataFrame({"timestamp": _hours(2), "Wind": [0.5, 0.4], "Solar PV": [0.0, 0.3]})
        result = CapacityFactorSchema.validate(df)
        assert list(result.columns) == ["timestamp", "Wind", "Solar PV"]

    def test_timestamp_required(self) -> None:
        """Test that the timestamp column is mandatory."""
        df = pd.DataFrame({"Wind": [0.5]})
        with pytest.raises(SCHEMA_ERRORS):
            CapacityFactorSchema.validate(df)

    def test_non_float_technology(self) -> None:
        """Test that technology columns must be floats."""
        df = pd.DataFrame({"timestamp": _hours(1), "Wind": ["high"]})
        with pytest.raises(SCHEMA_ERRORS):
            CapacityFactorSchema.validate(df)

    def test_nan_factor(self) -> None:
        """Test that missing factors fail validation."""
        df = pd.DataFrame({"timestamp": _hours(2), "Wind": [0.5, np.nan]})
        with pytest.raises(SCHEMA_ERRORS):
            CapacityFactorSchema.validate(df)
