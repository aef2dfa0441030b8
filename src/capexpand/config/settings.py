"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
Paths to ETL outputs are conventions and can be overridden per run.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DEMAND_PATH = Path("etl_outputs/power_demand_baseline.csv")
DEFAULT_DATA_CENTER_PATH = Path("etl_outputs/power_dc_placeholder.csv")
DEFAULT_CAPACITY_PATH = Path("etl_outputs/existing_capacity_by_tech.csv")
DEFAULT_TECH_PARAMS_PATH = Path("etl_outputs/technology_parameters.csv")
DEFAULT_CAPACITY_FACTORS_PATH = Path("etl_outputs/capacity_factors_profiles.csv")


class DataPathsConfig(BaseModel):
    """Input file paths configuration.

    All paths are relative to data_root. Use resolve() to get full paths.
    """

    model_config = ConfigDict(frozen=True)

    data_root: Path = Field(
        default=Path("."), description="Root directory for all input files"
    )
    power_demand: Path = Field(
        default=DEFAULT_DEMAND_PATH, description="Hourly baseline demand CSV"
    )
    power_dc: Path = Field(
        default=DEFAULT_DATA_CENTER_PATH, description="Hourly data-center load CSV"
    )
    existing_capacity: Path = Field(
        default=DEFAULT_CAPACITY_PATH, description="Existing capacity by technology CSV"
    )
    tech_params: Path = Field(
        default=DEFAULT_TECH_PARAMS_PATH, description="Technology parameters CSV"
    )
    cf_profiles: Path = Field(
        default=DEFAULT_CAPACITY_FACTORS_PATH,
        description="Hourly capacity-factor profiles CSV (one column per technology)",
    )

    def resolve(self, path_attr: str) -> Path:
        """Resolve a relative path against data_root."""
        rel_path = getattr(self, path_attr)
        return self.data_root / rel_path


class LoadingConfig(BaseModel):
    """Table loading behaviour."""

    model_config = ConfigDict(frozen=True)

    require_timestamp: bool = Field(
        default=False,
        description=(
            "Fail demand/data-center loads without a timestamp column "
            "(capacity-factor loads always require one)"
        ),
    )


class SolverConfig(BaseModel):
    """LP solver configuration (any solver name known to PuLP)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="PULP_CBC_CMD", description="PuLP solver name")
    msg: bool = Field(default=False, description="Show solver output")
    time_limit_seconds: float | None = Field(
        default=None, gt=0, description="Solver time limit"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Normalize solver name to PuLP's upper-case identifiers."""
        v = v.strip().upper()
        if not v:
            msg = "Solver name must not be empty"
            raise ValueError(msg)
        return v


class OutputConfig(BaseModel):
    """Result file configuration."""

    model_config = ConfigDict(frozen=True)

    output_root: Path = Field(
        default=Path("."), description="Directory for result CSV files"
    )
    generation_file: str = Field(default="hw4_results_generation.csv")
    investment_file: str = Field(default="hw4_results_investment.csv")

    @property
    def generation_path(self) -> Path:
        """Path to the hourly generation result file."""
        return self.output_root / self.generation_file

    @property
    def investment_path(self) -> Path:
        """Path to the capacity investment result file."""
        return self.output_root / self.investment_file


class ModelConfig(BaseModel):
    """Complete model run configuration."""

    model_config = ConfigDict(frozen=True)

    project: str = Field(default="capexpand", description="Run identifier")
    data_paths: DataPathsConfig = Field(default_factory=DataPathsConfig)
    loading: LoadingConfig = Field(default_factory=LoadingConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
