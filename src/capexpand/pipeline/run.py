"""
Model run pipeline implementation.

Loads all five input tables, builds and solves the capacity-expansion
model, and optionally writes the result CSVs.
"""

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from capexpand.config.settings import ModelConfig
from capexpand.ingestion.profiles import load_cf_profiles
from capexpand.ingestion.technology import load_existing_capacity, load_tech_params
from capexpand.ingestion.timeseries import load_power_dc, load_power_demand
from capexpand.modeling.assembler import (
    ModelResult,
    build_capacity_model,
    solve_capacity_model,
)
from capexpand.modeling.inputs import ModelInputs, build_model_inputs
from capexpand.reporting.export import save_results
from capexpand.utils.logging import get_logger, log_context

log = get_logger(__name__)


@dataclass
class InputTables:
    """The five validated input tables of one run."""

    demand: pd.DataFrame
    data_center: pd.DataFrame
    existing_capacity: pd.DataFrame
    tech_params: pd.DataFrame
    cf_profiles: pd.DataFrame


@dataclass
class RunResult:
    """
    Result of a model run.

    Attributes:
        inputs: Aligned model inputs.
        result: Solved model values.
        n_variables: Number of LP variables.
        n_constraints: Number of LP constraints.
        generation_path: Written generation CSV (if saved).
        investment_path: Written investment CSV (if saved).
    """

    inputs: ModelInputs
    result: ModelResult
    n_variables: int
    n_constraints: int
    generation_path: Path | None = None
    investment_path: Path | None = None


def load_inputs(config: ModelConfig) -> InputTables:
    """
    Load all input tables named in the configuration.

    Args:
        config: Model configuration.

    Returns:
        The five validated tables.

    Raises:
        LoadError: If any table fails to load.
    """
    paths = config.data_paths
    strict = config.loading.require_timestamp

    return InputTables(
        demand=load_power_demand(paths.resolve("power_demand"), require_timestamp=strict),
        data_center=load_power_dc(paths.resolve("power_dc"), require_timestamp=strict),
        existing_capacity=load_existing_capacity(paths.resolve("existing_capacity")),
        tech_params=load_tech_params(paths.resolve("tech_params")),
        cf_profiles=load_cf_profiles(paths.resolve("cf_profiles")),
    )


def run_model(config: ModelConfig, *, save: bool = True) -> RunResult:
    """
    Run the full load → build → solve (→ save) sequence.

    Args:
        config: Model configuration.
        save: Whether to write the result CSVs.

    Returns:
        RunResult with inputs, results and written paths.

    Raises:
        LoadError: If an input table fails to load.
        InputAlignmentError: If the tables do not share one hourly grid.
        ModelSolveError: If no optimal solution is found.
    """
    with log_context(project=config.project):
        tables = load_inputs(config)
        inputs = build_model_inputs(
            tables.demand,
            tables.data_center,
            tables.existing_capacity,
            tables.tech_params,
            tables.cf_profiles,
        )

        model = build_capacity_model(inputs)
        result = solve_capacity_model(model, config.solver)

        run = RunResult(
            inputs=inputs,
            result=result,
            n_variables=model.n_variables,
            n_constraints=model.n_constraints,
        )
        if save:
            run.generation_path, run.investment_path = save_results(result, config.output)

        log.info("Model run completed", objective_eur=round(result.objective_value, 2))
        return run
