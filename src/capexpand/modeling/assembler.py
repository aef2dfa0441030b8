"""
Linear capacity-expansion model built with PuLP.

One capacity-addition variable per technology, one generation variable per
(hour, technology) and one curtailment variable per (hour, renewable
technology). Hourly supply meets demand plus data-center load exactly;
renewables are bounded by available capacity times capacity factor,
dispatchable technologies by total capacity.
"""

from dataclasses import dataclass

import pandas as pd
import pulp as pl

from capexpand.config.settings import SolverConfig
from capexpand.modeling.inputs import ModelInputs
from capexpand.utils.logging import get_logger

log = get_logger(__name__)


class ModelSolveError(RuntimeError):
    """Raised when the solver does not return an optimal solution."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"Optimization failed with status: {status}")


@dataclass
class CapacityExpansionModel:
    """PuLP problem together with its decision variables."""

    problem: pl.LpProblem
    inputs: ModelInputs
    cap_new: dict[str, pl.LpVariable]
    generation: dict[tuple[int, str], pl.LpVariable]
    curtailment: dict[tuple[int, str], pl.LpVariable]

    @property
    def n_variables(self) -> int:
        """Number of decision variables."""
        return len(self.problem.variables())

    @property
    def n_constraints(self) -> int:
        """Number of constraints."""
        return self.problem.numConstraints()


@dataclass
class ModelResult:
    """
    Solved model values.

    Attributes:
        status: Solver status string (e.g. "Optimal").
        objective_value: Total cost in EUR.
        investment: Columns technology, new_capacity_mw.
        generation: Column timestamp plus one MW column per technology.
        curtailment: Column timestamp plus one MW column per renewable.
    """

    status: str
    objective_value: float
    investment: pd.DataFrame
    generation: pd.DataFrame
    curtailment: pd.DataFrame

    def generation_summary(self) -> pd.DataFrame:
        """Total generation and share per technology."""
        totals = self.generation.drop(columns=["timestamp"]).sum()
        grand_total = float(totals.sum())
        share = totals / grand_total * 100.0 if grand_total > 0 else totals * 0.0
        return pd.DataFrame(
            {
                "technology": totals.index.astype(str),
                "generation_mwh": totals.to_numpy(),
                "share_pct": share.to_numpy(),
            }
        )


def build_capacity_model(inputs: ModelInputs) -> CapacityExpansionModel:
    """
    Build the capacity-expansion LP.

    Variable names use positional indices, so technology names may contain
    any characters.

    Args:
        inputs: Aligned model inputs.

    Returns:
        The unsolved model.
    """
    prob = pl.LpProblem("capacity_expansion", pl.LpMinimize)

    technologies = inputs.technologies
    renewables = inputs.renewable_technologies
    dispatchables = inputs.dispatchable_technologies
    hours = range(inputs.n_hours)
    index = {tech: j for j, tech in enumerate(technologies)}

    # --- Variables -----------------------------------------------------------
    cap_new = {
        tech: pl.LpVariable(f"cap_new_{index[tech]}", lowBound=0) for tech in technologies
    }
    generation = {
        (t, tech): pl.LpVariable(f"gen_{t}_{index[tech]}", lowBound=0)
        for t in hours
        for tech in technologies
    }
    curtailment = {
        (t, tech): pl.LpVariable(f"curtail_{t}_{index[tech]}", lowBound=0)
        for t in hours
        for tech in renewables
    }

    # --- Objective -----------------------------------------------------------
    investment_cost = pl.lpSum(
        inputs.parameters[tech].capex_eur_per_kw * cap_new[tech] for tech in technologies
    )
    operating_cost = pl.lpSum(
        inputs.parameters[tech].var_cost_eur_per_mwh * generation[t, tech]
        for t in hours
        for tech in technologies
    )
    prob += investment_cost + operating_cost

    # --- Constraints ---------------------------------------------------------
    total_load = inputs.total_load
    for t in hours:
        prob += (
            pl.lpSum(generation[t, tech] for tech in technologies) == float(total_load.iloc[t]),
            f"power_balance_{t}",
        )

    for tech in renewables:
        cf = inputs.capacity_factors[tech]
        for t in hours:
            available = float(cf.iloc[t]) * (inputs.capacity_of(tech) + cap_new[tech])
            prob += (
                generation[t, tech] + curtailment[t, tech] == available,
                f"renewable_availability_{t}_{index[tech]}",
            )

    for tech in dispatchables:
        for t in hours:
            prob += (
                generation[t, tech] <= inputs.capacity_of(tech) + cap_new[tech],
                f"dispatch_limit_{t}_{index[tech]}",
            )

    model = CapacityExpansionModel(
        problem=prob,
        inputs=inputs,
        cap_new=cap_new,
        generation=generation,
        curtailment=curtailment,
    )
    log.info(
        "Model created",
        technologies=len(technologies),
        hours=inputs.n_hours,
        variables=model.n_variables,
        constraints=model.n_constraints,
    )
    return model


def _get_solver(config: SolverConfig) -> pl.LpSolver:
    kwargs: dict[str, object] = {"msg": config.msg}
    if config.time_limit_seconds is not None:
        kwargs["timeLimit"] = config.time_limit_seconds
    return pl.getSolver(config.name, **kwargs)


def _value(var: pl.LpVariable) -> float:
    value = var.varValue
    return float(value) if value is not None else 0.0


def _hour_index(inputs: ModelInputs) -> pd.Series:
    if inputs.timestamps is not None:
        return inputs.timestamps.reset_index(drop=True)
    return pd.Series(range(1, inputs.n_hours + 1), name="timestamp")


def solve_capacity_model(
    model: CapacityExpansionModel,
    solver_config: SolverConfig | None = None,
) -> ModelResult:
    """
    Solve the model and extract results.

    Args:
        model: Model from build_capacity_model().
        solver_config: Solver selection; defaults to CBC bundled with PuLP.

    Returns:
        ModelResult with investment, generation and curtailment tables.

    Raises:
        ModelSolveError: If the solver status is not optimal.
    """
    solver_config = solver_config or SolverConfig()
    inputs = model.inputs

    log.info("Solving model", solver=solver_config.name)
    model.problem.solve(_get_solver(solver_config))
    status = pl.LpStatus[model.problem.status]

    if model.problem.status != pl.LpStatusOptimal:
        log.error("Optimization failed", status=status)
        raise ModelSolveError(status)

    objective = float(pl.value(model.problem.objective) or 0.0)
    log.info("Optimization solved", status=status, objective_eur=round(objective, 2))

    hours = range(inputs.n_hours)
    investment = pd.DataFrame(
        {
            "technology": inputs.technologies,
            "new_capacity_mw": [_value(model.cap_new[tech]) for tech in inputs.technologies],
        }
    )

    generation = pd.DataFrame({"timestamp": _hour_index(inputs)})
    for tech in inputs.technologies:
        generation[tech] = [_value(model.generation[t, tech]) for t in hours]

    curtailment = pd.DataFrame({"timestamp": _hour_index(inputs)})
    for tech in inputs.renewable_technologies:
        curtailment[tech] = [_value(model.curtailment[t, tech]) for t in hours]

    return ModelResult(
        status=status,
        objective_value=objective,
        investment=investment,
        generation=generation,
        curtailment=curtailment,
    )
