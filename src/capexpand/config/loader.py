"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance from a
sibling base.yaml. Every key is optional; missing keys fall back to defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from capexpand.config.settings import (
    DataPathsConfig,
    LoadingConfig,
    ModelConfig,
    OutputConfig,
    SolverConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return _process_config_values(data) if data else {}


def default_config() -> ModelConfig:
    """Return a configuration using the conventional etl_outputs/ paths."""
    return ModelConfig()


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> ModelConfig:
    """
    Load model configuration from YAML file(s).

    Recognized sections: project, data, loading, solver, output.

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated ModelConfig instance.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        if potential_base.exists() and potential_base.resolve() != config_path.resolve():
            base_data = load_yaml(potential_base)
        else:
            base_data = {}

    main_data = load_yaml(config_path)
    merged = _deep_merge(base_data, main_data)

    defaults = DataPathsConfig()
    data_data = merged.get("data", {}) or {}
    data_paths = DataPathsConfig(
        data_root=Path(data_data.get("root", defaults.data_root)),
        power_demand=Path(data_data.get("power_demand", defaults.power_demand)),
        power_dc=Path(data_data.get("power_dc", defaults.power_dc)),
        existing_capacity=Path(
            data_data.get("existing_capacity", defaults.existing_capacity)
        ),
        tech_params=Path(data_data.get("tech_params", defaults.tech_params)),
        cf_profiles=Path(data_data.get("cf_profiles", defaults.cf_profiles)),
    )

    loading_data = merged.get("loading", {}) or {}
    loading = LoadingConfig(
        require_timestamp=loading_data.get("require_timestamp", False),
    )

    solver_data = merged.get("solver", {}) or {}
    solver = SolverConfig(
        name=solver_data.get("name", "PULP_CBC_CMD"),
        msg=solver_data.get("msg", False),
        time_limit_seconds=solver_data.get("time_limit_seconds"),
    )

    output_data = merged.get("output", {}) or {}
    output = OutputConfig(
        output_root=Path(output_data.get("root", ".")),
        generation_file=output_data.get("generation_file", "hw4_results_generation.csv"),
        investment_file=output_data.get("investment_file", "hw4_results_investment.csv"),
    )

    return ModelConfig(
        project=merged.get("project", "capexpand"),
        data_paths=data_paths,
        loading=loading,
        solver=solver,
        output=output,
    )
