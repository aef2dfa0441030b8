"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog

from capexpand.config.settings import DataPathsConfig, ModelConfig, OutputConfig
from capexpand.utils.logging import HANDLER_NAME, SOLVER_LOGGERS

DEMAND_CSV = """timestamp,load_mw
2023-01-01 00:00:00,100.0
2023-01-01 01:00:00,120.0
2023-01-01 02:00:00,90.0
"""

DATA_CENTER_CSV = """timestamp,power_dc_mw
2023-01-01 00:00:00,10.0
2023-01-01 01:00:00,10.0
2023-01-01 02:00:00,15.0
"""

CAPACITY_CSV = """technology,existing_capacity_mw
WindOnshore,50.0
SolarPV,20.0
"""

TECH_PARAMS_CSV = """technology,capex_eur_per_kw,var_cost_eur_per_mwh,efficiency,lifetime_years
WindOnshore,1200.0,0.0,1.0,25
SolarPV,600.0,0.0,1.0,25
"""

CF_CSV = """timestamp,WindOnshore,SolarPV
2023-01-01T00:00,0.5,0.0
2023-01-01T01:00,0.3,0.4
2023-01-01T02:00,0.6,0.2
"""


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes CSV text to a file under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def input_dir(tmp_path: Path, write_csv: Callable[[str, str], Path]) -> Path:
    """Create a complete, valid set of input files (T=3, two renewables)."""
    write_csv("etl_outputs/power_demand_baseline.csv", DEMAND_CSV)
    write_csv("etl_outputs/power_dc_placeholder.csv", DATA_CENTER_CSV)
    write_csv("etl_outputs/existing_capacity_by_tech.csv", CAPACITY_CSV)
    write_csv("etl_outputs/technology_parameters.csv", TECH_PARAMS_CSV)
    write_csv("etl_outputs/capacity_factors_profiles.csv", CF_CSV)
    return tmp_path


@pytest.fixture
def model_config(input_dir: Path) -> ModelConfig:
    """Create a model configuration pointing at the sample inputs."""
    return ModelConfig(
        project="test-run",
        data_paths=DataPathsConfig(data_root=input_dir),
        output=OutputConfig(output_root=input_dir / "results"),
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop logging configuration bound to a test's captured streams."""
    root = logging.getLogger()
    root_level = root.level
    yield
    structlog.reset_defaults()
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)
    root.setLevel(root_level)
    for name in SOLVER_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
