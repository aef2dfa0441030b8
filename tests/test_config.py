"""Tests for configuration system."""

from pathlib import Path

import pytest

from capexpand.config import (
    DataPathsConfig,
    ModelConfig,
    OutputConfig,
    SolverConfig,
    default_config,
    load_config,
)


class TestDataPathsConfig:
    """Tests for DataPathsConfig."""

    def test_default_paths(self) -> None:
        """Test the conventional etl_outputs/ file names."""
        config = DataPathsConfig()
        assert config.power_demand == Path("etl_outputs/power_demand_baseline.csv")
        assert config.power_dc == Path("etl_outputs/power_dc_placeholder.csv")
        assert config.existing_capacity == Path("etl_outputs/existing_capacity_by_tech.csv")
        assert config.tech_params == Path("etl_outputs/technology_parameters.csv")
        assert config.cf_profiles == Path("etl_outputs/capacity_factors_profiles.csv")

    def test_resolve(self) -> None:
        """Test that paths resolve against data_root."""
        config = DataPathsConfig(data_root=Path("/data"))
        assert config.resolve("tech_params") == Path("/data/etl_outputs/technology_parameters.csv")

    def test_frozen(self) -> None:
        """Test that configs are immutable."""
        config = DataPathsConfig()
        with pytest.raises(ValueError):
            config.data_root = Path("/elsewhere")  # type: ignore[misc]


class TestSolverConfig:
    """Tests for SolverConfig."""

    def test_defaults(self) -> None:
        """Test that CBC is the default solver."""
        config = SolverConfig()
        assert config.name == "PULP_CBC_CMD"
        assert config.msg is False
        assert config.time_limit_seconds is None

    def test_name_normalized(self) -> None:
        """Test that solver names are upper-cased."""
        assert SolverConfig(name=" highs ").name == "HIGHS"

    def test_empty_name(self) -> None:
        """Test that an empty solver name is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            SolverConfig(name="  ")

    def test_nonpositive_time_limit(self) -> None:
        """Test that time limits must be positive."""
        with pytest.raises(ValueError):
            SolverConfig(time_limit_seconds=0)


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_file_names(self) -> None:
        """Test the conventional result file names."""
        config = OutputConfig(output_root=Path("out"))
        assert config.generation_path == Path("out/hw4_results_generation.csv")
        assert config.investment_path == Path("out/hw4_results_investment.csv")


class TestLoadConfig:
    """Tests for YAML configuration loading."""

    def test_default_config(self) -> None:
        """Test configuration without a file."""
        config = default_config()
        assert isinstance(config, ModelConfig)
        assert config.loading.require_timestamp is False
        assert config.output.output_root == Path(".")

    def test_load_full_config(self, tmp_path: Path) -> None:
        """Test loading every section from YAML."""
        config_file = tmp_path / "run.yaml"
        config_file.write_text(
            """
project: test
data:
  root: /data
  cf_profiles: profiles/cf.csv
loading:
  require_timestamp: true
solver:
  name: pulp_cbc_cmd
  msg: true
  time_limit_seconds: 60
output:
  root: results
  generation_file: gen.csv
""",
            encoding="utf-8",
        )
        config = load_config(config_file)

        assert config.project == "test"
        assert config.data_paths.data_root == Path("/data")
        assert config.data_paths.cf_profiles == Path("profiles/cf.csv")
        assert config.data_paths.power_demand == Path("etl_outputs/power_demand_baseline.csv")
        assert config.loading.require_timestamp is True
        assert config.solver.name == "PULP_CBC_CMD"
        assert config.solver.msg is True
        assert config.solver.time_limit_seconds == 60
        assert config.output.generation_path == Path("results/gen.csv")
        assert config.output.investment_file == "hw4_results_investment.csv"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test that every key is optional."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")
        config = load_config(config_file)
        assert config.project == "capexpand"
        assert config.solver.name == "PULP_CBC_CMD"

    def test_base_inheritance(self, tmp_path: Path) -> None:
        """Test that a sibling base.yaml is merged under the run config."""
        (tmp_path / "base.yaml").write_text(
            "solver:\n  name: PULP_CBC_CMD\n  msg: true\noutput:\n  root: base-out\n",
            encoding="utf-8",
        )
        config_file = tmp_path / "run.yaml"
        config_file.write_text("project: child\noutput:\n  root: child-out\n", encoding="utf-8")

        config = load_config(config_file)
        assert config.project == "child"
        assert config.solver.msg is True
        assert config.output.output_root == Path("child-out")

    def test_explicit_base_path(self, tmp_path: Path) -> None:
        """Test inheriting from a named base file."""
        base = tmp_path / "shared.yaml"
        base.write_text("loading:\n  require_timestamp: true\n", encoding="utf-8")
        config_file = tmp_path / "run.yaml"
        config_file.write_text("project: child\n", encoding="utf-8")

        config = load_config(config_file, base_path=base)
        assert config.loading.require_timestamp is True

    def test_env_var_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test ${VAR} and ${VAR:default} interpolation."""
        monkeypatch.setenv("CAPEXPAND_TEST_ROOT", "/mnt/inputs")
        monkeypatch.delenv("CAPEXPAND_TEST_UNSET", raising=False)
        config_file = tmp_path / "run.yaml"
        config_file.write_text(
            "data:\n  root: ${CAPEXPAND_TEST_ROOT}\noutput:\n  root: ${CAPEXPAND_TEST_UNSET:fallback}\n",
            encoding="utf-8",
        )
        config = load_config(config_file)
        assert config.data_paths.data_root == Path("/mnt/inputs")
        assert config.output.output_root == Path("fallback")

    def test_shipped_configs_load(self) -> None:
        """Test that the configs directory parses."""
        configs = Path(__file__).parent.parent / "configs"
        config = load_config(configs / "poland-2023.yaml")
        assert config.project == "poland-2023"
        assert config.loading.require_timestamp is True
        assert config.data_paths.power_dc == Path("etl_outputs/power_dc_placeholder.csv")
