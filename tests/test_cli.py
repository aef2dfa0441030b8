"""Tests for the command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from capexpand.cli import app

runner = CliRunner()


def _write_config(input_dir: Path) -> Path:
    config_file = input_dir / "run.yaml"
    config_file.write_text(
        f"project: cli-test\ndata:\n  root: {input_dir}\noutput:\n  root: {input_dir / 'out'}\n",
        encoding="utf-8",
    )
    return config_file


class TestCli:
    """Tests for the capexpand commands."""

    def test_version(self) -> None:
        """Test the version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "capexpand version" in result.output

    def test_validate(self, input_dir: Path) -> None:
        """Test validation of a complete input set."""
        result = runner.invoke(app, ["validate", "--config", str(_write_config(input_dir))])
        assert result.exit_code == 0
        assert "Passed: 5" in result.output

    def test_validate_failure_exit_code(self, input_dir: Path) -> None:
        """Test that a failed dataset sets a non-zero exit code."""
        config_file = _write_config(input_dir)
        (input_dir / "etl_outputs" / "power_dc_placeholder.csv").unlink()
        result = runner.invoke(app, ["validate", "--config", str(config_file)])
        assert result.exit_code == 1

    def test_run(self, input_dir: Path) -> None:
        """Test a full run from the command line."""
        result = runner.invoke(app, ["run", "--config", str(_write_config(input_dir))])
        assert result.exit_code == 0, result.output
        assert (input_dir / "out" / "hw4_results_generation.csv").exists()
        assert (input_dir / "out" / "hw4_results_investment.csv").exists()

    def test_run_output_override(self, input_dir: Path, tmp_path: Path) -> None:
        """Test that --output replaces the configured directory."""
        target = tmp_path / "override"
        result = runner.invoke(
            app, ["run", "--config", str(_write_config(input_dir)), "--output", str(target)]
        )
        assert result.exit_code == 0, result.output
        assert (target / "hw4_results_investment.csv").exists()

    def test_run_load_error(self, input_dir: Path) -> None:
        """Test that a load failure exits with code 1."""
        config_file = _write_config(input_dir)
        (input_dir / "etl_outputs" / "power_demand_baseline.csv").write_text(
            "timestamp,load_mw\n2023-01-01,lots\n", encoding="utf-8"
        )
        result = runner.invoke(app, ["run", "--config", str(config_file)])
        assert result.exit_code == 1
        assert "Error" in result.output
