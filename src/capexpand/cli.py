"""Command-line interface for the capexpand model."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from capexpand.config.settings import ModelConfig

app = typer.Typer(
    name="capexpand",
    help="Capacity-expansion model for electricity systems built from ETL outputs.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file. Uses etl_outputs/ defaults if omitted.",
        exists=True,
        dir_okay=False,
    ),
]


def _load_config(config: Path | None) -> "ModelConfig":
    from capexpand.config.loader import default_config, load_config

    if config is None:
        console.print("[dim]No configuration given, using defaults[/dim]")
        return default_config()

    console.print(f"[blue]Loading configuration from {config}[/blue]")
    return load_config(config)


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit logs as JSON."),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    from capexpand.utils.logging import configure_logging

    configure_logging(level=log_level, json_output=json_logs)


@app.command()
def run(
    config: ConfigOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory for result CSVs (overrides config).",
            file_okay=False,
        ),
    ] = None,
    no_save: Annotated[
        bool,
        typer.Option("--no-save", help="Do not write result CSVs."),
    ] = False,
) -> None:
    """Load inputs, solve the capacity-expansion model and save results."""
    from capexpand.ingestion.base import LoadError
    from capexpand.modeling.assembler import ModelSolveError
    from capexpand.modeling.inputs import InputAlignmentError
    from capexpand.pipeline import run_model
    from capexpand.reporting import ResultsReporter

    model_config = _load_config(config)
    if output is not None:
        model_config = model_config.model_copy(
            update={"output": model_config.output.model_copy(update={"output_root": output})}
        )

    console.print(f"[blue]Running capacity-expansion model '{model_config.project}'[/blue]")
    console.print(f"[dim]Data root: {model_config.data_paths.data_root}[/dim]")
    console.print(f"[dim]Solver: {model_config.solver.name}[/dim]")

    try:
        result = run_model(model_config, save=not no_save)
    except LoadError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e
    except (InputAlignmentError, ModelSolveError) as e:
        console.print(f"[red]Model run failed: {e}[/red]")
        raise typer.Exit(code=1) from e

    reporter = ResultsReporter(console)
    console.print()
    reporter.print_inputs(result.inputs)

    table = Table(title="Model Size")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Variables", str(result.n_variables))
    table.add_row("Constraints", str(result.n_constraints))
    console.print(table)

    console.print()
    reporter.print_results(result.result)

    if result.generation_path and result.investment_path:
        console.print(f"\n[green]Saved generation results to: {result.generation_path}[/green]")
        console.print(f"[green]Saved investment results to: {result.investment_path}[/green]")


@app.command()
def validate(config: ConfigOption = None) -> None:
    """Validate input files against their schemas."""
    from capexpand.validation import ConsoleReporter, ValidationRunner

    console.print("[blue]Running input validation...[/blue]")

    model_config = _load_config(config)

    runner = ValidationRunner(model_config)
    results = runner.run()

    reporter = ConsoleReporter(console)
    reporter.print_results(results)

    if any(not r.schema_valid for r in results):
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version information."""
    from capexpand import __version__

    console.print(f"capexpand version {__version__}")


if __name__ == "__main__":
    app()
