"""
Console reporter for model inputs and results.

Formats loaded inputs and solved results using Rich.
"""

from rich.console import Console
from rich.table import Table

from capexpand.modeling.assembler import ModelResult
from capexpand.modeling.inputs import ModelInputs

# Investments and generation below this are not worth showing
SIGNIFICANCE_THRESHOLD = 1.0


class ResultsReporter:
    """Formats and displays model inputs and results to the console."""

    def __init__(self, console: Console, threshold: float = SIGNIFICANCE_THRESHOLD) -> None:
        """
        Initialize results reporter.

        Args:
            console: Rich Console instance for output.
            threshold: Minimum MW / MWh for a technology to be listed.
        """
        self.console = console
        self.threshold = threshold

    def print_inputs(self, inputs: ModelInputs) -> None:
        """Print a per-technology overview of the model inputs."""
        load = inputs.total_load
        self.console.print(
            f"[blue]Time periods:[/blue] {inputs.n_hours}  "
            f"[blue]Demand:[/blue] {inputs.demand_mw.min():.1f} - "
            f"{inputs.demand_mw.max():.1f} MW  "
            f"[blue]DC load:[/blue] {inputs.data_center_mw.min():.1f} - "
            f"{inputs.data_center_mw.max():.1f} MW  "
            f"[blue]Peak total:[/blue] {load.max():.1f} MW"
        )
        if inputs.timestamps is not None and len(inputs.timestamps) > 0:
            self.console.print(
                f"[dim]Date range: {inputs.timestamps.iloc[0]} to "
                f"{inputs.timestamps.iloc[-1]}[/dim]"
            )

        table = Table(title="Technologies", show_header=True)
        table.add_column("Technology", style="cyan", no_wrap=True)
        table.add_column("Type")
        table.add_column("Existing MW", justify="right")
        table.add_column("CAPEX €/kW", justify="right")
        table.add_column("Var cost €/MWh", justify="right")
        table.add_column("Efficiency", justify="right")
        table.add_column("Lifetime yrs", justify="right")
        table.add_column("Avg CF", justify="right")

        for tech in inputs.technologies:
            params = inputs.parameters[tech]
            cf = inputs.capacity_factors.get(tech)
            table.add_row(
                tech,
                "renewable" if cf is not None else "dispatchable",
                f"{inputs.capacity_of(tech):.1f}",
                f"{params.capex_eur_per_kw:.0f}",
                f"{params.var_cost_eur_per_mwh:.1f}",
                f"{params.efficiency:.3f}",
                f"{params.lifetime_years:.0f}",
                f"{cf.mean():.3f}" if cf is not None else "-",
            )

        self.console.print(table)

    def print_results(self, result: ModelResult) -> None:
        """Print objective, significant investments and generation mix."""
        self.console.print(f"[green]✓ Status: {result.status}[/green]")
        self.console.print(f"[green]Objective value: {result.objective_value:,.0f} €[/green]")

        investments = result.investment[
            result.investment["new_capacity_mw"] > self.threshold
        ]
        table = Table(title="Investment Results", show_header=True)
        table.add_column("Technology", style="cyan")
        table.add_column("New capacity MW", justify="right", style="green")
        for row in investments.itertuples(index=False):
            table.add_row(str(row.technology), f"{row.new_capacity_mw:,.1f}")
        if investments.empty:
            table.add_row("[dim]none[/dim]", "-")
        self.console.print(table)

        summary = result.generation_summary()
        summary = summary[summary["generation_mwh"] > self.threshold]
        table = Table(title="Generation Summary", show_header=True)
        table.add_column("Technology", style="cyan")
        table.add_column("Generation MWh", justify="right")
        table.add_column("Share", justify="right")
        for row in summary.itertuples(index=False):
            table.add_row(
                str(row.technology),
                f"{row.generation_mwh:,.0f}",
                f"{row.share_pct:.1f}%",
            )
        self.console.print(table)
