"""
Console reporter for validation results.

Formats validation results using Rich for clear, colored output.
"""

from rich.console import Console
from rich.table import Table

from capexpand.validation.core import ValidationResult


class ConsoleReporter:
    """Formats and displays validation results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_results(self, results: list[ValidationResult]) -> None:
        """
        Print validation results as a formatted table.

        Args:
            results: List of validation results to display.
        """
        table = Table(title="Input Validation Results", show_header=True)
        table.add_column("Dataset", style="cyan", no_wrap=True)
        table.add_column("Schema", style="blue")
        table.add_column("Status", justify="center")
        table.add_column("Rows", justify="right")
        table.add_column("File", style="dim")

        for result in results:
            row_count = str(result.row_count) if result.row_count is not None else "-"
            table.add_row(
                result.dataset_name,
                result.schema_name,
                self._format_status(result),
                row_count,
                str(result.file_path),
            )

        self.console.print(table)
        self._print_summary(results)
        self._print_detailed_errors(results)

    def _format_status(self, result: ValidationResult) -> str:
        """Format validation status with color."""
        if not result.exists:
            return "[yellow]Missing[/yellow]"
        if result.schema_valid:
            return "[green]Pass[/green]"
        return "[red]Fail[/red]"

    def _print_summary(self, results: list[ValidationResult]) -> None:
        """Print summary statistics."""
        total = len(results)
        passed = sum(1 for r in results if r.schema_valid)
        missing = sum(1 for r in results if not r.exists)

        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Total datasets: {total}")
        self.console.print(f"  [green]Passed: {passed}[/green]")
        self.console.print(f"  [red]Failed: {total - passed}[/red]")
        if missing:
            self.console.print(f"  [yellow]Missing files: {missing}[/yellow]")

    def _print_detailed_errors(self, results: list[ValidationResult]) -> None:
        """Print detailed error messages for failed validations."""
        failed = [r for r in results if not r.schema_valid]

        if not failed:
            return

        self.console.print()
        self.console.print("[bold red]Validation Errors:[/bold red]")

        for result in failed:
            self.console.print()
            self.console.print(
                f"[bold]{result.dataset_name}[/bold] (schema: {result.schema_name}):"
            )
            self.console.print(f"  File: {result.file_path}")
            if result.error_message:
                for line in result.error_message.split("\n"):
                    self.console.print(f"  {line}", markup=False)
