"""Result persistence to CSV."""

from pathlib import Path

from capexpand.config.settings import OutputConfig
from capexpand.modeling.assembler import ModelResult
from capexpand.utils.logging import get_logger

log = get_logger(__name__)


def save_results(
    result: ModelResult,
    output: OutputConfig | None = None,
) -> tuple[Path, Path]:
    """Save generation and investment tables to CSV.

    Creates two files:
        - generation: timestamp plus one MW column per technology
        - investment: technology, new_capacity_mw

    Args:
        result: Solved model result.
        output: Output location and file names.

    Returns:
        Tuple of (generation_path, investment_path).
    """
    output = output or OutputConfig()
    output.output_root.mkdir(parents=True, exist_ok=True)

    generation_path = output.generation_path
    result.generation.to_csv(generation_path, index=False)
    log.info("Saved generation results", path=str(generation_path))

    investment_path = output.investment_path
    result.investment[["technology", "new_capacity_mw"]].to_csv(
        investment_path, index=False
    )
    log.info("Saved investment results", path=str(investment_path))

    return generation_path, investment_path
