"""
Core validation logic for input files.

Runs each configured dataset through its loader and schema.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from capexpand.config.settings import ModelConfig
from capexpand.ingestion.base import LoadError, TableLoader
from capexpand.ingestion.profiles import CapacityFactorLoader
from capexpand.ingestion.technology import (
    ExistingCapacityLoader,
    TechnologyParametersLoader,
)
from capexpand.ingestion.timeseries import DataCenterLoadLoader, PowerDemandLoader
from capexpand.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of validating a single dataset."""

    dataset_name: str
    schema_name: str
    file_path: Path
    exists: bool
    schema_valid: bool
    row_count: int | None
    error_message: str | None


class ValidationRunner:
    """
    Runs validation for all configured datasets.

    Each dataset is loaded with schema validation enabled; any LoadError
    marks the dataset as failed.
    """

    def __init__(self, config: ModelConfig) -> None:
        """
        Initialize validation runner.

        Args:
            config: Model configuration containing data paths.
        """
        self.config = config

    def _loaders(self) -> dict[str, Callable[[Path], TableLoader]]:
        strict = self.config.loading.require_timestamp
        return {
            "power_demand": lambda p: PowerDemandLoader(p, require_timestamp=strict),
            "power_dc": lambda p: DataCenterLoadLoader(p, require_timestamp=strict),
            "existing_capacity": ExistingCapacityLoader,
            "tech_params": TechnologyParametersLoader,
            "cf_profiles": CapacityFactorLoader,
        }

    def run(self) -> list[ValidationResult]:
        """
        Run validation for all datasets in config.

        Returns:
            List of validation results, one per dataset.
        """
        return [
            self._validate_dataset(name, factory)
            for name, factory in self._loaders().items()
        ]

    def _validate_dataset(
        self, dataset_attr: str, factory: Callable[[Path], TableLoader]
    ) -> ValidationResult:
        """
        Validate a single dataset.

        Args:
            dataset_attr: Attribute name from DataPathsConfig.
            factory: Callable creating the loader for a path.

        Returns:
            ValidationResult for the dataset.
        """
        file_path = self.config.data_paths.resolve(dataset_attr)
        loader = factory(file_path)
        schema_name = loader.schema.__name__

        try:
            df = loader.load(validate=True)
        except LoadError as e:
            log.warning("Validation failed", dataset=dataset_attr, error=str(e.cause))
            return ValidationResult(
                dataset_name=dataset_attr,
                schema_name=schema_name,
                file_path=file_path,
                exists=file_path.exists(),
                schema_valid=False,
                row_count=None,
                error_message=f"{type(e.cause).__name__}: {e.cause}",
            )

        return ValidationResult(
            dataset_name=dataset_attr,
            schema_name=schema_name,
            file_path=file_path,
            exists=True,
            schema_valid=True,
            row_count=len(df),
            error_message=None,
        )
