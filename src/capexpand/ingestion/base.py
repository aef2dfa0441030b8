"""
Base classes and utilities for table loading.

Provides the common read → normalize → transform → validate sequence for
all loaders, and wraps every failure in a single LoadError.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Generic, TypeVar

import pandas as pd
import pandera.pandas as pa

from capexpand.normalization.columns import ColumnSynonyms, normalize_columns
from capexpand.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T", bound=pa.DataFrameModel)


class LoadError(Exception):
    """
    Raised when an input table cannot be loaded.

    Wraps the underlying cause (missing file, unparseable timestamp,
    non-numeric value, schema violation, I/O fault) together with the path.
    """

    def __init__(self, path: Path, cause: BaseException, *, kind: str = "table") -> None:
        self.path = Path(path)
        self.cause = cause
        self.kind = kind
        super().__init__(f"Error loading {kind} from {self.path}: {cause}")


class TableLoader(ABC, Generic[T]):
    """
    Abstract base class for table loaders.

    Subclasses declare their synonym table and implement _transform(), which
    receives the normalized raw table and returns typed columns.
    """

    kind: ClassVar[str] = "table"
    synonyms: ClassVar[tuple[ColumnSynonyms, ...]] = ()

    def __init__(self, path: Path | str, schema: type[T]) -> None:
        """
        Initialize table loader.

        Args:
            path: CSV file to read.
            schema: Pandera schema for validation.
        """
        self.path = Path(path)
        self.schema = schema

    def load(self, *, validate: bool = True) -> pd.DataFrame:
        """
        Load, normalize and optionally validate the table.

        Args:
            validate: Whether to validate against schema.

        Returns:
            Loaded table with canonical column names and types.

        Raises:
            LoadError: If any step fails; the original exception is
                available as ``cause`` and ``__cause__``.
        """
        try:
            df = self._load_raw()
            df = normalize_columns(df, self.synonyms)
            df = self._transform(df)
            if validate:
                df = self._validate(df)
        except LoadError:
            raise
        except Exception as e:
            log.error("Load failed", kind=self.kind, path=str(self.path), error=str(e))
            raise LoadError(self.path, e, kind=self.kind) from e

        log.info("Loaded table", kind=self.kind, path=str(self.path), rows=len(df))
        return df

    def _load_raw(self) -> pd.DataFrame:
        """Read the CSV with every cell as a string."""
        if not self.path.exists():
            msg = f"{self.kind.capitalize()} file not found: {self.path}"
            raise FileNotFoundError(msg)

        log.debug("Reading CSV", kind=self.kind, path=str(self.path))
        return pd.read_csv(self.path, dtype=str, encoding="utf-8")

    @abstractmethod
    def _transform(self, df: pd.DataFrame) -> pd.DataFrame:
        """Parse, project and coerce the normalized table."""
        ...

    def _validate(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Validate DataFrame against schema.

        Args:
            df: DataFrame to validate.

        Returns:
            Validated DataFrame.
        """
        return self.schema.validate(df)
