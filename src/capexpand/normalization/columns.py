"""
Column name normalization and type coercion.

ETL outputs name the same quantity differently from file to file. Each data
kind declares an ordered synonym table; the normalizer looks it up once per
load and renames whatever spelling it finds to the canonical name.
"""

from dataclasses import dataclass

import pandas as pd

from capexpand.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class ColumnSynonyms:
    """Canonical column name with its recognized aliases (lowercase, in priority order)."""

    canonical: str
    aliases: tuple[str, ...] = ()

    @property
    def candidates(self) -> tuple[str, ...]:
        """Canonical name first, then aliases."""
        return (self.canonical, *(a for a in self.aliases if a != self.canonical))


TIMESTAMP = ColumnSynonyms("timestamp", ("datetime", "time"))

LOAD_MW = ColumnSynonyms("load_mw", ("power_demand_mw", "demand_mw", "load"))
POWER_DC_MW = ColumnSynonyms("power_dc_mw", ("dc_power_mw", "datacenter_power_mw"))
EXISTING_CAPACITY_MW = ColumnSynonyms(
    "existing_capacity_mw",
    ("capacity_mw", "installed_capacity_mw", "capacity"),
)

TECHNOLOGY = ColumnSynonyms("technology", ("tech", "technology_name"))
CAPEX = ColumnSynonyms("capex_eur_per_kw", ("capex", "capital_cost", "capex_eur_kw"))
VAR_COST = ColumnSynonyms(
    "var_cost_eur_per_mwh",
    ("var_cost", "variable_cost", "opex", "var_cost_eur_mwh"),
)
EFFICIENCY = ColumnSynonyms("efficiency", ("eta", "conversion_efficiency"))
LIFETIME = ColumnSynonyms(
    "lifetime_years",
    ("lifetime", "economic_lifetime", "lifetime_yrs"),
)

# Synonym tables per data kind
DEMAND_COLUMNS: tuple[ColumnSynonyms, ...] = (TIMESTAMP, LOAD_MW)
DATA_CENTER_COLUMNS: tuple[ColumnSynonyms, ...] = (TIMESTAMP, POWER_DC_MW)
CAPACITY_COLUMNS: tuple[ColumnSynonyms, ...] = (TECHNOLOGY, EXISTING_CAPACITY_MW)
TECH_PARAMS_COLUMNS: tuple[ColumnSynonyms, ...] = (
    TECHNOLOGY,
    CAPEX,
    VAR_COST,
    EFFICIENCY,
    LIFETIME,
)
CAPACITY_FACTOR_COLUMNS: tuple[ColumnSynonyms, ...] = (TIMESTAMP,)


class TypeCoercionError(ValueError):
    """Raised when a column cannot be converted to its canonical type."""

    def __init__(self, column: str, reason: str) -> None:
        self.column = column
        super().__init__(f"Column '{column}': {reason}")


def _key(name: object) -> str:
    return str(name).strip().lower()


def find_column(df: pd.DataFrame, synonyms: ColumnSynonyms) -> str | None:
    """
    Find the first column matching a synonym group.

    Args:
        df: DataFrame to search.
        synonyms: Synonym group to match (case-insensitive).

    Returns:
        The actual column name, or None if no synonym is present.
    """
    by_key: dict[str, str] = {}
    for col in df.columns:
        by_key.setdefault(_key(col), col)

    for candidate in synonyms.candidates:
        if candidate in by_key:
            return by_key[candidate]
    return None


def normalize_columns(
    df: pd.DataFrame,
    synonyms: tuple[ColumnSynonyms, ...],
) -> pd.DataFrame:
    """
    Rename columns to their canonical names.

    Columns matching no synonym group keep their original spelling. A group
    with no matching column is simply absent from the result.

    Args:
        df: DataFrame to normalize.
        synonyms: Synonym groups for this data kind.

    Returns:
        DataFrame with normalized column names.
    """
    rename_dict: dict[str, str] = {}
    for group in synonyms:
        found = find_column(df, group)
        if found is not None and found != group.canonical:
            rename_dict[found] = group.canonical

    if rename_dict:
        log.debug("Normalizing columns", renamed=rename_dict)
        df = df.rename(columns=rename_dict)

    return df


def validate_required_columns(
    df: pd.DataFrame,
    required: list[str],
    *,
    raise_on_missing: bool = True,
) -> list[str]:
    """
    Check that required columns are present.

    Args:
        df: DataFrame to check.
        required: List of required column names.
        raise_on_missing: Whether to raise error if columns missing.

    Returns:
        List of missing columns.

    Raises:
        ValueError: If raise_on_missing and columns are missing.
    """
    missing = [col for col in required if col not in df.columns]

    if missing and raise_on_missing:
        msg = f"Missing required columns: {missing}"
        raise ValueError(msg)

    if missing:
        log.warning("Missing columns", missing=missing)

    return missing


def coerce_float(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """
    Convert a column to float64.

    Args:
        df: DataFrame holding the column.
        column: Column name.

    Returns:
        DataFrame with the converted column.

    Raises:
        TypeCoercionError: If the column is missing, contains non-numeric
            text, or contains empty cells.
    """
    if column not in df.columns:
        raise TypeCoercionError(column, "column not found")

    values = df[column]
    if isinstance(values, pd.DataFrame):
        raise TypeCoercionError(column, "column appears more than once")

    values = values.map(lambda v: v.strip() if isinstance(v, str) else v)
    converted = pd.to_numeric(values, errors="coerce")

    bad = converted.isna()
    if bad.any():
        offending = values[bad].head(5).tolist()
        msg = f"cannot convert {int(bad.sum())} value(s) to float, e.g. {offending}"
        raise TypeCoercionError(column, msg)

    df = df.copy()
    df[column] = converted.astype("float64")
    return df


def coerce_string(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """
    Convert a column to stripped strings.

    Args:
        df: DataFrame holding the column.
        column: Column name.

    Returns:
        DataFrame with the converted column.

    Raises:
        TypeCoercionError: If the column is missing or has empty cells.
    """
    if column not in df.columns:
        raise TypeCoercionError(column, "column not found")

    values = df[column]
    if isinstance(values, pd.DataFrame):
        raise TypeCoercionError(column, "column appears more than once")

    empty = values.isna() | (values.astype(str).str.strip() == "")
    if empty.any():
        rows = values.index[empty].tolist()[:5]
        msg = f"{int(empty.sum())} empty value(s) at rows {rows}"
        raise TypeCoercionError(column, msg)

    df = df.copy()
    df[column] = values.astype(str).str.strip()
    return df
