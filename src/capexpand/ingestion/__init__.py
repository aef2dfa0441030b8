"""
Data ingestion layer for loading ETL outputs with schema validation.

All input files are read through this module so that column naming,
timestamp parsing and type coercion happen once, at the system boundary.
"""

from capexpand.ingestion.base import LoadError, TableLoader
from capexpand.ingestion.profiles import (
    CapacityFactorLoader,
    load_cf_profiles,
    technology_columns,
)
from capexpand.ingestion.technology import (
    ExistingCapacityLoader,
    TechnologyParameters,
    TechnologyParametersLoader,
    capacity_by_technology,
    load_existing_capacity,
    load_tech_params,
    parameters_by_technology,
)
from capexpand.ingestion.timeseries import (
    DataCenterLoadLoader,
    PowerDemandLoader,
    load_power_dc,
    load_power_demand,
)

__all__ = [
    "CapacityFactorLoader",
    "DataCenterLoadLoader",
    "ExistingCapacityLoader",
    "LoadError",
    "PowerDemandLoader",
    "TableLoader",
    "TechnologyParameters",
    "TechnologyParametersLoader",
    "capacity_by_technology",
    "load_cf_profiles",
    "load_existing_capacity",
    "load_power_dc",
    "load_power_demand",
    "load_tech_params",
    "parameters_by_technology",
    "technology_columns",
]
