"""
Schema definitions using Pandera for data validation.

Every loaded table is validated against one of these contracts before it
reaches the model.
"""

from capexpand.schemas.profiles import CapacityFactorSchema
from capexpand.schemas.technology import (
    ExistingCapacitySchema,
    TechnologyParametersSchema,
)
from capexpand.schemas.timeseries import DataCenterLoadSchema, PowerDemandSchema

__all__ = [
    "CapacityFactorSchema",
    "DataCenterLoadSchema",
    "ExistingCapacitySchema",
    "PowerDemandSchema",
    "TechnologyParametersSchema",
]
