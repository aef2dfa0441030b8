"""
Configuration management with typed Pydantic models.

Provides input paths, loading behaviour, solver and output settings.
"""

from capexpand.config.loader import default_config, load_config
from capexpand.config.settings import (
    DataPathsConfig,
    LoadingConfig,
    ModelConfig,
    OutputConfig,
    SolverConfig,
)

__all__ = [
    "DataPathsConfig",
    "LoadingConfig",
    "ModelConfig",
    "OutputConfig",
    "SolverConfig",
    "default_config",
    "load_config",
]
