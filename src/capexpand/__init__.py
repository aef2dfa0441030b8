"""
capexpand: Capacity Expansion Model for Electricity Systems.

This package loads ETL outputs (demand, data-center load, existing capacity,
technology parameters, capacity-factor profiles), normalizes them into a fixed
schema and solves a linear capacity-expansion model.
"""

from importlib.metadata import version

__version__ = version("capexpand")

__all__ = ["__version__"]
