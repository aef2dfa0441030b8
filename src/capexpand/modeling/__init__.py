"""
Capacity-expansion model assembly and solving.

Converts validated input tables into a linear program and delegates
solving to PuLP.
"""

from capexpand.modeling.assembler import (
    CapacityExpansionModel,
    ModelResult,
    ModelSolveError,
    build_capacity_model,
    solve_capacity_model,
)
from capexpand.modeling.inputs import (
    InputAlignmentError,
    ModelInputs,
    build_model_inputs,
)

__all__ = [
    "CapacityExpansionModel",
    "InputAlignmentError",
    "ModelInputs",
    "ModelResult",
    "ModelSolveError",
    "build_capacity_model",
    "build_model_inputs",
    "solve_capacity_model",
]
