"""
Model run pipeline.

Orchestrates input loading, model assembly, solving and result export.
"""

from capexpand.pipeline.run import InputTables, RunResult, load_inputs, run_model

__all__ = ["InputTables", "RunResult", "load_inputs", "run_model"]
