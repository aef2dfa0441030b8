"""
Input validation for configured datasets.

Loads every input file through its loader and reports pass/fail results.
"""

from capexpand.validation.core import ValidationResult, ValidationRunner
from capexpand.validation.reporter import ConsoleReporter

__all__ = ["ConsoleReporter", "ValidationResult", "ValidationRunner"]
