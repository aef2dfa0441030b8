"""
Result reporting: console summaries and CSV export.

Kept separate from loading and modeling so that the core only returns
values and never prints.
"""

from capexpand.reporting.console import ResultsReporter
from capexpand.reporting.export import save_results

__all__ = ["ResultsReporter", "save_results"]
