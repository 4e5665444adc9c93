"""Analysis helpers for stepper runs.

This package provides trace collection, tabulation and CSV export.
"""

from kruskal_stepper.analysis.trace import (
    TraceSummary,
    export_trace,
    run_to_completion,
    summarize_trace,
    trace_to_dataframe,
)

__all__ = [
    "TraceSummary",
    "export_trace",
    "run_to_completion",
    "summarize_trace",
    "trace_to_dataframe",
]
