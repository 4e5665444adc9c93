"""Step trace collection and export.

A trace is the list of StepRecords produced by driving a stepper from its
current state to completion. Traces are tabulated with pandas for display
and CSV export.
"""

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from kruskal_stepper.algorithm.stepper import KruskalStepper, StepAction, StepRecord

TRACE_COLUMNS = [
    "step_before",
    "step_after",
    "action",
    "from_node",
    "to_node",
    "weight",
    "explanation",
    "mst_size",
    "total_weight",
]


@dataclass
class TraceSummary:
    """Aggregate view of a trace."""

    steps: int
    accepted: int
    rejected: int
    total_weight: float
    complete: bool


def run_to_completion(stepper: KruskalStepper, max_steps: int = 1000) -> list[StepRecord]:
    """Advance until the first COMPLETE record (inclusive).

    Args:
        stepper: Engine to drive; its current state is the starting point
        max_steps: Upper bound on advance calls

    Returns:
        StepRecords in order

    Raises:
        RuntimeError: If completion is not reached within max_steps
    """
    records: list[StepRecord] = []
    for _ in range(max_steps):
        record = stepper.advance()
        records.append(record)
        if record.action is StepAction.COMPLETE:
            return records
    raise RuntimeError(f"Stepper did not complete within {max_steps} steps")


def trace_to_dataframe(records: list[StepRecord]) -> pd.DataFrame:
    """Convert StepRecords to a DataFrame with one row per record."""
    rows = []
    for record in records:
        edge = record.edge
        rows.append(
            {
                "step_before": record.step_before,
                "step_after": record.step_after,
                "action": record.action.value,
                "from_node": edge.from_node if edge else None,
                "to_node": edge.to_node if edge else None,
                "weight": edge.weight if edge else None,
                "explanation": record.explanation,
                "mst_size": record.mst_size,
                "total_weight": record.total_weight,
            }
        )
    return pd.DataFrame(rows, columns=TRACE_COLUMNS)


def summarize_trace(records: list[StepRecord]) -> TraceSummary:
    df = trace_to_dataframe(records)
    action_counts = df["action"].value_counts()
    return TraceSummary(
        steps=len(df),
        accepted=int(action_counts.get(StepAction.ACCEPT.value, 0)),
        rejected=int(action_counts.get(StepAction.REJECT.value, 0)),
        total_weight=float(records[-1].total_weight) if records else 0.0,
        complete=bool(records) and records[-1].action is StepAction.COMPLETE,
    )


def export_trace(records: list[StepRecord], output: Path) -> Path:
    """Write the trace to a CSV file, creating parent directories.

    Returns:
        Path of the written file
    """
    output.parent.mkdir(parents=True, exist_ok=True)
    trace_to_dataframe(records).to_csv(output, index=False)
    return output
