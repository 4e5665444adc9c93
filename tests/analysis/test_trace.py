"""Tests for trace collection and export."""

import pandas as pd
import pytest

from kruskal_stepper.algorithm.stepper import KruskalStepper, StepAction
from kruskal_stepper.analysis.trace import (
    TRACE_COLUMNS,
    export_trace,
    run_to_completion,
    summarize_trace,
    trace_to_dataframe,
)
from kruskal_stepper.core.graph import SAMPLE_EDGES, SAMPLE_NODES, Edge, Node


@pytest.fixture
def records():
    return run_to_completion(KruskalStepper(SAMPLE_NODES, SAMPLE_EDGES))


class TestRunToCompletion:
    """Tests for run_to_completion."""

    def test_stops_after_first_complete(self, records):
        assert records[0].action is StepAction.SORT
        assert records[-1].action is StepAction.COMPLETE
        assert sum(1 for r in records if r.action is StepAction.COMPLETE) == 1
        assert len(records) == 8

    def test_resumes_from_current_state(self):
        stepper = KruskalStepper(SAMPLE_NODES, SAMPLE_EDGES)
        stepper.advance()
        stepper.advance()
        records = run_to_completion(stepper)
        assert records[0].step_before == 2
        assert len(records) == 6

    def test_max_steps_exceeded(self):
        stepper = KruskalStepper(SAMPLE_NODES, SAMPLE_EDGES)
        with pytest.raises(RuntimeError, match="did not complete"):
            run_to_completion(stepper, max_steps=3)


class TestTraceDataFrame:
    """Tests for trace_to_dataframe."""

    def test_columns_and_rows(self, records):
        df = trace_to_dataframe(records)
        assert list(df.columns) == TRACE_COLUMNS
        assert len(df) == len(records)

    def test_edge_columns(self, records):
        df = trace_to_dataframe(records)
        accepted = df[df["action"] == "accept"]
        assert list(zip(accepted["from_node"], accepted["to_node"])) == [
            (1, 2),
            (0, 1),
            (1, 4),
            (2, 3),
        ]
        assert pd.isna(df.iloc[0]["from_node"])

    def test_empty_trace(self):
        df = trace_to_dataframe([])
        assert df.empty
        assert list(df.columns) == TRACE_COLUMNS


class TestSummary:
    """Tests for summarize_trace."""

    def test_sample_summary(self, records):
        summary = summarize_trace(records)
        assert summary.steps == 8
        assert summary.accepted == 4
        assert summary.rejected == 2
        assert summary.total_weight == 12
        assert summary.complete

    def test_disconnected_summary(self):
        stepper = KruskalStepper([Node(i) for i in range(4)], [Edge(0, 1, 3)])
        summary = summarize_trace(run_to_completion(stepper))
        assert summary.accepted == 1
        assert summary.rejected == 0
        assert summary.total_weight == 3


class TestExport:
    """Tests for export_trace."""

    def test_export_csv(self, records, tmp_path):
        output = tmp_path / "nested" / "trace.csv"
        result = export_trace(records, output)

        assert result == output
        assert output.exists()
        df = pd.read_csv(output)
        assert len(df) == 8
        assert df["action"].tolist()[-1] == "complete"
        assert df["total_weight"].max() == 12
