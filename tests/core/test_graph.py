"""Tests for graph types and loading."""

import json

import pytest

from kruskal_stepper.core.graph import (
    SAMPLE_EDGES,
    SAMPLE_NODES,
    Edge,
    Node,
    load_graph,
    resolve_graph,
    sample_graph,
)
from kruskal_stepper.error.stepper import GraphFileError


class TestEdge:
    """Tests for the Edge dataclass."""

    def test_value_equality(self):
        assert Edge(0, 1, 2) == Edge(0, 1, 2)
        assert Edge(0, 1, 2) != Edge(1, 0, 2)

    def test_immutable(self):
        edge = Edge(0, 1, 2)
        with pytest.raises(AttributeError):
            edge.weight = 5

    def test_label(self):
        assert Edge(3, 4, 7).label() == "(3 - 4)"
        assert Edge(3, 4, 7).endpoints() == (3, 4)

    def test_same_link_is_unordered(self):
        assert Edge(1, 2, 1).same_link(Edge(2, 1, 1))
        assert not Edge(1, 2, 1).same_link(Edge(1, 3, 1))
        assert not Edge(1, 2, 1).same_link(Edge(1, 2, 2))


class TestSampleGraph:
    """Tests for the built-in sample graph."""

    def test_sample_graph(self):
        graph = sample_graph()
        assert graph.node_count == 5
        assert graph.edge_count == 6
        assert graph.edges[0] == Edge(0, 1, 2)

    def test_sample_graph_is_a_copy(self):
        graph = sample_graph()
        graph.edges.clear()
        assert len(SAMPLE_EDGES) == 6
        assert sample_graph().edge_count == 6

    def test_resolve_none_returns_sample(self):
        assert resolve_graph(None).nodes == list(SAMPLE_NODES)


class TestLoadGraph:
    """Tests for load_graph."""

    def test_load_valid_file(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(
            json.dumps(
                {
                    "nodes": [{"id": 0, "x": 1, "y": 2}, {"id": 1}],
                    "edges": [{"from": 0, "to": 1, "weight": 2.5}],
                }
            )
        )

        graph = load_graph(path)

        assert graph.nodes == [Node(0, 1, 2), Node(1, 0, 0)]
        assert graph.edges == [Edge(0, 1, 2.5)]

    def test_edges_optional(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"nodes": [{"id": 0}]}))
        assert load_graph(path).edges == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text("{not json")
        with pytest.raises(GraphFileError, match="Invalid JSON"):
            load_graph(path)

    def test_missing_fields(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"nodes": [{"id": 0}], "edges": [{"from": 0, "weight": 1}]}))
        with pytest.raises(GraphFileError, match="Malformed"):
            load_graph(path)
