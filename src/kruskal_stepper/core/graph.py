"""Graph data types and loading for the Kruskal stepper.

Nodes carry display coordinates for presentation only; the algorithm uses
nothing but their integer ids. Edges are immutable once loaded.
"""

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from kruskal_stepper.error.stepper import GraphFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """Graph node.

    Attributes:
        id: Integer identifier, unique and stable for the lifetime of a run
        x: Display x coordinate
        y: Display y coordinate
    """

    id: int
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between two node ids.

    Dataclass equality is by value and ordered: Edge(1, 2, w) != Edge(2, 1, w).
    Use ``same_link`` to compare as an unordered endpoint pair.
    """

    from_node: int
    to_node: int
    weight: float

    def endpoints(self) -> tuple[int, int]:
        return (self.from_node, self.to_node)

    def same_link(self, other: "Edge") -> bool:
        """Check equal weight and the same unordered endpoint pair."""
        return (
            frozenset(self.endpoints()) == frozenset(other.endpoints())
            and self.weight == other.weight
        )

    def label(self) -> str:
        return f"({self.from_node} - {self.to_node})"


@dataclass
class Graph:
    """Nodes and edges supplied to the stepper once at construction."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)


SAMPLE_NODES: tuple[Node, ...] = (
    Node(0, 50, 50),
    Node(1, 200, 50),
    Node(2, 125, 150),
    Node(3, 50, 250),
    Node(4, 200, 250),
)

SAMPLE_EDGES: tuple[Edge, ...] = (
    Edge(0, 1, 2),
    Edge(1, 2, 1),
    Edge(1, 4, 4),
    Edge(2, 3, 5),
    Edge(2, 4, 6),
    Edge(3, 4, 7),
)


def sample_graph() -> Graph:
    """Return a fresh copy of the five-node demonstration graph."""
    return Graph(nodes=list(SAMPLE_NODES), edges=list(SAMPLE_EDGES))


class _NodeModel(BaseModel):
    id: int
    x: float = 0.0
    y: float = 0.0


class _EdgeModel(BaseModel):
    from_node: int = Field(alias="from")
    to_node: int = Field(alias="to")
    weight: float


class _GraphModel(BaseModel):
    nodes: list[_NodeModel]
    edges: list[_EdgeModel] = Field(default_factory=list)


def load_graph(graph_path: Path) -> Graph:
    """Load a graph from a JSON file.

    The file holds ``{"nodes": [{"id", "x", "y"}], "edges": [{"from", "to", "weight"}]}``.

    Args:
        graph_path: Path to the JSON graph file

    Returns:
        Graph with nodes and edges in file order

    Raises:
        FileNotFoundError: If the file does not exist
        GraphFileError: If the file is not valid JSON or lacks required fields
    """
    if not graph_path.exists():
        raise FileNotFoundError(f"Graph file not found: {graph_path}")

    try:
        with open(graph_path, "r") as f:
            data = json.load(f)
        model = _GraphModel.model_validate(data)
    except json.JSONDecodeError as e:
        raise GraphFileError(f"Invalid JSON in graph file {graph_path}: {e}") from e
    except ValidationError as e:
        raise GraphFileError(f"Malformed graph file {graph_path}: {e}") from e

    graph = Graph(
        nodes=[Node(n.id, n.x, n.y) for n in model.nodes],
        edges=[Edge(e.from_node, e.to_node, e.weight) for e in model.edges],
    )
    logger.debug(
        "Loaded graph from %s: %d nodes, %d edges", graph_path, graph.node_count, graph.edge_count
    )
    return graph


def resolve_graph(graph_path: Path | None) -> Graph:
    """Load ``graph_path`` if given, otherwise return the sample graph."""
    if graph_path is None:
        return sample_graph()
    return load_graph(graph_path)
