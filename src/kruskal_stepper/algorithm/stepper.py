"""Step-wise Kruskal engine.

The engine advances exactly one unit of work per ``advance()`` call:

- the first call sorts the edges by weight (stable),
- each following call accepts or rejects the next edge in sorted order,
- once every edge has been processed, calls report completion and leave
  the state untouched.

Component membership is rebuilt on every running step by replaying ``union``
over the accepted edges, so the engine carries no hidden disjoint-set state
between calls.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
import logging

from kruskal_stepper.algorithm.union_find import DisjointSet
from kruskal_stepper.core.graph import Edge, Graph, Node
from kruskal_stepper.error.stepper import InvariantViolation

logger = logging.getLogger(__name__)

SORTED_MESSAGE = "First, we sort all edges by weight in ascending order."
COMPLETE_MESSAGE = "The algorithm is complete. We have found the Minimum Spanning Tree!"


class StepState(Enum):
    """Lifecycle state of a run."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETE = "complete"


class StepAction(Enum):
    """What a single ``advance()`` call did."""

    SORT = "sort"
    ACCEPT = "accept"
    REJECT = "reject"
    COMPLETE = "complete"


@dataclass(frozen=True)
class StepRecord:
    """Outcome of one ``advance()`` call.

    Attributes:
        step_before: Step cursor before the call
        step_after: Step cursor after the call
        action: Which transition happened
        edge: Edge examined (None for SORT and COMPLETE)
        explanation: Human-readable description of the action
        mst_size: Number of accepted edges after the call
        total_weight: Total weight of accepted edges after the call
    """

    step_before: int
    step_after: int
    action: StepAction
    edge: Edge | None
    explanation: str
    mst_size: int
    total_weight: float


def accept_message(edge: Edge) -> str:
    return f"Adding edge {edge.label()} with weight {edge.weight:g} to the MST."


def reject_message(edge: Edge) -> str:
    return f"Skipping edge {edge.label()} to avoid creating a cycle."


class KruskalStepper:
    """Kruskal's algorithm executed one visible step at a time.

    The run state (``step``, ``edges``, ``mst_edges``, ``explanation`` and
    ``auto_playing``) has a single writer, this object. Readers get immutable
    tuples from the properties.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        """Initialize a fresh run.

        Args:
            nodes: Graph nodes; ids are expected to be ``0..n-1``
            edges: Graph edges in their original (unsorted) order
        """
        self._nodes: tuple[Node, ...] = tuple(nodes)
        self._initial_edges: tuple[Edge, ...] = tuple(edges)
        self.reset()

    @classmethod
    def from_graph(cls, graph: Graph) -> "KruskalStepper":
        return cls(graph.nodes, graph.edges)

    # --- read-only projection ---

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def step(self) -> int:
        return self._step

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def mst_edges(self) -> tuple[Edge, ...]:
        return tuple(self._mst_edges)

    @property
    def explanation(self) -> str:
        return self._explanation

    @property
    def auto_playing(self) -> bool:
        return self._auto_playing

    @property
    def state(self) -> StepState:
        if self._step == 0:
            return StepState.NOT_STARTED
        if self._step > len(self._edges):
            return StepState.COMPLETE
        return StepState.RUNNING

    @property
    def is_complete(self) -> bool:
        return self.state is StepState.COMPLETE

    @property
    def total_weight(self) -> float:
        return sum(edge.weight for edge in self._mst_edges)

    @property
    def current_edge(self) -> Edge | None:
        """Edge the next ``advance()`` will examine, if any."""
        if self.state is StepState.RUNNING:
            return self._edges[self._step - 1]
        return None

    def is_in_mst(self, edge: Edge) -> bool:
        """Check whether an accepted edge links the same endpoints with the same weight."""
        return any(accepted.same_link(edge) for accepted in self._mst_edges)

    def components(self) -> dict[int, list[int]]:
        """Current components as {root: [members]}, replayed from accepted edges."""
        return self._replay().groups()

    # --- auto-play flag ---

    def set_auto_playing(self, value: bool) -> None:
        """Arm or disarm auto-play. Never advances by itself."""
        self._auto_playing = value
        logger.debug("Auto-play %s at step %d", "armed" if value else "disarmed", self._step)

    def toggle_auto_play(self) -> bool:
        self.set_auto_playing(not self._auto_playing)
        return self._auto_playing

    # --- transitions ---

    def reset(self) -> None:
        """Return every run state field to its initial value."""
        self._edges: list[Edge] = list(self._initial_edges)
        self._mst_edges: list[Edge] = []
        self._step = 0
        self._explanation = ""
        self._auto_playing = False
        logger.debug("Stepper reset: %d nodes, %d edges", self.node_count, len(self._edges))

    def advance(self) -> StepRecord:
        """Perform exactly one of sort, accept, reject or complete.

        Returns:
            StepRecord describing the transition

        Raises:
            InvariantViolation: If the edge to process references a node id
                outside ``0..node_count-1``
        """
        step_before = self._step
        state = self.state

        if state is StepState.NOT_STARTED:
            # list.sort is stable, ties keep their input order
            self._edges.sort(key=lambda edge: edge.weight)
            self._explanation = SORTED_MESSAGE
            self._step = 1
            return self._record(step_before, StepAction.SORT, None)

        if state is StepState.COMPLETE:
            self._explanation = COMPLETE_MESSAGE
            self._auto_playing = False
            return self._record(step_before, StepAction.COMPLETE, None)

        edge = self._edges[self._step - 1]
        self._check_edge(edge)

        components = self._replay()
        root_from = components.find(edge.from_node)
        root_to = components.find(edge.to_node)

        if root_from != root_to:
            self._mst_edges.append(edge)
            # local to this call, the next step rebuilds components by replay
            components.union(root_from, root_to)
            self._explanation = accept_message(edge)
            action = StepAction.ACCEPT
        else:
            self._explanation = reject_message(edge)
            action = StepAction.REJECT

        self._step += 1
        return self._record(step_before, action, edge)

    # --- internals ---

    def _replay(self) -> DisjointSet:
        components = DisjointSet(self.node_count)
        for accepted in self._mst_edges:
            components.union(accepted.from_node, accepted.to_node)
        return components

    def _check_edge(self, edge: Edge) -> None:
        for node_id in edge.endpoints():
            if not 0 <= node_id < self.node_count:
                raise InvariantViolation(
                    f"Edge {edge.label()} references node {node_id}, "
                    f"but the graph only has nodes 0..{self.node_count - 1}"
                )

    def _record(self, step_before: int, action: StepAction, edge: Edge | None) -> StepRecord:
        record = StepRecord(
            step_before=step_before,
            step_after=self._step,
            action=action,
            edge=edge,
            explanation=self._explanation,
            mst_size=len(self._mst_edges),
            total_weight=self.total_weight,
        )
        logger.debug("Step %d -> %d: %s", step_before, self._step, action.value)
        return record
