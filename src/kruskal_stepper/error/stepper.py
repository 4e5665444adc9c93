"""Exceptions raised by the Kruskal stepper and its collaborators."""


class StepperError(ValueError):
    """Base class for errors raised by kruskal_stepper."""


class InvariantViolation(StepperError):
    """Raised when malformed input breaks an engine invariant.

    Examples are an edge that references a node id outside ``0..n-1`` or a
    disjoint-set lookup for an unknown element.
    """


class GraphFileError(StepperError):
    """Raised when a graph file cannot be parsed into nodes and edges."""


class QuizError(StepperError):
    """Raised on invalid quiz interaction (bad index, answer after submit)."""
