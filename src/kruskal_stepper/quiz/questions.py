"""Question bank for the Kruskal's algorithm quiz."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuizQuestion:
    """Multiple-choice question.

    Attributes:
        question: Question text
        options: Answer options, in display order
        correct_answer: Index of the correct option
    """

    question: str
    options: tuple[str, ...]
    correct_answer: int

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]


QUIZ_QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion(
        question="What is the main goal of Kruskal's Algorithm?",
        options=(
            "Find the shortest path between two nodes",
            "Find the Minimum Spanning Tree",
            "Find all cycles in a graph",
            "Sort the edges of a graph",
        ),
        correct_answer=1,
    ),
    QuizQuestion(
        question="In Kruskal's Algorithm, how are the edges initially processed?",
        options=(
            "In random order",
            "In the order they appear in the graph",
            "Sorted by weight in ascending order",
            "Sorted by weight in descending order",
        ),
        correct_answer=2,
    ),
    QuizQuestion(
        question="What data structure is commonly used to detect cycles in Kruskal's Algorithm?",
        options=(
            "Stack",
            "Queue",
            "Heap",
            "Disjoint Set (Union-Find)",
        ),
        correct_answer=3,
    ),
)
