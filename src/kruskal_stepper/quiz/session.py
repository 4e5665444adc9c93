"""Quiz session state: answers, submission and scoring."""

from collections.abc import Sequence
from dataclasses import dataclass

from kruskal_stepper.error.stepper import QuizError
from kruskal_stepper.quiz.questions import QUIZ_QUESTIONS, QuizQuestion

UNANSWERED = -1


@dataclass(frozen=True)
class QuizResult:
    """Outcome for a single question after submission."""

    question: QuizQuestion
    selected: int
    correct: bool

    @property
    def feedback(self) -> str:
        if self.correct:
            return "Correct!"
        return f"Incorrect. The correct answer is: {self.question.correct_option}"


class Quiz:
    """Answers for a fixed question bank, locked once submitted."""

    def __init__(self, questions: Sequence[QuizQuestion] = QUIZ_QUESTIONS) -> None:
        self.questions: tuple[QuizQuestion, ...] = tuple(questions)
        self.reset()

    def reset(self) -> None:
        self.answers: list[int] = [UNANSWERED] * len(self.questions)
        self.submitted = False

    def answer(self, index: int, option: int) -> None:
        """Record the selected option for question ``index``.

        Raises:
            QuizError: If the quiz is already submitted or an index is out of range
        """
        if self.submitted:
            raise QuizError("Quiz already submitted; reset it to answer again")
        if not 0 <= index < len(self.questions):
            raise QuizError(f"No question at index {index}")
        if not 0 <= option < len(self.questions[index].options):
            raise QuizError(f"Question {index + 1} has no option {option}")
        self.answers[index] = option

    @property
    def can_submit(self) -> bool:
        return not self.submitted and UNANSWERED not in self.answers

    def submit(self) -> list[QuizResult]:
        if not self.can_submit:
            raise QuizError("Answer every question before submitting")
        self.submitted = True
        return self.results()

    def results(self) -> list[QuizResult]:
        return [
            QuizResult(question=q, selected=a, correct=a == q.correct_answer)
            for q, a in zip(self.questions, self.answers)
        ]

    @property
    def score(self) -> int:
        return sum(1 for result in self.results() if result.correct)
