"""Multiple-choice quiz on Kruskal's algorithm."""

from kruskal_stepper.quiz.questions import QUIZ_QUESTIONS, QuizQuestion
from kruskal_stepper.quiz.session import Quiz, QuizResult

__all__ = ["QUIZ_QUESTIONS", "Quiz", "QuizQuestion", "QuizResult"]
