"""Quiz command: test your understanding of Kruskal's algorithm."""

import click
from rich.console import Console

from kruskal_stepper.error.cmd import handle_command_errors
from kruskal_stepper.presentation.renderer import display_quiz_results
from kruskal_stepper.quiz.session import Quiz

console = Console()


@click.command()
@handle_command_errors
def quiz():
    """Answer three questions about Kruskal's algorithm."""
    session = Quiz()
    for index, question in enumerate(session.questions):
        console.print(f"\n[bold]{index + 1}. {question.question}[/bold]", highlight=False)
        for option_index, option in enumerate(question.options, start=1):
            console.print(f"  {option_index}) {option}", highlight=False)
        choice = click.prompt("Your answer", type=click.IntRange(1, len(question.options)))
        session.answer(index, choice - 1)

    console.print()
    display_quiz_results(session.submit(), console)
