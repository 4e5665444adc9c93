"""Presentation layer for the stepper.

Renders the read-only projection of a KruskalStepper as Rich tables and
text. Nothing here mutates the engine.
"""

from rich.console import Console
from rich.table import Table

from kruskal_stepper.algorithm.stepper import KruskalStepper, StepAction, StepRecord, StepState
from kruskal_stepper.quiz.session import QuizResult

ACTION_STYLES = {
    StepAction.SORT: "blue",
    StepAction.ACCEPT: "green",
    StepAction.REJECT: "yellow",
    StepAction.COMPLETE: "bold green",
}


def step_button_label(stepper: KruskalStepper) -> str:
    return "Start" if stepper.state is StepState.NOT_STARTED else "Next Step"


def can_step(stepper: KruskalStepper) -> bool:
    """Manual stepping is refused while auto-playing or once complete."""
    return not stepper.auto_playing and not stepper.is_complete


def display_edges_table(stepper: KruskalStepper, console: Console) -> None:
    """Display edges in current order with their MST status.

    Accepted edges are matched by endpoint pair and weight, not identity.
    """
    table = Table(title=f"Edges (step {stepper.step})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Edge", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Status")

    current = stepper.current_edge
    for index, edge in enumerate(stepper.edges, start=1):
        if stepper.is_in_mst(edge):
            status = "[red]in MST[/red]"
        elif current is not None and edge == current:
            status = "[bold]next[/bold]"
        else:
            status = "[dim]-[/dim]"
        table.add_row(str(index), edge.label(), f"{edge.weight:g}", status)

    console.print(table)


def display_components(stepper: KruskalStepper, console: Console) -> None:
    groups = sorted(stepper.components().values())
    rendered = "  ".join("{" + ", ".join(str(n) for n in members) + "}" for members in groups)
    console.print(f"[bold]Components:[/bold] {rendered}")


def display_record(record: StepRecord, console: Console) -> None:
    style = ACTION_STYLES[record.action]
    console.print(
        f"[{style}]{record.action.value.upper():>8}[/{style}] {record.explanation}",
        highlight=False,
    )


def display_state(
    stepper: KruskalStepper,
    console: Console,
    show_edges_table: bool = True,
    show_components: bool = False,
) -> None:
    """Display the full simulator view: edges, explanation, MST summary and controls."""
    if show_edges_table:
        display_edges_table(stepper, console)
    if show_components:
        display_components(stepper, console)
    if stepper.explanation:
        console.print(stepper.explanation, highlight=False)
    console.print(
        f"[dim]MST edges: {len(stepper.mst_edges)}  "
        f"Total weight: {stepper.total_weight:g}  State: {stepper.state.value}[/dim]"
    )
    step_hint = f"[n] {step_button_label(stepper)}" if can_step(stepper) else "[n] -"
    play_hint = "[a] Pause" if stepper.auto_playing else "[a] Auto Play"
    console.print(f"{step_hint}  {play_hint}  [r] Reset  [q] Quit", highlight=False, markup=False)


def display_mst_summary(stepper: KruskalStepper, console: Console) -> None:
    table = Table(title="Minimum Spanning Tree")
    table.add_column("Order", style="dim", justify="right")
    table.add_column("Edge", style="cyan")
    table.add_column("Weight", style="green", justify="right")
    for index, edge in enumerate(stepper.mst_edges, start=1):
        table.add_row(str(index), edge.label(), f"{edge.weight:g}")
    console.print(table)
    console.print(f"Total weight: {stepper.total_weight:g}")
    if len(stepper.mst_edges) < max(stepper.node_count - 1, 0):
        console.print("[yellow]Graph is disconnected: result is a spanning forest.[/yellow]")


def display_quiz_results(results: list[QuizResult], console: Console) -> None:
    for index, result in enumerate(results, start=1):
        style = "green" if result.correct else "red"
        console.print(f"{index}. [{style}]{result.feedback}[/{style}]", highlight=False)
    score = sum(1 for result in results if result.correct)
    console.print(f"[bold]Score:[/bold] {score}/{len(results)}")
