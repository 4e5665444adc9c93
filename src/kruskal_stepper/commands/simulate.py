"""Interactive step-by-step simulator command."""

from pathlib import Path

import click
from rich.console import Console

from kruskal_stepper.algorithm.autoplay import AutoPlayer
from kruskal_stepper.commands.common import build_stepper, get_config, graph_option
from kruskal_stepper.error.cmd import handle_command_errors
from kruskal_stepper.presentation.renderer import (
    can_step,
    display_mst_summary,
    display_record,
    display_state,
)

console = Console()


@click.command()
@graph_option
@click.option("--delay", type=click.IntRange(min=0), default=None, help="Auto-play delay in ms")
@click.pass_context
@handle_command_errors
def simulate(ctx: click.Context, graph_path: Path | None, delay: int | None):
    """Step through Kruskal's algorithm interactively.

    Keys: n = next step, a = toggle auto-play, r = reset, q = quit.
    """
    config = get_config(ctx)
    stepper = build_stepper(ctx, graph_path)
    player = AutoPlayer(
        stepper,
        delay_ms=config.playback.delay_ms if delay is None else delay,
        on_step=lambda record: display_record(record, console),
    )

    console.print("[bold blue]Kruskal's Algorithm Simulator[/bold blue]")
    while True:
        display_state(
            stepper,
            console,
            show_edges_table=config.display.show_edges_table,
            show_components=config.display.show_components,
        )
        choice = click.prompt(
            "Action",
            type=click.Choice(["n", "a", "r", "q"]),
            default="n",
            show_choices=False,
        )

        if choice == "q":
            break
        if choice == "r":
            stepper.reset()
            console.print("[dim]Reset.[/dim]")
        elif choice == "n":
            if can_step(stepper):
                display_record(stepper.advance(), console)
            else:
                console.print("[yellow]Stepping is disabled while auto-playing or complete.[/yellow]")
        elif choice == "a":
            if player.toggle():
                try:
                    player.play(max_steps=config.playback.max_steps)
                except KeyboardInterrupt:
                    player.pause()
                    console.print("[dim]Paused.[/dim]")

    if stepper.is_complete:
        display_mst_summary(stepper, console)
