"""Auto-play command: advance on a timer until the MST is complete."""

from pathlib import Path

import click
from rich.console import Console

from kruskal_stepper.algorithm.autoplay import AutoPlayer
from kruskal_stepper.commands.common import build_stepper, get_config, graph_option
from kruskal_stepper.error.cmd import handle_command_errors
from kruskal_stepper.presentation.renderer import display_mst_summary, display_record

console = Console()


@click.command()
@graph_option
@click.option(
    "--delay",
    "-d",
    type=click.IntRange(min=0),
    default=None,
    help="Delay between steps in milliseconds (default from config: 1500)",
)
@click.pass_context
@handle_command_errors
def play(ctx: click.Context, graph_path: Path | None, delay: int | None):
    """Auto-play Kruskal's algorithm to completion."""
    config = get_config(ctx)
    stepper = build_stepper(ctx, graph_path)
    player = AutoPlayer(
        stepper,
        delay_ms=config.playback.delay_ms if delay is None else delay,
        on_step=lambda record: display_record(record, console),
    )

    console.print(
        f"[bold blue]Auto-playing[/bold blue] {stepper.node_count} nodes, "
        f"{stepper.edge_count} edges (delay {player.delay_ms} ms)"
    )
    player.start()
    try:
        player.play(max_steps=config.playback.max_steps)
    except KeyboardInterrupt:
        player.pause()
        console.print("[dim]Paused.[/dim]")
        return

    display_mst_summary(stepper, console)
