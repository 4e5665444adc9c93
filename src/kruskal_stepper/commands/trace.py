"""Trace command: run to completion and summarize or export every step."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from kruskal_stepper.analysis.trace import export_trace, run_to_completion, summarize_trace
from kruskal_stepper.commands.common import build_stepper, get_config, graph_option
from kruskal_stepper.error.cmd import handle_command_errors
from kruskal_stepper.presentation.renderer import display_record

console = Console()


@click.command()
@graph_option
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    default=None,
    help="Output CSV file for the step trace",
)
@click.option("--quiet", "-q", is_flag=True, help="Only print the summary")
@click.pass_context
@handle_command_errors
def trace(ctx: click.Context, graph_path: Path | None, output: Path | None, quiet: bool):
    """Run Kruskal's algorithm to completion and report each step."""
    config = get_config(ctx)
    stepper = build_stepper(ctx, graph_path)
    records = run_to_completion(stepper, max_steps=config.playback.max_steps)

    if not quiet:
        for record in records:
            display_record(record, console)

    summary = summarize_trace(records)
    table = Table(title="Trace Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Steps", str(summary.steps))
    table.add_row("Accepted edges", str(summary.accepted))
    table.add_row("Rejected edges", str(summary.rejected))
    table.add_row("Total weight", f"{summary.total_weight:g}")
    console.print(table)

    if output:
        output_file = export_trace(records, output)
        console.print(f"[green]Trace saved to:[/green] {output_file}")

    console.print("[bold green]✓[/bold green] Trace complete!")
