"""Options and helpers shared by the stepper commands."""

from pathlib import Path

import click

from kruskal_stepper.algorithm.stepper import KruskalStepper
from kruskal_stepper.core.config import Config
from kruskal_stepper.core.graph import resolve_graph

graph_option = click.option(
    "--graph",
    "-g",
    "graph_path",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="Graph JSON file (defaults to the configured graph, then the sample graph)",
)


def get_config(ctx: click.Context) -> Config:
    obj = ctx.find_object(dict)
    if obj is None or "config" not in obj:
        return Config.get_default()
    return obj["config"]


def build_stepper(ctx: click.Context, graph_path: Path | None) -> KruskalStepper:
    config = get_config(ctx)
    graph = resolve_graph(graph_path or config.graph_file)
    return KruskalStepper.from_graph(graph)
