"""CLI entry point for kruskal-stepper."""

import logging
from pathlib import Path

import click

from kruskal_stepper import __version__
from kruskal_stepper.commands import play, quiz, simulate, trace
from kruskal_stepper.core.config import load_config
from kruskal_stepper.error.cmd import handle_command_errors


@click.group()
@click.version_option(version=__version__, prog_name="kruskal-stepper")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help="Path to a JSON configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
@handle_command_errors
def main(ctx, config_path, verbose):
    """Kruskal's Algorithm Simulator.

    Step through, auto-play, trace and quiz yourself on Kruskal's
    Minimum Spanning Tree algorithm.
    """
    ctx.ensure_object(dict)
    config = load_config(config_path)
    if verbose:
        config.verbose = True
    if config.verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj["config"] = config


# Register commands
main.add_command(simulate.simulate)
main.add_command(play.play)
main.add_command(trace.trace)
main.add_command(quiz.quiz)


if __name__ == "__main__":
    main()
