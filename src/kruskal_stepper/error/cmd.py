import functools
import logging
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape

console = Console()
logger = logging.getLogger(__name__)


def handle_command_errors(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (click.Abort, click.exceptions.Exit):
            raise
        except FileNotFoundError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            raise click.Abort()
        except ValueError as e:
            # StepperError and its subclasses are ValueErrors
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            raise click.Abort()
        except Exception as e:
            logger.debug("Unhandled error in %s", func.__name__, exc_info=True)
            console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", highlight=False)
            raise click.Abort()

    return wrapper
