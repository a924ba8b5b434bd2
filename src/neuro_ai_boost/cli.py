"""
CLI module - Command line interface for Neuro-AI Boost

Entry point for the `nab` command using Typer.
Whatever the arguments, the sequence runs and the exit code is 0.
"""

import logging
from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console
from typer.core import TyperCommand

from . import __version__
from .config import LoggingConfig, configure_logging, load_config
from .runners import RunnerCallbacks, RunnerResult, run_boost_sequence

logger = logging.getLogger(__name__)

console = Console()
app = typer.Typer(
    name="nab",
    help="Neuro-AI Boost - Cerebrospinal synchronization sequence.",
    add_completion=False,
    rich_markup_mode="rich",
)


class LenientCommand(TyperCommand):
    """Command that falls back to default options when the arguments don't parse."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        original = list(args)
        try:
            return super().parse_args(ctx, list(args))
        except click.UsageError:
            ctx.params = {}
            super().parse_args(ctx, [])
            ctx.args = original
            return ctx.args


# Type aliases for common options
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to config file"),
]


def announce(line: str) -> None:
    """Print one status line verbatim to stdout."""
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def console_callbacks() -> RunnerCallbacks:
    """Callbacks that print every announcement of the sequence."""

    def on_workflow_complete(result: RunnerResult, closing: str) -> None:
        for error in result.errors:
            logger.warning(error)
        announce(closing)

    return RunnerCallbacks(
        on_workflow_start=lambda _name, opening: announce(opening),
        on_task_start=lambda _task_id, description: announce(description),
        on_workflow_complete=on_workflow_complete,
    )


@app.command(
    cls=LenientCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True, "help_option_names": []},
)
def boost(
    ctx: typer.Context,
    config: ConfigOption = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log debug output to stderr")] = False,
):
    """
    Run the cerebrospinal synchronization sequence.

    Prints the status of each step as it runs. Any other arguments are ignored.
    """
    # Quiet defaults first so config loading problems stay off stdout
    configure_logging(LoggingConfig(), verbose=verbose)
    app_config = load_config(config)
    configure_logging(app_config.logging, verbose=verbose)

    logger.debug(f"nab {__version__} starting")
    if ctx.args:
        logger.debug(f"Ignoring extra arguments: {' '.join(ctx.args)}")

    run_boost_sequence(console_callbacks())


if __name__ == "__main__":
    app()
