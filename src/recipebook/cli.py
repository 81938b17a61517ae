"""Recipebook CLI."""

from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .console import RecipeConsole
from .logger import get_logger
from .manager import RecipeManager
from .profile import Profile

logger = get_logger("cli")

APP_NAME = "Recipebook"

app = typer.Typer(
    help=f"{APP_NAME} - interactive recipe catalog",
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def _start_console(threshold: Optional[float]) -> None:
    if threshold is None:
        threshold = Profile.current().calorie_threshold
    manager = RecipeManager(calorie_threshold=threshold)
    logger.debug(f"Starting console with calorie threshold {threshold:g}")
    RecipeConsole(manager, console=console).run()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Start the interactive console when no command is given."""
    if ctx.invoked_subcommand is None:
        _start_console(None)


@app.command()
def run(
    threshold: Optional[float] = typer.Option(
        None, "--threshold", help="Calorie total that triggers a warning (default: 300)"
    )
):
    """Start the interactive console."""
    _start_console(threshold)


@app.command()
def version():
    """Show version information."""
    typer.echo(f"{APP_NAME} v{__version__}")


if __name__ == "__main__":
    app()
