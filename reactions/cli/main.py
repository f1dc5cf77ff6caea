#!/usr/bin/env python3
"""
Reactions CLI

Main entrypoint for the reactions command-line tool.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..logging_config import setup_logging
from .commands import diff, inspect, replay

app = typer.Typer(
    name="reactions",
    help="Reaction trie state engine CLI",
    add_completion=False,
)

console = Console()

app.command(name="diff")(diff.diff_command)
app.command(name="replay")(replay.replay_command)
app.command(name="inspect")(inspect.inspect_command)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override REACTIONS_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """Reaction trie state engine CLI."""
    setup_logging(level=log_level)


@app.command()
def version():
    """Show version information."""
    from . import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Reactions CLI[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
