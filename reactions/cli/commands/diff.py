"""
Diff command: changed paths between two JSON state files
"""

import json

import typer
from rich.console import Console
from rich.table import Table

from ...core.diff import changed_paths
from .._loader import load_json

console = Console()


def diff_command(
    old_path: str = typer.Argument(..., help="Path to the previous state (JSON)"),
    new_path: str = typer.Argument(..., help="Path to the next state (JSON)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the dotted paths that differ between two states.

    Examples:
        reactions diff before.json after.json
        reactions diff before.json after.json --json
    """
    try:
        old_state = load_json(old_path)
        new_state = load_json(new_path)
    except FileNotFoundError as e:
        _fail(json_output, f"State file not found: {e.filename}")
    except ValueError as e:
        _fail(json_output, f"Invalid JSON: {e}")

    paths = changed_paths(old_state, new_state)

    if json_output:
        print(json.dumps({"changes": "".join(f"{p};" for p in paths), "paths": paths}, indent=2))
        return

    if not paths:
        console.print("[green]No changes[/green]")
        return

    table = Table(title=f"Changes: {old_path} -> {new_path}")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Path", style="green")
    for idx, path in enumerate(paths):
        table.add_row(str(idx), path)
    console.print(table)


def _fail(json_output: bool, message: str) -> None:
    if json_output:
        print(json.dumps({"error": message}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)
