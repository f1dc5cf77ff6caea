"""
Replay command: replay an action log against an initial state
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ...core.canonical import state_digest
from ...core.errors import ReactionsError
from ...replay import read_action_log, replay
from .._loader import load_json, load_reactions

console = Console()


def replay_command(
    reactions_target: str = typer.Option(
        ..., "--reactions", "-r", help="Reaction declarations as MODULE:ATTR"
    ),
    state_path: str = typer.Option(..., "--state", "-s", help="Initial state (JSON)"),
    log_path: str = typer.Option(..., "--log", "-l", help="Action log (JSONL)"),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Replay only the first N records"),
    show_state: bool = typer.Option(False, "--show-state", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay an action log and report what every action changed.

    Examples:
        reactions replay -r todo:TODO_LIST -s state.json -l actions.jsonl
        reactions replay -r todo:register -s state.json -l actions.jsonl --until 3
        reactions replay -r todo:TODO_LIST -s state.json -l actions.jsonl --json
    """
    try:
        reactions = load_reactions(reactions_target)
        state = load_json(state_path)
        result = replay(reactions, state, read_action_log(log_path), until=until)
    except FileNotFoundError as e:
        _fail(json_output, f"File not found: {e.filename}")
    except ValueError as e:
        _fail(json_output, f"Invalid JSON: {e}")
    except ReactionsError as e:
        _fail(json_output, str(e))

    digest = state_digest(result.state)

    if json_output:
        output = {
            "success": True,
            "actions_replayed": result.applied,
            "state_digest": digest,
            "changes": [{"type": t, "changes": c} for t, c in result.changes],
        }
        if show_state:
            output["state"] = result.state
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Replayed {result.applied} actions successfully[/green]")
    console.print(f"  State digest: [yellow]{digest}[/yellow]")

    table = Table(title="Changes per action")
    table.add_column("Step", style="cyan", justify="right")
    table.add_column("Action", style="green")
    table.add_column("Changed paths", style="yellow")
    for step, (action_type, changes) in enumerate(result.changes):
        table.add_row(str(step), action_type, changes or "[dim](none)[/dim]")
    console.print(table)

    if show_state:
        console.print("\n[bold]Final State:[/bold]")
        console.print(Syntax(json.dumps(result.state, indent=2), "json", theme="monokai"))


def _fail(json_output: bool, message: str) -> None:
    if json_output:
        print(json.dumps({"error": message}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)
