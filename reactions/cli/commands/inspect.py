"""
Inspect command: show registered actions and their compiled tries
"""

import json
from typing import Any, Dict

import typer
from rich.console import Console
from rich.tree import Tree

from ...core.errors import ReactionsError
from ...core.trie import TrieNode
from .._loader import load_reactions

console = Console()


def describe_node(node: TrieNode) -> Dict[str, Any]:
    """Plain-data description of a trie node and its children."""
    return {
        "segment": str(node.segment) if node.segment is not None else None,
        "effects": [effect.kind.value for effect in node.effects],
        "children": [describe_node(child) for child in node.children.values()],
    }


def _add_branch(tree: Tree, node: TrieNode) -> None:
    label = f"[green]{node.segment}[/green]"
    if node.effects:
        label += " [yellow]" + ", ".join(e.kind.value for e in node.effects) + "[/yellow]"
    branch = tree.add(label)
    for child in node.children.values():
        _add_branch(branch, child)


def inspect_command(
    reactions_target: str = typer.Option(
        ..., "--reactions", "-r", help="Reaction declarations as MODULE:ATTR"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List registered action types and render their reaction tries.

    Examples:
        reactions inspect -r todo:TODO_LIST
        reactions inspect -r todo:register --json
    """
    try:
        reactions = load_reactions(reactions_target)
    except ReactionsError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        output = {
            "actions": sorted(reactions.actions),
            "groups": {g: sorted(names) for g, names in reactions.actions_group.items()},
            "tries": {t: describe_node(reactions.trie.get(t)) for t in reactions.trie.action_types()},
        }
        print(json.dumps(output, indent=2))
        return

    for action_type in sorted(reactions.actions):
        root = reactions.trie.get(action_type)
        tree = Tree(f"[bold]{action_type}[/bold]")
        if root is None:
            tree.add("[dim](no state effects)[/dim]")
        else:
            for child in root.children.values():
                _add_branch(tree, child)
        console.print(tree)
