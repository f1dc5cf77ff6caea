"""
Reducer: tree-walking state transitions.

The reducer walks the current state tree and the reaction trie of the action
type in lock-step. At every state node it:

1. finds the trie children that match the node (literal key or predicate),
2. applies their effects in registration order,
3. descends into the node when any match has children below it.

Only branches reached by a matching trie node are rebuilt; every other branch
is reused by reference. Input state is never mutated.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from ..logging_config import get_logger
from .actions import Action
from .effects import DELETED
from .paths import is_sequence
from .remap import SubstitutionMap, remap_state
from .trie import ReactionTrie, TrieNode


class Reducer:
    """
    Applies actions to state trees using a compiled ReactionTrie.

    Usage:
        reducer = Reducer(trie, substitutions)
        new_state = reducer.apply(state, action)
    """

    def __init__(self, trie: ReactionTrie, substitutions: Optional[Dict[str, SubstitutionMap]] = None) -> None:
        self.trie = trie
        self.substitutions = substitutions if substitutions is not None else {}

    def apply(self, root_state: Any, action: Action) -> Any:
        """
        Reduce action against root_state.

        Args:
            root_state: Current root state (mapping)
            action: Action produced by a registered ActionCreator

        Returns:
            New root state, or root_state itself when no reaction is
            registered for action.type
        """
        root = self.trie.get(action.type)
        if root is None or not isinstance(root_state, Mapping):
            return root_state

        view = remap_state(root_state, self.substitutions.get(action.type), action)
        logger = get_logger(__name__, action_type=action.type)
        logger.debug("Reducing action (remapped=%s)", view is not root_state)

        walk = _Walk(action, root_state, view)
        return walk.rebuild(root_state, list(root.children.values()))


class _Walk:
    """State for a single reduction."""

    def __init__(self, action: Action, root_state: Any, view: Any) -> None:
        self.action = action
        self.root_state = root_state
        self.view = view

    def rebuild(self, container: Any, candidates: List[TrieNode]) -> Any:
        """
        Build a new container from container, visiting every child against
        candidates. Deleted mapping entries are dropped; deleted or None
        sequence elements are compacted away.
        """
        if is_sequence(container):
            items = [self.visit(value, index, candidates) for index, value in enumerate(container)]
            if any(item is DELETED or item is None for item in items):
                items = [item for item in items if item is not DELETED and item is not None]
            return tuple(items) if isinstance(container, tuple) else items

        rebuilt = {}
        for key, value in container.items():
            new_value = self.visit(value, key, candidates)
            if new_value is not DELETED:
                rebuilt[key] = new_value
        return rebuilt

    def visit(self, value: Any, key: Any, candidates: Iterable[TrieNode]) -> Any:
        """Process one state node against the candidate trie children."""
        descend: List[TrieNode] = []
        for node in candidates:
            if value is DELETED:
                break
            if not node.matches(self.action, self.view, self.root_state, value, key):
                continue
            for effect in node.effects:
                value = effect.apply(self.action, self.view, value)
                if value is DELETED:
                    break
            descend.extend(node.children.values())

        if descend and value is not DELETED and (is_sequence(value) or isinstance(value, Mapping)):
            value = self.rebuild(value, descend)
        return value
