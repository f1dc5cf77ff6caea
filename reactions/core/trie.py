"""
Reaction trie: the compiled form of all registered slice effects.

One trie root exists per action type. Each node represents one resolved path
step and holds the effects that apply there plus the child steps below it:

    AddItem
      domain
        nextId          [set]
        todoList        [append]
      app
        filter          [set]
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Optional, Tuple

from .effects import SliceEffect
from .paths import Literal, Matcher, PathSegment


@dataclass
class TrieNode:
    """
    One path step of a reaction trie.

    Fields:
        segment: Segment this node matches (None for a root)
        effects: Effects applied at this node, in registration order
        children: Child nodes keyed by segment trie_key
    """
    segment: Optional[PathSegment] = None
    effects: List[SliceEffect] = field(default_factory=list)
    children: Dict[Hashable, "TrieNode"] = field(default_factory=dict)

    @property
    def matcher(self) -> Optional[Matcher]:
        return self.segment if isinstance(self.segment, Matcher) else None

    def child(self, segment: PathSegment) -> "TrieNode":
        """Get or create the child node for segment."""
        node = self.children.get(segment.trie_key)
        if node is None:
            node = TrieNode(segment=segment)
            self.children[segment.trie_key] = node
        return node

    def matches(self, action: Any, state: Any, root_state: Any, value: Any, key: Any) -> bool:
        return self.segment.matches(action, state, root_state, value, key)


def substitute(
    path: Tuple[PathSegment, ...], substitutions: Optional[Mapping[str, Tuple[PathSegment, ...]]]
) -> Tuple[PathSegment, ...]:
    """
    Replace the first segment of path by its substitution, if any.

    Substitution segments are already normalized with remap=False, so their
    predicates see the unmapped root state during reduction.
    """
    if not substitutions or not path or not isinstance(path[0], Literal):
        return path
    replacement = substitutions.get(str(path[0].key))
    if replacement is None:
        return path
    return tuple(replacement) + path[1:]


class ReactionTrie:
    """
    Registry of trie roots keyed by action type.

    Usage:
        trie = ReactionTrie()
        trie.add("AddItem", effect, substitutions)
        root = trie.get("AddItem")
    """

    def __init__(self) -> None:
        self._roots: Dict[str, TrieNode] = {}

    def add(
        self,
        action_type: str,
        effect: SliceEffect,
        substitutions: Optional[Mapping[str, Tuple[PathSegment, ...]]] = None,
    ) -> TrieNode:
        """
        Compile one slice effect into the trie for action_type.

        Args:
            action_type: Qualified action type
            effect: Slice effect to add
            substitutions: Normalized substitution map for this action type

        Returns:
            Terminal node that received the effect
        """
        node = self._roots.setdefault(action_type, TrieNode())
        for segment in substitute(effect.path, substitutions):
            node = node.child(segment)
        node.effects.append(effect)
        return node

    def get(self, action_type: str) -> Optional[TrieNode]:
        return self._roots.get(action_type)

    def action_types(self) -> List[str]:
        return list(self._roots)

    def __contains__(self, action_type: str) -> bool:
        return action_type in self._roots

    def __len__(self) -> int:
        return len(self._roots)
