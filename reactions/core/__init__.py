"""
Core primitives of the reactions engine.

- Action / ActionCreator: dispatchable records and their constructors
- Literal / Matcher: path segments
- SliceEffect: set, append, insert, assign and delete effects
- ReactionTrie: compiled effects keyed by action type
- remap_state: substituted state views
- Reducer: tree-walking reducer
- changed_paths / state_changes: state diff
"""

from .actions import Action, ActionCreator
from .paths import Literal, Matcher, to_path, resolve_path
from .effects import EffectKind, SliceEffect
from .trie import ReactionTrie, TrieNode
from .remap import normalize_substitutions, remap_state
from .reducer import Reducer
from .diff import changed_paths, state_changes
from .canonical import canonicalize, canonical_json_str, state_digest
from .errors import (
    ReactionsError,
    ConfigurationError,
    UnknownActionError,
    ActionLogError,
    ReplayError,
)

__all__ = [
    "Action",
    "ActionCreator",
    "Literal",
    "Matcher",
    "to_path",
    "resolve_path",
    "EffectKind",
    "SliceEffect",
    "ReactionTrie",
    "TrieNode",
    "normalize_substitutions",
    "remap_state",
    "Reducer",
    "changed_paths",
    "state_changes",
    "canonicalize",
    "canonical_json_str",
    "state_digest",
    "ReactionsError",
    "ConfigurationError",
    "UnknownActionError",
    "ActionLogError",
    "ReplayError",
]
