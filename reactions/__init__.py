"""
Reactions

Declarative state-transformation engine: named reactions (an action
constructor plus state-path effects) compiled into a trie and applied to
immutable state trees by a tree-walking reducer, with state diffing.
"""

__version__ = "0.1.0"

from .core import Action, ActionCreator, Literal, Matcher, changed_paths, state_changes
from .core.errors import ConfigurationError, ReactionsError, UnknownActionError
from .registry import Reactions

__all__ = [
    "__version__",
    "Action",
    "ActionCreator",
    "Literal",
    "Matcher",
    "Reactions",
    "changed_paths",
    "state_changes",
    "ReactionsError",
    "ConfigurationError",
    "UnknownActionError",
]
