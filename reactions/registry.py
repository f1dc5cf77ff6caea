"""
Reactions: the registration surface and reduction entry point.

A Reactions object owns everything registered in one session: action
creators, selectors, substitution maps and the compiled reaction trie. There
is no module-level registry; create one object per store (or per test).

Usage:
    reactions = Reactions()
    reactions.add_reactions(TODO_LIST)
    state = reactions.reduce(state, reactions.actions["AddItem"]("First Item"))
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from .core.actions import Action, ActionCreator
from .core.diff import changed_paths, state_changes
from .core.effects import SliceEffect
from .core.errors import ConfigurationError, UnknownActionError
from .core.reducer import Reducer
from .core.remap import SubstitutionMap, normalize_substitutions, remap_state
from .core.trie import ReactionTrie
from .logging_config import get_logger

Selector = Callable[[Any], Any]
ReactionMap = Mapping[str, Any]

logger = get_logger(__name__)


class Reactions:
    """
    Registry of reactions and reducer for the states they act on.

    Attributes:
        actions: Qualified action type -> ActionCreator
        actions_group: Group -> reaction name -> ActionCreator
        selectors_group: Group -> selector name -> selector
        action_substitutions: Qualified action type -> substitution map
        group_substitutions: Group -> substitution map
        trie: Compiled reaction trie
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.actions: Dict[str, ActionCreator] = {}
        self.actions_group: Dict[Optional[str], Dict[str, ActionCreator]] = {}
        self.selectors_group: Dict[Optional[str], Dict[str, Selector]] = {}
        self.action_substitutions: Dict[str, SubstitutionMap] = {}
        self.group_substitutions: Dict[Optional[str], SubstitutionMap] = {}
        self.trie = ReactionTrie()
        self.reducer = Reducer(self.trie, self.action_substitutions)

    def clear(self) -> "Reactions":
        """Drop every registration and return this (now empty) context."""
        self._reset()
        return self

    def add_reactions(
        self,
        reactions: Union[ReactionMap, Sequence[ReactionMap]],
        substitutions: Optional[Mapping[str, Any]] = None,
        group: Optional[str] = None,
    ) -> None:
        """
        Register a reaction map, or a list of maps in order.

        Mapping values are reaction declarations ({"action": ..., "state": [...]})
        or selectors (plain callables). Selectors are recorded per group and
        add nothing to the trie.

        Args:
            reactions: Reaction map or list of reaction maps
            substitutions: Top-level property -> replacement path
            group: Namespace for the registered action types

        Raises:
            ConfigurationError: If any declaration is invalid
        """
        subs = normalize_substitutions(substitutions, group or "ungrouped reactions")
        if isinstance(reactions, (list, tuple)):
            for reaction_map in reactions:
                self.add_reactions(reaction_map, subs, group)
            return
        if not isinstance(reactions, Mapping):
            raise ConfigurationError(f"Reactions must be a mapping or a list of mappings, got {reactions!r}")

        for name, entry in reactions.items():
            if callable(entry):
                self._add_selector(name, entry, subs, group)
            else:
                self.register(name, entry, subs, group)

    def register(
        self,
        name: str,
        reaction: Mapping[str, Any],
        substitutions: Optional[Mapping[str, Any]] = None,
        group: Optional[str] = None,
    ) -> ActionCreator:
        """
        Register one reaction.

        The action type is "group.name" when a group is given, else name. All
        slice effects are validated before any of them is compiled, so a bad
        declaration leaves the trie untouched.

        Returns:
            The ActionCreator for the reaction

        Raises:
            ConfigurationError: Missing action constructor, malformed state
                list or invalid slice effect
        """
        action_type = f"{group}.{name}" if group else name
        if not isinstance(reaction, Mapping):
            raise ConfigurationError(f"Reaction {action_type} must be a mapping, got {reaction!r}")

        build = reaction.get("action")
        if not callable(build):
            raise ConfigurationError(f"Missing action constructor in {action_type}")

        effects: List[SliceEffect] = []
        if "state" in reaction:
            declared = reaction["state"]
            if not isinstance(declared, (list, tuple)) or not declared:
                raise ConfigurationError(f"State effects for {action_type} must be a non-empty list")
            effects = [SliceEffect.from_mapping(decl, action_type) for decl in declared]

        subs = normalize_substitutions(substitutions, action_type)
        self._bind_substitutions(self.action_substitutions, action_type, subs)
        self._bind_group_substitutions(group, subs)

        creator = ActionCreator(action_type, build)
        self.actions[action_type] = creator
        if group:
            self.actions_group.setdefault(group, {})[name] = creator

        for effect in effects:
            self.trie.add(action_type, effect, self.action_substitutions.get(action_type))

        logger.debug("Registered reaction %s with %d effects", action_type, len(effects))
        return creator

    def _add_selector(
        self, name: str, selector: Selector, subs: Optional[SubstitutionMap], group: Optional[str]
    ) -> None:
        self._bind_group_substitutions(group, subs)
        self.selectors_group.setdefault(group, {})[name] = selector
        logger.debug("Registered selector %s for group %s", name, group)

    @staticmethod
    def _bind_substitutions(table: Dict[Any, SubstitutionMap], owner: Any, subs: Optional[SubstitutionMap]) -> None:
        # A substitution map cannot change once bound; registering without one never unbinds it.
        if subs is None:
            return
        existing = table.get(owner)
        if existing is not None and dict(existing) != dict(subs):
            raise ConfigurationError(f"Conflicting substitution map for {owner}")
        table[owner] = subs

    def _bind_group_substitutions(self, group: Optional[str], subs: Optional[SubstitutionMap]) -> None:
        if group:
            self._bind_substitutions(self.group_substitutions, group, subs)
        elif subs is not None:
            # Ungrouped reactions share no namespace; the latest map serves group_state(state, None)
            self.group_substitutions[None] = subs

    def create_action(self, name: str, *args: Any, group: Optional[str] = None, **kwargs: Any) -> Any:
        """
        Build an action by name.

        Args:
            name: Reaction name (group-local when group is given, else qualified)
            group: Group to look the name up in

        Raises:
            UnknownActionError: If no reaction is registered under that name
        """
        if group:
            creator = self.actions_group.get(group, {}).get(name)
        else:
            creator = self.actions.get(name)
        if creator is None:
            where = f" in group {group}" if group else ""
            raise UnknownActionError(f"No reaction registered for {name}{where}")
        return creator(*args, **kwargs)

    def reduce(self, state: Any, action: Action) -> Any:
        """Pure reducer: (state, action) -> state."""
        return self.reducer.apply(state, action)

    def group_state(self, state: Any, group: Optional[str] = None) -> Any:
        """State as seen by the reactions and selectors of group."""
        return remap_state(state, self.group_substitutions.get(group))

    @staticmethod
    def state_changes(old_state: Any, new_state: Any) -> str:
        return state_changes(old_state, new_state)

    @staticmethod
    def changed_paths(old_state: Any, new_state: Any) -> List[str]:
        return changed_paths(old_state, new_state)
