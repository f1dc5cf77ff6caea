"""
Slice effects: the state operations a reaction performs at a path.

Every effect callback is called as fn(action, state, value), where state is
the (possibly remapped) root state at the moment of dispatch and value is the
current value at the matched path.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from .errors import ConfigurationError
from .paths import PathSegment, format_path, to_path

EffectFn = Callable[[Any, Any, Any], Any]

# Result of a delete effect. Never stored in a state tree.
DELETED = object()


class EffectKind(str, Enum):
    SET = "set"
    APPEND = "append"
    INSERT = "insert"
    ASSIGN = "assign"
    DELETE = "delete"


@dataclass(frozen=True)
class SliceEffect:
    """
    One effect declared by a reaction.

    Fields:
        path: Segments locating the node the effect applies to
        kind: Effect kind
        fn: Callback (None for delete)
    """
    path: Tuple[PathSegment, ...]
    kind: EffectKind
    fn: Optional[EffectFn] = None

    @staticmethod
    def from_mapping(decl: Mapping, action_type: str) -> "SliceEffect":
        """
        Build a SliceEffect from a declaration like
        {"slice": ["domain", "nextId"], "set": fn}.

        Raises:
            ConfigurationError: If the slice is missing or empty, or the
                declaration names zero or several effect kinds
        """
        if not isinstance(decl, Mapping):
            raise ConfigurationError(f"Slice effect for {action_type} must be a mapping, got {decl!r}")
        if "slice" not in decl:
            raise ConfigurationError(f"Missing slice in effect for reaction: {action_type}")
        try:
            path = to_path(decl["slice"])
        except TypeError as e:
            raise ConfigurationError(f"Invalid slice for reaction {action_type}: {e}") from e
        if not path:
            raise ConfigurationError(f"Empty slice in effect for reaction: {action_type}")

        kinds = [k for k in EffectKind if decl.get(k.value) not in (None, False)]
        if not kinds:
            raise ConfigurationError(
                f"Missing set, append, insert, assign or delete on state for reaction: {action_type}"
            )
        if len(kinds) > 1:
            names = ", ".join(k.value for k in kinds)
            raise ConfigurationError(f"Multiple effect kinds ({names}) in one slice for reaction: {action_type}")

        kind = kinds[0]
        if kind is EffectKind.DELETE:
            return SliceEffect(path=path, kind=kind)
        fn = decl[kind.value]
        if not callable(fn):
            raise ConfigurationError(f"Effect {kind.value} for reaction {action_type} must be callable")
        return SliceEffect(path=path, kind=kind, fn=fn)

    def apply(self, action: Any, state: Any, value: Any) -> Any:
        """
        Apply the effect to value and return the new value.

        Never mutates value. A delete returns the DELETED marker.
        """
        if self.kind is EffectKind.SET:
            return self.fn(action, state, value)
        if self.kind is EffectKind.APPEND:
            items = list(value) if value is not None else []
            items.append(self.fn(action, state, value))
            return tuple(items) if isinstance(value, tuple) else items
        if self.kind is EffectKind.INSERT:
            index, element = self.fn(action, state, value)
            items = list(value) if value is not None else []
            items.insert(index, element)
            return tuple(items) if isinstance(value, tuple) else items
        if self.kind is EffectKind.ASSIGN:
            merged = dict(value) if value is not None else {}
            merged.update(self.fn(action, state, value))
            return merged
        return DELETED

    def __str__(self) -> str:
        return f"{self.kind.value} {format_path(self.path)}"
