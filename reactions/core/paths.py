"""
Path segments and their evaluation.

A path is a tuple of segments locating a node in the state tree. A segment is
either a Literal key/index or a Matcher predicate resolved against the live
state at dispatch time.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Iterator, Optional, Tuple, Union

# Matcher signature: (action, state, value, key_or_index) -> bool
Predicate = Callable[[Any, Any, Any, Any], bool]

# Returned by resolve() when nothing matches
MISSING = object()


def is_sequence(node: Any) -> bool:
    return isinstance(node, (list, tuple))


def iter_children(node: Any) -> Iterator[Tuple[Any, Any]]:
    """
    Yield (key, value) pairs of a container node.

    Sequences yield integer indices, mappings yield keys in insertion order.
    Scalars have no children.
    """
    if is_sequence(node):
        yield from enumerate(node)
    elif isinstance(node, Mapping):
        yield from node.items()


@dataclass(frozen=True)
class Literal:
    """Segment addressing a single mapping key or sequence index."""
    key: Union[str, int]

    @property
    def trie_key(self) -> Hashable:
        return ("key", str(self.key))

    def matches(self, action: Any, state: Any, root_state: Any, value: Any, key: Any) -> bool:
        return self.key == key or str(self.key) == str(key)

    def resolve(self, node: Any, action: Any, root_state: Any) -> Any:
        if is_sequence(node):
            try:
                return node[int(self.key)]
            except (ValueError, IndexError):
                return MISSING
        if isinstance(node, Mapping):
            if self.key in node:
                return node[self.key]
            for k, v in node.items():
                if str(k) == str(self.key):
                    return v
        return MISSING

    def __str__(self) -> str:
        return str(self.key)


@dataclass(frozen=True)
class Matcher:
    """
    Segment selecting children by predicate.

    Fields:
        fn: Predicate called as fn(action, state, value, key)
        remap: When False the predicate sees the unmapped root state instead of
            the remapped view. Segments coming from a substitution map are
            always built with remap=False.

    Matchers are keyed in the trie by the identity of fn, so two reactions
    share a trie node only when they share the predicate object.
    """
    fn: Predicate
    remap: bool = True

    @property
    def trie_key(self) -> Hashable:
        return ("match", self.fn, self.remap)

    def matches(self, action: Any, state: Any, root_state: Any, value: Any, key: Any) -> bool:
        return bool(self.fn(action, state if self.remap else root_state, value, key))

    def resolve(self, node: Any, action: Any, root_state: Any) -> Any:
        for key, value in iter_children(node):
            if self.fn(action, root_state, value, key):
                return value
        return MISSING

    def __str__(self) -> str:
        name = getattr(self.fn, "__name__", repr(self.fn))
        return f"<{name}>" if self.remap else f"<{name}:root>"


PathSegment = Union[Literal, Matcher]


def to_segment(raw: Any, remap: bool = True) -> PathSegment:
    """
    Normalize a declared segment.

    Strings and integers become Literals, callables become Matchers. Existing
    segments are returned as is, except that remap=False forces a Matcher to
    bypass remapping.
    """
    if isinstance(raw, Literal):
        return raw
    if isinstance(raw, Matcher):
        return raw if remap or not raw.remap else Matcher(raw.fn, remap=False)
    if isinstance(raw, (str, int)) and not isinstance(raw, bool):
        return Literal(raw)
    if callable(raw):
        return Matcher(raw, remap=remap)
    raise TypeError(f"Unsupported path segment: {raw!r}")


def to_path(raw: Iterable[Any], remap: bool = True) -> Tuple[PathSegment, ...]:
    if isinstance(raw, (str, bytes)):
        raise TypeError(f"Path must be a sequence of segments, got {raw!r}")
    return tuple(to_segment(seg, remap=remap) for seg in raw)


def resolve_path(root_state: Any, path: Iterable[PathSegment], action: Any = None) -> Optional[Any]:
    """
    Resolve a path against root_state.

    Matchers receive the unmapped root state and select the first matching
    child. Returns None when any segment fails to resolve.
    """
    node = root_state
    for segment in path:
        if node is None:
            return None
        node = segment.resolve(node, action, root_state)
        if node is MISSING:
            return None
    return node


def format_path(path: Iterable[PathSegment]) -> str:
    return ".".join(str(seg) for seg in path)
