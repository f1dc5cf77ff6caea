"""
State diff: report which nodes changed between two state trees.

Containers are compared by identity. Numbers are compared by value, so 1
and 1.0 are equal, but a boolean never equals a number. Other scalars must
match in type and value. Because the reducer reuses every untouched branch
by reference, the reported paths are exactly the rebuilt nodes plus the
changed leaves.
"""

from collections.abc import Mapping
from typing import Any, List

from .paths import MISSING, is_sequence

_SCALARS = (str, bytes, int, float, complex, bool, type(None))
_NUMBERS = (int, float, complex)


def _is_leaf(value: Any) -> bool:
    return isinstance(value, _SCALARS) or not (is_sequence(value) or isinstance(value, Mapping))


def _differs(old: Any, new: Any) -> bool:
    if old is new:
        return False
    if isinstance(old, _SCALARS) and isinstance(new, _SCALARS):
        if isinstance(old, bool) != isinstance(new, bool):
            return True
        if isinstance(old, _NUMBERS) and isinstance(new, _NUMBERS):
            return old != new
        return type(old) is not type(new) or old != new
    return True


def _child(node: Any, key: Any) -> Any:
    if is_sequence(node):
        return node[key] if isinstance(key, int) and 0 <= key < len(node) else MISSING
    if isinstance(node, Mapping):
        return node.get(key, MISSING)
    return MISSING


def changed_paths(old_state: Any, new_state: Any) -> List[str]:
    """
    List the dotted paths of every node that differs between two states.

    Traversal follows new_state's own order (insertion order for mappings,
    index order for sequences). Sequences whose length changed are reported at
    their own path only; their elements are not compared.

    Args:
        old_state: Previous state tree
        new_state: Next state tree

    Returns:
        Ordered list of dotted paths, e.g. ["domain", "domain.nextId"]
    """
    paths: List[str] = []
    _compare(old_state, new_state, [], paths)
    return paths


def _compare(old: Any, new: Any, prefix: List[str], paths: List[str]) -> None:
    if is_sequence(new):
        entries = enumerate(new)
    elif isinstance(new, Mapping):
        entries = new.items()
    else:
        return

    for key, new_value in entries:
        old_value = _child(old, key)
        path = prefix + [str(key)]
        if old_value is MISSING or _differs(old_value, new_value):
            paths.append(".".join(path))

        if old_value is MISSING or old_value is None or new_value is None:
            continue
        if _is_leaf(new_value) or _is_leaf(old_value):
            continue
        if is_sequence(new_value):
            if not is_sequence(old_value) or len(new_value) != len(old_value):
                continue
        _compare(old_value, new_value, path, paths)


def state_changes(old_state: Any, new_state: Any) -> str:
    """
    Changed paths joined as one string, each followed by ";".

    Example:
        state_changes(s0, s1) -> "domain;domain.todoList;domain.nextId;app;"
    """
    return "".join(f"{path};" for path in changed_paths(old_state, new_state))
