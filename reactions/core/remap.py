"""
State remapping for grouped and substituted reactions.

A substitution map redirects top-level state properties to another location,
so one reaction declaration can act on several instances of a repeated
sub-state:

    substitutions = {"domain": ("domain", "list2")}
    remap_state({"domain": {"list2": X}}, substitutions) -> {"domain": X}
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterable, Optional, Tuple

from .errors import ConfigurationError
from .paths import PathSegment, resolve_path, to_path

SubstitutionMap = Mapping[str, Tuple[PathSegment, ...]]


def normalize_substitutions(raw: Optional[Mapping[str, Iterable[Any]]], owner: str) -> Optional[SubstitutionMap]:
    """
    Normalize a declared substitution map.

    Every predicate segment is built with remap=False. The result is read-only.

    Raises:
        ConfigurationError: If a substitution path is empty or malformed
    """
    if raw is None:
        return None
    if isinstance(raw, MappingProxyType):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Substitution map for {owner} must be a mapping, got {raw!r}")
    normalized = {}
    for prop, path in raw.items():
        try:
            segments = to_path(path, remap=False)
        except TypeError as e:
            raise ConfigurationError(f"Invalid substitution for {prop!r} in {owner}: {e}") from e
        if not segments:
            raise ConfigurationError(f"Empty substitution for {prop!r} in {owner}")
        normalized[str(prop)] = segments
    return MappingProxyType(normalized)


def remap_state(root_state: Any, substitutions: Optional[SubstitutionMap], action: Any = None) -> Any:
    """
    Build the effective state view for an action or group.

    Args:
        root_state: Unmapped root state
        substitutions: Normalized substitution map (None = no remapping)
        action: Action being reduced, passed to predicate segments (None when
            the view is built outside a dispatch)

    Returns:
        root_state itself when there is nothing to substitute, otherwise a
        shallow copy with the substituted properties replaced. A substitution
        whose path resolves to nothing yields None for that property.
    """
    if not substitutions or not isinstance(root_state, Mapping):
        return root_state
    view = dict(root_state)
    for prop, path in substitutions.items():
        if prop in view:
            view[prop] = resolve_path(root_state, path, action)
    return view
