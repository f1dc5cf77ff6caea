"""
View binding: bound action handles and props for a group.

The host store (dispatch, subscriptions, middleware) lives outside this
package and is reached only through the HostStore interface. Binding is done
in two explicit phases:

1. bind_action_creators(creators, store) binds each creator to the store;
2. BoundAction.with_context(props) binds the handle to the props object it is
   exposed on, so thunks can call sibling actions through it.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional, Union

from .core.actions import Action
from .registry import Reactions

MapState = Callable[[Any, Optional[Dict[str, Any]]], Mapping]
MapDispatch = Callable[[Optional[Dict[str, Any]], Dict[str, Callable]], Mapping]


class HostStore(ABC):
    """
    Interface of the store that owns the state.

    Implementations must route dispatch(action) through Reactions.reduce.
    """

    @abstractmethod
    def dispatch(self, action: Any) -> Any:
        ...

    @abstractmethod
    def get_state(self) -> Any:
        ...


@dataclass(frozen=True)
class BoundAction:
    """
    An action creator bound to a store, and optionally to a props context.

    Calling the handle builds the action. Thunk results are invoked as
    thunk(context, dispatch, get_state); action results are dispatched.
    """
    creator: Callable[..., Any]
    store: HostStore
    context: Any = field(default=None, repr=False, compare=False)

    def with_context(self, context: Any) -> "BoundAction":
        return replace(self, context=context)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        result = self.creator(*args, **kwargs)
        if callable(result) and not isinstance(result, Action):
            return result(self.context, self.store.dispatch, self.store.get_state)
        return self.store.dispatch(result)


def bind_action_creators(creators: Mapping[str, Any], store: HostStore) -> Dict[str, Any]:
    """
    Bind every callable in creators to store. Non-callables pass through.
    """
    bound: Dict[str, Any] = {}
    for name, creator in creators.items():
        bound[name] = BoundAction(creator, store) if callable(creator) else creator
    return bound


def connect_props(
    reactions: Reactions,
    store: HostStore,
    group: Optional[str] = None,
    map_state: Optional[MapState] = None,
    map_dispatch: Optional[Union[MapDispatch, Mapping[str, Any]]] = None,
    own_props: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the props a view bound to group would receive.

    Props are assembled in order:
    1. every selector of the group, applied to the group's state view
    2. map_state(view, own_props)
    3. the group's bound actions, extended or overridden by map_dispatch
       (a callable receives (own_props, group_creators); a mapping is bound)
    4. own_props

    Bound actions get the returned props dict as their context, so a thunk
    can reach any other prop (including other bound actions) through it.

    Args:
        reactions: Registry holding the group
        store: Host store owning the state
        group: Group name (None for ungrouped reactions)
        map_state: Optional extra state mapping
        map_dispatch: Optional extra action mapping
        own_props: Props supplied by the caller

    Returns:
        Props dict
    """
    view = reactions.group_state(store.get_state(), group)

    state_props: Dict[str, Any] = {}
    for name, selector in reactions.selectors_group.get(group, {}).items():
        state_props[name] = selector(view)
    if map_state is not None:
        state_props.update(map_state(view, own_props))

    creators = reactions.actions_group.get(group) if group else reactions.actions
    creators = creators or {}
    dispatch_props = bind_action_creators(creators, store)
    if callable(map_dispatch):
        dispatch_props.update(map_dispatch(own_props, creators))
    elif map_dispatch is not None:
        dispatch_props.update(bind_action_creators(map_dispatch, store))

    props: Dict[str, Any] = {}
    props.update(state_props)
    for name, prop in dispatch_props.items():
        props[name] = prop.with_context(props) if isinstance(prop, BoundAction) else prop
    props.update(own_props or {})
    return props
