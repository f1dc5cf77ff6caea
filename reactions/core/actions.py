"""
Action records and action creators.

An action is an immutable tagged record. Its type is always assigned by the
registry (through an ActionCreator), never by the caller.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from .errors import ConfigurationError


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        type: Qualified reaction name ("AddItem", "list1.AddItem")
        payload: Fields returned by the reaction's action constructor

    Payload fields are readable by subscript: action["text"].
    """
    type: str
    payload: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        if key == "type":
            return self.type
        return self.payload[key]

    def get(self, key: str, default: Any = None) -> Any:
        if key == "type":
            return self.type
        return self.payload.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, **self.payload}


class ActionCreator:
    """
    Callable wrapping a reaction's action constructor.

    Calling it runs the constructor and stamps the registered type on the
    result. A callable result is a thunk and is returned untouched; thunks are
    run by the binding layer, never by the reducer.
    """

    def __init__(self, action_type: str, build: Callable[..., Any]) -> None:
        self.type = action_type
        self.build = build

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        result = self.build(*args, **kwargs)
        if isinstance(result, Action):
            return Action(type=self.type, payload=dict(result.payload))
        if result is None:
            return Action(type=self.type)
        if isinstance(result, Mapping):
            payload = {k: v for k, v in result.items() if k != "type"}
            return Action(type=self.type, payload=payload)
        if callable(result):
            return result
        raise ConfigurationError(
            f"Action constructor for {self.type} returned {type(result).__name__}, "
            "expected a mapping, an Action or a thunk"
        )

    def __repr__(self) -> str:
        return f"ActionCreator({self.type!r})"
