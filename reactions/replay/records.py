"""
Action records and the JSONL action log format.

Each non-blank line of an action log is one record:
    {"action": "AddItem", "args": ["First Item"], "kwargs": {}, "group": "list1"}
Only "action" is required.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

from ..core.errors import ActionLogError


@dataclass(frozen=True)
class ActionRecord:
    """
    Serializable request to build and reduce one action.

    Fields:
        name: Reaction name (group-local when group is set)
        args: Positional arguments for the action constructor
        kwargs: Keyword arguments for the action constructor
        group: Group the reaction was registered in
    """
    name: str
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)
    group: Optional[str] = None

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ActionRecord":
        if not isinstance(data, dict) or not isinstance(data.get("action"), str):
            raise ValueError("record must be an object with a string 'action' field")
        args = data.get("args") or []
        kwargs = data.get("kwargs") or {}
        if not isinstance(args, list) or not isinstance(kwargs, dict):
            raise ValueError("'args' must be a list and 'kwargs' an object")
        return ActionRecord(name=data["action"], args=tuple(args), kwargs=dict(kwargs), group=data.get("group"))

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"action": self.name, "args": list(self.args), "kwargs": dict(self.kwargs)}
        if self.group:
            out["group"] = self.group
        return out


def read_action_log(path: str) -> Iterator[ActionRecord]:
    """
    Read action records from a JSONL file.

    Yields:
        Records in file order

    Raises:
        FileNotFoundError: If path does not exist
        ActionLogError: If a line is not a valid record
    """
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                yield ActionRecord.from_dict(json.loads(line))
            except ValueError as e:
                raise ActionLogError(f"{path}:{lineno}: invalid action record: {e}") from e


def write_action_log(path: str, records) -> int:
    """Write records as JSONL. Returns the number of records written."""
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record.to_dict(), ensure_ascii=False) + "\n")
            count += 1
    return count
