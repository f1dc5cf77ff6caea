"""
Replay of recorded actions.

Replay builds actions from serialized records and reduces them in order.
Same records and initial state always produce the same final state.
"""

from .records import ActionRecord, read_action_log, write_action_log
from .runner import ReplayResult, replay

__all__ = [
    "ActionRecord",
    "read_action_log",
    "write_action_log",
    "ReplayResult",
    "replay",
]
