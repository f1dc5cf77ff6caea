"""
Replay runner: apply a sequence of action records to a state.

Replay is pure: it builds each action through the registry and reduces it,
recording what changed at every step.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from ..core.actions import Action
from ..core.diff import state_changes
from ..core.errors import ReplayError
from ..logging_config import get_logger
from ..registry import Reactions
from .records import ActionRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of a replay.

    Fields:
        state: Final state after applying records
        applied: Number of records applied
        changes: (action_type, state_changes string) per applied record
    """
    state: Any
    applied: int
    changes: Tuple[Tuple[str, str], ...] = ()


def replay(
    reactions: Reactions,
    state: Any,
    records: Iterable[ActionRecord],
    until: Optional[int] = None,
) -> ReplayResult:
    """
    Replay records against state.

    Args:
        reactions: Registry the records refer to
        state: Initial state
        records: Records in dispatch order
        until: Stop after this many records (None = all)

    Returns:
        ReplayResult with final state, count and per-step changes

    Raises:
        UnknownActionError: If a record names an unregistered reaction
        ReplayError: If a record's constructor produces a thunk
    """
    changes = []
    count = 0

    for record in records:
        if until is not None and count >= until:
            break
        action = reactions.create_action(record.name, *record.args, group=record.group, **record.kwargs)
        if not isinstance(action, Action):
            raise ReplayError(f"Record {count} ({record.name}) produced a thunk; thunks need a host store")
        new_state = reactions.reduce(state, action)
        changes.append((action.type, state_changes(state, new_state)))
        state = new_state
        count += 1

    logger.debug("Replayed %d action records", count)
    return ReplayResult(state=state, applied=count, changes=tuple(changes))
