from __future__ import annotations

from typing import Set, Tuple

from .errors import IllegalStateTransition
from .models import CfgState


_ALLOWED: Set[Tuple[CfgState, CfgState]] = {
    (CfgState.UNPREPARED, CfgState.PREPARED),
    (CfgState.UNPREPARED, CfgState.CLOSED),
    (CfgState.PREPARED, CfgState.CLOSED),
}

_TERMINAL: Set[CfgState] = {CfgState.CLOSED}


def is_terminal(state: CfgState) -> bool:
    return state in _TERMINAL


def can_transition(src: CfgState, dst: CfgState) -> bool:
    if src == dst:
        return True
    if src in _TERMINAL:
        return False
    return (src, dst) in _ALLOWED


def ensure_transition(src: CfgState, dst: CfgState) -> None:
    if not can_transition(src, dst):
        raise IllegalStateTransition(src=src.value, dst=dst.value)
