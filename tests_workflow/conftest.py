"""Shared pytest fixtures for pattern_recall workflow tests.

Provides state machine/context pairs and helpers that drive the machine into
each state through real transitions (no forced state assignment).
"""

import pytest

from pattern_recall.model.path import PatternPath
from pattern_recall.ui.state_machine import GameStateMachine
from pattern_recall.ui.context import GameContext

SMAndCtx = tuple[GameStateMachine, GameContext]

# 3-tile L on the default board: (1,1) (2,1) (2,2)
L_PATTERN_CELLS = (13, 14, 26)


@pytest.fixture
def l_pattern() -> PatternPath:
    return PatternPath(cells=L_PATTERN_CELLS, width=12, height=8)


@pytest.fixture
def sm_and_ctx() -> SMAndCtx:
    """Fresh state machine and context pair, starting in Idle state."""
    return GameStateMachine.create(add_listener=False, path_length=len(L_PATTERN_CELLS))


def drive_to(sm: GameStateMachine, state_name: str, pattern: PatternPath) -> None:
    """Drive a fresh machine to ``state_name`` using only valid events.

    Accepted names: idle, memorize, recall, idle_won, idle_lost.
    """
    if state_name == "idle":
        return
    sm.start_round(pattern=pattern)
    if state_name == "memorize":
        return
    sm.start_recall()
    if state_name == "recall":
        return
    if state_name == "idle_won":
        sm.context.round.selected = list(pattern.cells)
        sm.win()
    elif state_name == "idle_lost":
        sm.lose(cell=0)
    else:
        raise ValueError(f"Unknown test state: {state_name}")
