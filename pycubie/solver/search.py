from __future__ import annotations
import logging
from collections import deque
from enum import Enum
from typing import Callable, Hashable, Optional, Sequence, TypeVar

from pycubie.log import LOGGER
from pycubie.moves import Move
from pycubie.utils import invert_moves

__doc__ = """
Meet-in-the-middle breadth first search. Two searches run from the
start and from the goal through one shared queue, and stop as soon as
one of them reaches an id the other one has already seen.
"""

State = TypeVar("State")

class Direction(Enum):
    FORWARD = 0
    BACKWARD = 1

    @property
    def opposite(self) -> Direction:
        return Direction.BACKWARD if self == Direction.FORWARD else Direction.FORWARD

def build_move_seq(history: dict[tuple[Hashable, Direction], list[Move]], meeting_id: Hashable) -> list[Move]:
    """
    Joins the path from the start to the meeting id with the path back
    from the meeting id to the goal. The backward path was built walking
    away from the goal, so it is reversed and every move inverted.
    """
    return history[meeting_id, Direction.FORWARD] + invert_moves(history[meeting_id, Direction.BACKWARD])

def bidirectional_search(
    start: State,
    goal: State,
    moves: Sequence[Move],
    apply_move: Callable[[State, Move], State],
    encode: Callable[[State], Hashable]
) -> Optional[list[Move]]:
    """
    Finds a sequence of the given moves that takes start to a state
    with the same id as goal.
    Arguments:
        moves: the permitted moves, tried in order
        apply_move: returns the state reached by making a move
        encode: reduces a state to the id that is compared and stored
    Returns None if the two searches never meet.
    """
    start_id, goal_id = encode(start), encode(goal)
    if start_id == goal_id:
        return []

    history = {
        (start_id, Direction.FORWARD): [],
        (goal_id, Direction.BACKWARD): []
    }
    queue = deque([
        (start, start_id, Direction.FORWARD),
        (goal, goal_id, Direction.BACKWARD)
    ])

    while queue:
        state, state_id, direction = queue.popleft()
        for move in moves:
            next_state = apply_move(state, move)
            next_id = encode(next_state)

            # first visit wins, so every path stored is a shortest one
            if (next_id, direction) in history:
                continue

            history[next_id, direction] = history[state_id, direction] + [move]

            if (next_id, direction.opposite) in history:
                LOGGER.log(logging.DEBUG, f"searches met after visiting {len(history)} ids")
                return build_move_seq(history, next_id)

            queue.append((next_state, next_id, direction))

    LOGGER.log(logging.DEBUG, f"search exhausted after visiting {len(history)} ids")
    return None
