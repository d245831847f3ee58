from __future__ import annotations
import logging
from typing import Callable, Optional, TYPE_CHECKING

from pycubie.log import LOGGER
from pycubie.enums import Turn
from pycubie.moves import Move, format_moves

if TYPE_CHECKING:
    from pycubie.cubie import CubieCube

class SolvePipeline:
    """
    Runs solving stages in order. Every stage receives the original cube
    with the moves of all earlier stages applied, and returns the moves
    that achieve its own goal, or None if it could not find any.
    """
    def __init__(self, *funcs: Callable[[CubieCube], Optional[list[Move]]]):
        self.__funcs = funcs
    def __call__(self, cube: CubieCube) -> Optional[list[Move]]:
        moves = []
        for func in self.__funcs:
            stage_moves = func(cube.apply_moves(moves))
            if stage_moves is None:
                LOGGER.log(logging.ERROR, f"{func.__name__}: no solution found after {format_moves(moves)!r}")
                return None
            LOGGER.log(logging.DEBUG, f"{func.__name__}: {format_moves(stage_moves)}")
            moves += stage_moves
        return simplify_moves(moves)

def simplify_moves(moves: list[Move]) -> list[Move]:
    """
    Merges turns of the same face that follow each other into one,
    dropping them if they cancel out.
    >>> from pycubie.moves import parse_moves
    >>> format_moves(simplify_moves(parse_moves("R R R U2 U2 F")))
    "R' F"
    """
    simplified = []
    for move in moves:
        if simplified and simplified[-1].face == move.face:
            last = simplified.pop()
            turn = Turn.from_quarter_turns(last.turn.value + move.turn.value)
            if turn is not None:
                simplified.append(Move(move.face, turn))
        else:
            simplified.append(move)
    return simplified

def invert_moves(moves: list[Move]) -> list[Move]:
    """
    Reverses a list of moves and outputs the moves to get
    back to the original position.
    >>> from pycubie.moves import parse_moves
    >>> format_moves(invert_moves(parse_moves("R U2 F")))
    "F' U2 R'"
    """
    return [move.inverse() for move in reversed(moves)]
