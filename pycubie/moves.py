from __future__ import annotations
import re
import random
from dataclasses import dataclass
from typing import Iterable, Optional

from pycubie.enums import Face, Turn
from pycubie.error import InvalidTurnException

MOVE_PATTERN = re.compile(r"([UDLRFB])(['2]?)")

@dataclass(frozen=True)
class Move:
    """
    A single face turn: one of the six faces, turned a quarter
    clockwise (NORMAL), a quarter counterclockwise (PRIME) or twice (HALF).
    """
    face: Face
    turn: Turn

    def __str__(self) -> str:
        return f"{self.face.value}{self.turn.suffix}"

    def __repr__(self) -> str:
        return f"Move({self})"

    @staticmethod
    def parse(token: str) -> Move:
        """
        Parses a move from its token.
        >>> Move.parse("R'")
        Move(R')
        """
        if (match := MOVE_PATTERN.fullmatch(token)) is None:
            raise InvalidTurnException(f"Unknown move: {token!r}")
        letter, suffix = match.groups()
        turn = {'': Turn.NORMAL, "'": Turn.PRIME, '2': Turn.HALF}[suffix]
        return Move(Face(letter), turn)

    def inverse(self) -> Move:
        """ Returns the move that undoes this one """
        match self.turn:
            case Turn.NORMAL: return Move(self.face, Turn.PRIME)
            case Turn.PRIME: return Move(self.face, Turn.NORMAL)
            case _: return self

ALL_MOVES = tuple(
    Move(face, turn)
    for face in Face
    for turn in [Turn.NORMAL, Turn.PRIME, Turn.HALF]
)

def parse_moves(moves: str) -> list[Move]:
    """
    Parses a list of moves given as a string with each move seperated by whitespace.
    >>> [str(m) for m in parse_moves("R U  R' U'")]
    ['R', 'U', "R'", "U'"]
    """
    return [Move.parse(m) for m in moves.split()]

def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(str(m) for m in moves)

def random_scramble(total_moves: int, rng: Optional[random.Random] = None) -> list[Move]:
    """ Returns a scramble of the given length, drawn uniformly from all 18 moves """
    rng = rng or random
    return [rng.choice(ALL_MOVES) for _ in range(total_moves)]
