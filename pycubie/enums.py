from __future__ import annotations
from enum import Enum, IntEnum

class Face(Enum):
    """
    Enums for faces, representing the six layers that can be turned.
    The order here is the order moves are enumerated in, which decides
    which of several equally short solutions the search returns.
    """
    UP = 'U'
    DOWN = 'D'
    LEFT = 'L'
    RIGHT = 'R'
    FRONT = 'F'
    BACK = 'B'

class Turn(Enum):
    """
    Enums for turn directions. The values are the number of
    clockwise quarter turns, so they can be summed mod 4.
    """
    NORMAL = 1
    HALF = 2
    PRIME = 3

    @property
    def suffix(self) -> str:
        return ['', '2', "'"][self.value - 1]

    @staticmethod
    def from_quarter_turns(quarter_turns: int) -> Turn | None:
        """ Returns the turn for a number of quarter turns, None if they cancel out """
        quarter_turns %= 4
        if quarter_turns == 0:
            return None
        return Turn(quarter_turns)

class Color(Enum):
    """
    Enums for sticker colors, in the same order as the faces of
    the facelet string (white top, red right, green front).
    """
    WHITE = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    ORANGE = 4
    BLUE = 5

class Corner(IntEnum):
    """ Positional labels for the 8 corner slots """
    URF = 0
    UFL = 1
    ULB = 2
    UBR = 3
    DFR = 4
    DLF = 5
    DBL = 6
    DRB = 7

class Edge(IntEnum):
    """ Positional labels for the 12 edge slots """
    UR = 0
    UF = 1
    UL = 2
    UB = 3
    DR = 4
    DF = 5
    DL = 6
    DB = 7
    FR = 8
    FL = 9
    BL = 10
    BR = 11
