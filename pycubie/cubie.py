from __future__ import annotations
import json
import random
from dataclasses import dataclass
from typing import Iterable, Optional

from pycubie.enums import Corner, Edge, Face, Turn
from pycubie.error import InvalidCubeException
from pycubie.moves import ALL_MOVES, Move, random_scramble

__doc__ = """
The cube on the cubie level: which corner and edge cubie sits in each
slot, and how each of them is twisted or flipped in that slot.
"""

@dataclass(frozen=True)
class CubieCube:
    """
    Stores a cube as two permutations and two orientation vectors.

        cp[i]: the corner cubie in corner slot i
        co[i]: its twist, 0 to 2 (3 to 5 for mirrored states)
        ep[i]: the edge cubie in edge slot i
        eo[i]: its flip, 0 or 1

    Cubes are values: every operation returns a new cube.
    """
    cp: tuple[Corner, ...]
    co: tuple[int, ...]
    ep: tuple[Edge, ...]
    eo: tuple[int, ...]

    @staticmethod
    def solved() -> CubieCube:
        return CubieCube(
            cp=tuple(Corner),
            co=(0,) * 8,
            ep=tuple(Edge),
            eo=(0,) * 12
        )

    @staticmethod
    def random(total_moves: int, rng: Optional[random.Random] = None) -> CubieCube:
        """ Returns the solved cube scrambled by the given number of random moves """
        return CubieCube.solved().apply_moves(random_scramble(total_moves, rng))

    def multiply(self, other: CubieCube) -> CubieCube:
        """
        Performs other after self. Both the permutations and the
        orientations of other are taken relative to the slots of self.
        """
        ep = tuple(self.ep[e] for e in other.ep)
        eo = tuple((other.eo[i] + self.eo[e]) % 2 for i, e in enumerate(other.ep))
        cp = tuple(self.cp[c] for c in other.cp)
        co = tuple(
            combine_corner_orientations(self.co[c], other.co[i])
            for i, c in enumerate(other.cp)
        )
        return CubieCube(cp, co, ep, eo)

    def apply_move(self, move: Move) -> CubieCube:
        return self.multiply(MOVE_CUBES[move])

    def apply_moves(self, moves: Iterable[Move]) -> CubieCube:
        cube = self
        for move in moves:
            cube = cube.apply_move(move)
        return cube

    def is_solved(self) -> bool:
        return self == SOLVED

    def is_realizable(self) -> bool:
        """
        Determines if the cube can be reached from the solved state with legal moves:
            - The corner twists sum to a multiple of 3.
            - The edge flips sum to a multiple of 2.
            - The corner and edge permutations have the same parity.
        """
        return (
            sum(self.co) % 3 == 0 and
            sum(self.eo) % 2 == 0 and
            permutation_parity(self.cp) == permutation_parity(self.ep)
        )

    def to_json(self) -> str:
        return json.dumps({
            "cp": [int(c) for c in self.cp],
            "co": list(self.co),
            "ep": [int(e) for e in self.ep],
            "eo": list(self.eo)
        }, separators=(',', ':'))

    @staticmethod
    def from_json(text: str) -> CubieCube:
        """
        Reads a cube from the JSON form written by to_json.
        Throws an InvalidCubeException if:
            the text is not JSON of the right shape
            a field is not a list of ints
            a permutation repeats or is missing a label
            an orientation is out of range
        """
        try:
            data = json.loads(text)
            cp, co, ep, eo = data["cp"], data["co"], data["ep"], data["eo"]
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise InvalidCubeException(f"Invalid cubie cube representation: {e}") from e

        for field in (cp, co, ep, eo):
            if not isinstance(field, list) or not all(type(x) is int for x in field):
                raise InvalidCubeException("Invalid cubie cube representation: fields must be lists of ints")
        if len(cp) != 8 or len(co) != 8 or len(ep) != 12 or len(eo) != 12:
            raise InvalidCubeException("Invalid cubie cube representation: wrong lengths")
        if sorted(cp) != list(range(8)) or sorted(ep) != list(range(12)):
            raise InvalidCubeException("Invalid cubie cube representation: not a permutation")
        if not all(o in range(6) for o in co) or not all(o in range(2) for o in eo):
            raise InvalidCubeException("Invalid cubie cube representation: bad orientation")

        return CubieCube(
            cp=tuple(Corner(c) for c in cp),
            co=tuple(co),
            ep=tuple(Edge(e) for e in ep),
            eo=tuple(eo)
        )

def combine_corner_orientations(ori_a: int, ori_b: int) -> int:
    """
    Combines the twist of a corner in a with the twist b adds to it.
    Values of 3 and above describe mirrored states, which only show up
    when reflections are composed in; each case normalizes differently.
    >>> combine_corner_orientations(2, 2)
    1
    >>> combine_corner_orientations(4, 1)
    3
    """
    if ori_a < 3 and ori_b < 3:
        # two regular cubes
        ori = ori_a + ori_b
        if ori >= 3:
            ori -= 3
    elif ori_a < 3:
        # b is in a mirrored state
        ori = ori_a + ori_b
        if ori >= 6:
            ori -= 3
    elif ori_b < 3:
        # a is in a mirrored state
        ori = ori_a - ori_b
        if ori < 3:
            ori += 3
    else:
        # both are in mirrored states
        ori = ori_a - ori_b
        if ori < 0:
            ori += 3
    return ori

def permutation_parity(permutation: Iterable[int]) -> int:
    """ Returns 0 for even permutations and 1 for odd ones """
    items = list(permutation)
    parity = 0
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            parity ^= items[i] > items[j]
    return int(parity)

SOLVED = CubieCube.solved()

U, D, L, R, F, B = Face.UP, Face.DOWN, Face.LEFT, Face.RIGHT, Face.FRONT, Face.BACK
URF, UFL, ULB, UBR, DFR, DLF, DBL, DRB = Corner
UR, UF, UL, UB, DR, DF, DL, DB, FR, FL, BL, BR = Edge

# where a clockwise quarter turn of each face sends every cubie, and the twist it adds
BASE_MOVES = {
    U: CubieCube(
        cp=(UBR, URF, UFL, ULB, DFR, DLF, DBL, DRB),
        co=(0, 0, 0, 0, 0, 0, 0, 0),
        ep=(UB, UR, UF, UL, DR, DF, DL, DB, FR, FL, BL, BR),
        eo=(0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    ),
    D: CubieCube(
        cp=(URF, UFL, ULB, UBR, DLF, DBL, DRB, DFR),
        co=(0, 0, 0, 0, 0, 0, 0, 0),
        ep=(UR, UF, UL, UB, DF, DL, DB, DR, FR, FL, BL, BR),
        eo=(0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    ),
    L: CubieCube(
        cp=(URF, ULB, DBL, UBR, DFR, UFL, DLF, DRB),
        co=(0, 1, 2, 0, 0, 2, 1, 0),
        ep=(UR, UF, BL, UB, DR, DF, FL, DB, FR, UL, DL, BR),
        eo=(0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    ),
    R: CubieCube(
        cp=(DFR, UFL, ULB, URF, DRB, DLF, DBL, UBR),
        co=(2, 0, 0, 1, 1, 0, 0, 2),
        ep=(FR, UF, UL, UB, BR, DF, DL, DB, DR, FL, BL, UR),
        eo=(0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    ),
    F: CubieCube(
        cp=(UFL, DLF, ULB, UBR, URF, DFR, DBL, DRB),
        co=(1, 2, 0, 0, 2, 1, 0, 0),
        ep=(UR, FL, UL, UB, DR, FR, DL, DB, UF, DF, BL, BR),
        eo=(0, 1, 0, 0, 0, 1, 0, 0, 1, 1, 0, 0)
    ),
    B: CubieCube(
        cp=(URF, UFL, UBR, DRB, DFR, DLF, ULB, DBL),
        co=(0, 0, 1, 2, 0, 0, 2, 1),
        ep=(UR, UF, UL, BR, DR, DF, DL, BL, FR, FL, UB, DB),
        eo=(0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 1)
    ),
}

def _move_cube(move: Move) -> CubieCube:
    base = BASE_MOVES[move.face]
    cube = base
    for _ in range(move.turn.value - 1):
        cube = cube.multiply(base)
    return cube

# all 18 moves, derived from the base moves by repeated composition
MOVE_CUBES = {move: _move_cube(move) for move in ALL_MOVES}
