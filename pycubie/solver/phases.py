from __future__ import annotations
from enum import Enum

from pycubie.cubie import CubieCube
from pycubie.enums import Corner, Edge, Face, Turn
from pycubie.moves import ALL_MOVES, Move

__doc__ = """
Reduced views of a cube, one per solving phase. Each phase forgets what
later phases take care of, so two cubes that are the same as far as the
phase is concerned get the same id. Ids are tuples of ints and are used
directly as search keys.

Each phase also has a set of permitted moves, which keep the goal of every
earlier phase intact:
    ONE:   all 18 moves                       -> orient all edges
    TWO:   no quarter turns of F and B        -> orient corners, E-slice edges into the E-slice
    THREE: quarter turns of U and D only      -> reach a state solvable by half turns
    FOUR:  half turns only                    -> solve the cube
"""

class Phase(Enum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4

    @property
    def permitted_moves(self) -> tuple[Move, ...]:
        return PHASE_MOVES[self]

    def encode(self, cube: CubieCube) -> tuple[int, ...]:
        return PHASE_ENCODERS[self](cube)

def _without_quarter_turns(*faces: Face) -> tuple[Move, ...]:
    return tuple(m for m in ALL_MOVES if m.face not in faces or m.turn == Turn.HALF)

PHASE_MOVES = {
    Phase.ONE: ALL_MOVES,
    Phase.TWO: _without_quarter_turns(Face.FRONT, Face.BACK),
    Phase.THREE: _without_quarter_turns(Face.FRONT, Face.BACK, Face.LEFT, Face.RIGHT),
    Phase.FOUR: _without_quarter_turns(*Face),
}

# slot order and labels used for the phase three classes: the U and D edges
# alternate between F/B and L/R edges, and the corners pair up by index & 5
EDGE_ORDER = [
    Edge.UF, Edge.UR, Edge.UB, Edge.UL, Edge.DF, Edge.DR, Edge.DB, Edge.DL,
    Edge.FR, Edge.FL, Edge.BR, Edge.BL
]
CORNER_ORDER = [
    Corner.URF, Corner.UBR, Corner.ULB, Corner.UFL,
    Corner.DFR, Corner.DLF, Corner.DBL, Corner.DRB
]
EDGE_LABELS = {edge: i for i, edge in enumerate(EDGE_ORDER)}
CORNER_LABELS = {corner: i for i, corner in enumerate(CORNER_ORDER)}

def encode_phase_one(cube: CubieCube) -> tuple[int, ...]:
    """ The flip of every edge """
    return cube.eo

def encode_phase_two(cube: CubieCube) -> tuple[int, ...]:
    """
    The twist of every corner, followed by a mask with bit i set if
    edge slot i holds one of the E-slice edges (FR, FL, BL, BR).
    """
    middle_slice = 0
    for i, edge in enumerate(cube.ep):
        middle_slice |= (edge >> 3) << i
    return cube.co + (middle_slice,)

def encode_phase_three(cube: CubieCube) -> tuple[int, ...]:
    """
    Three words:
        - per edge slot, 2 bits: 2 for an E-slice edge, else which of
          the two U/D edge classes it belongs to
        - per corner slot, 3 bits: which corner pair it belongs to
        - the parity of the corner permutation
    """
    edges = [EDGE_LABELS[cube.ep[slot]] for slot in EDGE_ORDER]
    corners = [CORNER_LABELS[cube.cp[slot]] for slot in CORNER_ORDER]

    edge_classes = 0
    for i, edge in enumerate(edges):
        edge_classes |= (2 if edge > 7 else edge & 1) << (2 * i)

    corner_classes = 0
    for i, corner in enumerate(corners):
        corner_classes |= (corner & 5) << (3 * i)

    parity = 0
    for i in range(8):
        for j in range(i + 1, 8):
            parity ^= corners[i] > corners[j]

    return (edge_classes, corner_classes, int(parity))

def encode_phase_four(cube: CubieCube) -> tuple[int, ...]:
    """ The whole cube """
    return tuple(int(c) for c in cube.cp) + cube.co + tuple(int(e) for e in cube.ep) + cube.eo

PHASE_ENCODERS = {
    Phase.ONE: encode_phase_one,
    Phase.TWO: encode_phase_two,
    Phase.THREE: encode_phase_three,
    Phase.FOUR: encode_phase_four,
}
