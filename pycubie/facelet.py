from __future__ import annotations
from collections import Counter
from typing import Iterable

import numpy as np
from pynterface import Background

from pycubie.enums import Color, Corner, Edge, Face
from pycubie.error import InvalidFaceletException
from pycubie.cubie import CubieCube
from pycubie.moves import Move

# face order of the facelet string
FACE_ORDER = [Face.UP, Face.RIGHT, Face.FRONT, Face.DOWN, Face.LEFT, Face.BACK]

FACE_TO_COLOR = {
    face: color for face, color in zip(FACE_ORDER, list(Color))
}

COLOR_TO_STRING = {
    Color.WHITE: 'W',
    Color.RED: 'R',
    Color.GREEN: 'G',
    Color.YELLOW: 'Y',
    Color.ORANGE: 'O',
    Color.BLUE: 'B'
}

STRING_TO_COLOR = {
    v: k for k, v in COLOR_TO_STRING.items()
}

def _facelet(name: str) -> int:
    """ Index of a facelet such as 'U9' in the facelet string """
    return FACE_ORDER.index(Face(name[0])) * 9 + int(name[1]) - 1

# facelets of each corner slot, starting with the U or D facelet, going clockwise
CORNER_FACELETS = [
    [_facelet(f) for f in names] for names in [
        ("U9", "R1", "F3"), ("U7", "F1", "L3"), ("U1", "L1", "B3"), ("U3", "B1", "R3"),
        ("D3", "F9", "R7"), ("D1", "L9", "F7"), ("D7", "B9", "L7"), ("D9", "R9", "B7")
    ]
]

EDGE_FACELETS = [
    [_facelet(f) for f in names] for names in [
        ("U6", "R2"), ("U8", "F2"), ("U4", "L2"), ("U2", "B2"),
        ("D6", "R8"), ("D2", "F8"), ("D4", "L8"), ("D8", "B8"),
        ("F6", "R4"), ("F4", "L6"), ("B6", "L4"), ("B4", "R6")
    ]
]

# colors of each cubie, in the same order as the facelets of its home slot
CORNER_COLORS = [
    tuple(FACE_TO_COLOR[Face(letter)] for letter in corner.name)
    for corner in Corner
]

EDGE_COLORS = [
    tuple(FACE_TO_COLOR[Face(letter)] for letter in edge.name)
    for edge in Edge
]

class FaceletCube:
    """
    Stores a cube as an array of shape (6, 3, 3) of colors, one
    3x3 grid per face in the order U, R, F, D, L, B. Each grid is
    numbered row by row as seen when looking at that face:

       U1 U2 U3
       U4 U5 U6
       U7 U8 U9

    The string form lists the 54 stickers in that order, one letter
    per sticker: W(hite), R(ed), G(reen), Y(ellow), O(range), B(lue).
    """

    def __init__(self, faces: np.ndarray | None = None):
        if faces is None:
            faces = np.array([np.full((3, 3), color, dtype=object) for color in list(Color)])
        self._faces = faces

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FaceletCube) and self.to_string() == other.to_string()

    def __hash__(self) -> int:
        return hash(self.to_string())

    def __repr__(self) -> str:
        return f"FaceletCube({self.to_string()!r})"

    def __str__(self) -> str:

        def get_ansii(color: Color) -> str:
            if color == Color.ORANGE:
                return Background.RGB((255, 165, 0))
            return getattr(Background, f"{color.name}_BRIGHT")

        def face_row(face: Face, i: int) -> str:
            return "".join(
                get_ansii(c) + '  ' for c in self._faces[FACE_ORDER.index(face)][i]
            )

        output = "\n "
        for i in range(3):
            output += '  ' * 3 + face_row(Face.UP, i) + f"{Background.RESET_BACKGROUND}\n "
        for i in range(3):
            for face in [Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK]:
                output += face_row(face, i)
            output += f"{Background.RESET_BACKGROUND}\n "
        for i in range(3):
            output += '  ' * 3 + face_row(Face.DOWN, i) + f"{Background.RESET_BACKGROUND}\n "
        return output

    @staticmethod
    def from_string(cube_string: str) -> FaceletCube:
        """
        Reads a cube from its 54-letter string.
        Throws an InvalidFaceletException if:
            the string has the wrong length
            a letter is not a known color
            a color does not appear exactly 9 times
        """
        if len(cube_string) != 54:
            raise InvalidFaceletException(
                f"Invalid facelet cube representation: expected 54 facelets, got {len(cube_string)}"
            )
        if unknown := {*cube_string} - {*STRING_TO_COLOR.keys()}:
            raise InvalidFaceletException(f"Unknown facelet colors: {''.join(sorted(unknown))}")
        if any(count != 9 for count in Counter(cube_string).values()):
            raise InvalidFaceletException("Each color must appear on exactly 9 facelets")

        colors = [STRING_TO_COLOR[c] for c in cube_string]
        return FaceletCube(np.array(colors, dtype=object).reshape((6, 3, 3)))

    def to_string(self) -> str:
        return "".join(COLOR_TO_STRING[c] for c in self._faces.flat)

    def get_matrix(self) -> np.ndarray:
        """ Returns the mutable array of the cube """
        return self._faces

    def to_cubie(self) -> CubieCube:
        """
        Converts the stickers to cubies.
        Throws an InvalidFaceletException if:
            a center does not have the color of its face
            a corner has no U or D sticker
            the stickers of a corner or edge match no cubie
            a cubie appears twice
        """
        for i, face in enumerate(FACE_ORDER):
            if self._faces[i][1][1] != FACE_TO_COLOR[face]:
                raise InvalidFaceletException(f"Center of face {face.value} is not {FACE_TO_COLOR[face].name}")

        facelets = list(self._faces.flat)
        up_down = (FACE_TO_COLOR[Face.UP], FACE_TO_COLOR[Face.DOWN])

        cp, co = [], []
        for i, fac in enumerate(CORNER_FACELETS):
            ori = next((o for o in range(3) if facelets[fac[o]] in up_down), None)
            if ori is None:
                raise InvalidFaceletException(f"Corner {Corner(i).name} has no U or D facelet")
            col1, col2 = facelets[fac[(ori + 1) % 3]], facelets[fac[(ori + 2) % 3]]
            j = next((j for j, col in enumerate(CORNER_COLORS) if col[1:] == (col1, col2)), None)
            if j is None:
                raise InvalidFaceletException(f"Corner {Corner(i).name} matches no corner cubie")
            cp.append(Corner(j))
            co.append(ori)

        ep, eo = [], []
        for i, fac in enumerate(EDGE_FACELETS):
            colors = (facelets[fac[0]], facelets[fac[1]])
            for j, col in enumerate(EDGE_COLORS):
                if colors == col:
                    ep.append(Edge(j))
                    eo.append(0)
                    break
                if colors == col[::-1]:
                    ep.append(Edge(j))
                    eo.append(1)
                    break
            else:
                raise InvalidFaceletException(f"Edge {Edge(i).name} matches no edge cubie")

        if len(set(cp)) != 8 or len(set(ep)) != 12:
            raise InvalidFaceletException("Cube contains a duplicated cubie")

        return CubieCube(tuple(cp), tuple(co), tuple(ep), tuple(eo))

    @staticmethod
    def from_cubie(cube: CubieCube) -> FaceletCube:
        output = FaceletCube()
        faces = output.get_matrix()
        for i, fac in enumerate(CORNER_FACELETS):
            for k in range(3):
                faces.flat[fac[(k + cube.co[i]) % 3]] = CORNER_COLORS[cube.cp[i]][k]
        for i, fac in enumerate(EDGE_FACELETS):
            for k in range(2):
                faces.flat[fac[(k + cube.eo[i]) % 2]] = EDGE_COLORS[cube.ep[i]][k]
        return output

    def apply_moves(self, moves: Iterable[Move]) -> FaceletCube:
        return FaceletCube.from_cubie(self.to_cubie().apply_moves(moves))

    def apply_move(self, move: Move) -> FaceletCube:
        return self.apply_moves([move])

    def is_solved(self) -> bool:
        return self == FaceletCube()
