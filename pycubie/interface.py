from pycubie.cubie import CubieCube
from pycubie.facelet import FaceletCube
from pycubie.error import ImpossibleScrambleException
from pycubie.moves import Move
from pycubie.solver import solve

__doc__ = """
Functions that take and return cubes as facelet strings and moves
as tokens, for callers that do not want to deal with cube objects.
"""

DEFAULT_SCRAMBLE_LENGTH = 100

def random_cube(total_moves: int = DEFAULT_SCRAMBLE_LENGTH) -> str:
    return FaceletCube.from_cubie(CubieCube.random(total_moves)).to_string()

def solve_cube(cube: str) -> list[str]:
    """
    Returns the move tokens that solve the given facelet string.
    Throws an ImpossibleScrambleException if the cube cannot be solved.
    """
    cubie_cube = FaceletCube.from_string(cube).to_cubie()
    if not cubie_cube.is_realizable():
        raise ImpossibleScrambleException("Cube is unsolveable: twist, flip or parity is off")
    if (solution := solve(cubie_cube)) is None:
        raise ImpossibleScrambleException("Cube is unsolveable")
    return [str(move) for move in solution]

def apply_cube_moves(cube: str, moves: list[str]) -> str:
    """ Returns the facelet string after making the given moves """
    actions = [Move.parse(move) for move in moves]
    return FaceletCube.from_string(cube).apply_moves(actions).to_string()
