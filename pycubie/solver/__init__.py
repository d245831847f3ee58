from typing import Optional

from pycubie.cubie import CubieCube
from pycubie.moves import Move
from pycubie.solver.solver3x3 import PIPELINE_3x3

def solve(cube: CubieCube) -> Optional[list[Move]]:
    """
    Returns the moves that solve the cube, with no two turns of the same
    face next to each other. Returns None only if a phase fails, which
    does not happen for cubes reached from the solved cube by legal moves.
    """
    return PIPELINE_3x3(cube)
