__version__ = "0.1.0"
__author__ = "Vivaan Singhvi"

from pycubie.cubie import CubieCube
from pycubie.facelet import FaceletCube
from pycubie.moves import Move, parse_moves, format_moves
from pycubie.solver import solve
