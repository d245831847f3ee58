import logging
from typing import Optional

from pycubie.log import LOGGER
from pycubie.cubie import CubieCube
from pycubie.moves import Move
from pycubie.utils import SolvePipeline
from pycubie.solver.phases import Phase
from pycubie.solver.search import bidirectional_search

__doc__ = """
Functions for solving a 3x3 in four phases. Each function works in order,
building off the results of the previous one: a phase only searches with
moves that keep the goals of the earlier phases, so it will not find a
solution if an earlier phase was skipped.
"""

def solve_phase(phase: Phase, cube: CubieCube) -> Optional[list[Move]]:
    """ Searches for the moves that take the cube to the goal of the phase """
    moves = bidirectional_search(
        cube,
        CubieCube.solved(),
        phase.permitted_moves,
        CubieCube.apply_move,
        phase.encode
    )
    if moves is None:
        LOGGER.log(logging.ERROR, f"phase {phase.name.lower()} has no solution for {cube.to_json()}")
    return moves

def solve_edge_orientation(cube: CubieCube) -> Optional[list[Move]]:
    """
    Flips every edge into its good orientation.
    After this, quarter turns of F and B are no longer used.
    """
    return solve_phase(Phase.ONE, cube)

def solve_corner_orientation(cube: CubieCube) -> Optional[list[Move]]:
    """
    Twists every corner into its good orientation and brings the
    four E-slice edges into the E-slice.
    After this, quarter turns of L and R are no longer used.
    """
    return solve_phase(Phase.TWO, cube)

def solve_half_turn_reduction(cube: CubieCube) -> Optional[list[Move]]:
    """
    Moves every edge into its own slice and every corner into its own
    orbit with even parity, so only half turns are needed from here.
    """
    return solve_phase(Phase.THREE, cube)

def solve_half_turns(cube: CubieCube) -> Optional[list[Move]]:
    """ Solves the rest of the cube with half turns """
    return solve_phase(Phase.FOUR, cube)

PIPELINE_3x3 = SolvePipeline(
    solve_edge_orientation,
    solve_corner_orientation,
    solve_half_turn_reduction,
    solve_half_turns
)
