import sys
import logging
import argparse

from pycubie.log import LOGGER
from pycubie.cubie import CubieCube
from pycubie.facelet import FaceletCube
from pycubie.interface import DEFAULT_SCRAMBLE_LENGTH
from pycubie.moves import format_moves, parse_moves, random_scramble
from pycubie.error import ImpossibleScrambleException, InvalidFaceletException, InvalidTurnException
from pycubie.solver import solve

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="python -m pycubie.solver", description="Solve a 3x3 cube in four phases")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-f", "--facelets", help="initialize the cube from a 54-letter facelet string", type=str)
    source.add_argument("-c", "--custom-scramble", help="initialize the cube with your own scramble", type=str)
    source.add_argument("-r", "--random-scramble", help="initialize the cube with a random scramble of N moves",
                        type=int, nargs='?', const=DEFAULT_SCRAMBLE_LENGTH, metavar='N')
    parser.add_argument("-p", "--print-scramble", help="print the scramble and the cube", action="store_true")
    parser.add_argument("-d", "--debug", help="enable debug logging", action="store_true")
    return parser.parse_args(argv)

def get_cube(args: argparse.Namespace) -> CubieCube:
    if args.facelets:
        return FaceletCube.from_string(args.facelets).to_cubie()

    if args.custom_scramble:
        scramble = parse_moves(args.custom_scramble)
    else:
        total_moves = DEFAULT_SCRAMBLE_LENGTH if args.random_scramble is None else args.random_scramble
        scramble = random_scramble(total_moves)
    if args.print_scramble:
        print(format_moves(scramble))
    return CubieCube.solved().apply_moves(scramble)

def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = parse_args(argv)
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)

    try:
        cube = get_cube(args)
        if args.print_scramble:
            print(FaceletCube.from_cubie(cube))
        if not cube.is_realizable():
            raise ImpossibleScrambleException("Cube is unsolveable: twist, flip or parity is off")
        if (solution := solve(cube)) is None:
            raise ImpossibleScrambleException("Cube is unsolveable")
    except (ImpossibleScrambleException, InvalidFaceletException, InvalidTurnException) as e:
        print(e.message, file=sys.stderr)
        return 1

    print(format_moves(solution))
    return 0

if __name__ == "__main__":
    sys.exit(main())
