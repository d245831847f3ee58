import pytest

from pycubie.cubie import CubieCube
from pycubie.enums import Turn
from pycubie.moves import Move, parse_moves
from pycubie.solver.phases import Phase, PHASE_MOVES

SOLVED = CubieCube.solved()
SCRAMBLE = CubieCube.solved().apply_moves(parse_moves("R U F' L2 D B' R2 U' F L D2"))

def test_permitted_move_counts():
    assert [len(PHASE_MOVES[phase]) for phase in Phase] == [18, 14, 10, 6]

def test_permitted_moves_shrink():
    for earlier, later in zip(list(Phase), list(Phase)[1:]):
        assert set(later.permitted_moves) < set(earlier.permitted_moves)

def test_permitted_moves_per_phase():
    assert [str(m) for m in Phase.TWO.permitted_moves][-2:] == ["F2", "B2"]
    assert [str(m) for m in Phase.THREE.permitted_moves] == ["U", "U'", "U2", "D", "D'", "D2", "L2", "R2", "F2", "B2"]
    assert all(m.turn == Turn.HALF for m in Phase.FOUR.permitted_moves)

@pytest.mark.parametrize("phase", list(Phase))
def test_encoding_is_hashable_and_deterministic(phase):
    assert phase.encode(SCRAMBLE) == phase.encode(SCRAMBLE)
    assert hash(phase.encode(SCRAMBLE)) == hash(phase.encode(SCRAMBLE))

def test_phase_one_is_edge_flips():
    assert Phase.ONE.encode(SOLVED) == (0,) * 12
    assert Phase.ONE.encode(SOLVED.apply_move(Move.parse("F"))) == (0, 1, 0, 0, 0, 1, 0, 0, 1, 1, 0, 0)
    # permutation is forgotten
    assert Phase.ONE.encode(SOLVED.apply_moves(parse_moves("R U L2"))) == Phase.ONE.encode(SOLVED)

def test_phase_two_marks_middle_slice_edges():
    assert Phase.TWO.encode(SOLVED) == (0,) * 8 + (0b111100000000,)
    # R moves FR into UR and BR into DR
    ids = Phase.TWO.encode(SOLVED.apply_move(Move.parse("R")))
    assert ids[:8] == (2, 0, 0, 1, 1, 0, 0, 2)
    assert ids[8] == 0b011000010001
    assert Phase.TWO.encode(SOLVED.apply_moves(parse_moves("U D2 F2"))) == Phase.TWO.encode(SOLVED)

def test_phase_three_classes():
    goal = Phase.THREE.encode(SOLVED)
    assert Phase.THREE.encode(SOLVED.apply_moves(parse_moves("U2 D2"))) == goal
    # L2 swaps corners of different pairs
    assert Phase.THREE.encode(SOLVED.apply_move(Move.parse("L2"))) != goal
    assert Phase.THREE.encode(SOLVED.apply_move(Move.parse("U"))) != goal

def test_phase_four_is_whole_cube():
    assert Phase.FOUR.encode(SOLVED) == tuple(range(8)) + (0,) * 8 + tuple(range(12)) + (0,) * 12
    assert Phase.FOUR.encode(SOLVED.apply_move(Move.parse("U2"))) != Phase.FOUR.encode(SOLVED)

@pytest.mark.parametrize("done, later", [
    (Phase.ONE, Phase.TWO), (Phase.ONE, Phase.THREE), (Phase.ONE, Phase.FOUR),
    (Phase.TWO, Phase.THREE), (Phase.TWO, Phase.FOUR),
])
def test_later_moves_keep_earlier_goals(done, later):
    goal = done.encode(SOLVED)
    for move in later.permitted_moves:
        assert done.encode(SOLVED.apply_move(move)) == goal

@pytest.mark.parametrize("phase, same_id_moves", [
    (Phase.ONE, "R U L"),
    (Phase.TWO, "U D2"),
    (Phase.THREE, "U2 D2"),
])
def test_equal_ids_stay_equal_after_a_move(phase, same_id_moves):
    a = SOLVED
    b = SOLVED.apply_moves(parse_moves(same_id_moves))
    assert a != b
    assert phase.encode(a) == phase.encode(b)
    for move in phase.permitted_moves:
        assert phase.encode(a.apply_move(move)) == phase.encode(b.apply_move(move))
