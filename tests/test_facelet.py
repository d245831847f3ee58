import pytest

from pycubie.cubie import CubieCube
from pycubie.enums import Color
from pycubie.error import InvalidFaceletException
from pycubie.facelet import FaceletCube
from pycubie.moves import ALL_MOVES, Move, parse_moves

SOLVED_STRING = "WWWWWWWWWRRRRRRRRRGGGGGGGGGYYYYYYYYYOOOOOOOOOBBBBBBBBB"

@pytest.mark.parametrize("move, expected", [
    ("U", "WWWWWWWWWBBBRRRRRRRRRGGGGGGYYYYYYYYYGGGOOOOOOOOOBBBBBB"),
    ("U'", "WWWWWWWWWGGGRRRRRROOOGGGGGGYYYYYYYYYBBBOOOOOORRRBBBBBB"),
    ("U2", "WWWWWWWWWOOORRRRRRBBBGGGGGGYYYYYYYYYRRROOOOOOGGGBBBBBB"),
    ("D", "WWWWWWWWWRRRRRRGGGGGGGGGOOOYYYYYYYYYOOOOOOBBBBBBBBBRRR"),
    ("D'", "WWWWWWWWWRRRRRRBBBGGGGGGRRRYYYYYYYYYOOOOOOGGGBBBBBBOOO"),
    ("D2", "WWWWWWWWWRRRRRROOOGGGGGGBBBYYYYYYYYYOOOOOORRRBBBBBBGGG"),
    ("L", "BWWBWWBWWRRRRRRRRRWGGWGGWGGGYYGYYGYYOOOOOOOOOBBYBBYBBY"),
    ("L'", "GWWGWWGWWRRRRRRRRRYGGYGGYGGBYYBYYBYYOOOOOOOOOBBWBBWBBW"),
    ("L2", "YWWYWWYWWRRRRRRRRRBGGBGGBGGWYYWYYWYYOOOOOOOOOBBGBBGBBG"),
    ("R", "WWGWWGWWGRRRRRRRRRGGYGGYGGYYYBYYBYYBOOOOOOOOOWBBWBBWBB"),
    ("R'", "WWBWWBWWBRRRRRRRRRGGWGGWGGWYYGYYGYYGOOOOOOOOOYBBYBBYBB"),
    ("R2", "WWYWWYWWYRRRRRRRRRGGBGGBGGBYYWYYWYYWOOOOOOOOOGBBGBBGBB"),
    ("F", "WWWWWWOOOWRRWRRWRRGGGGGGGGGRRRYYYYYYOOYOOYOOYBBBBBBBBB"),
    ("F'", "WWWWWWRRRYRRYRRYRRGGGGGGGGGOOOYYYYYYOOWOOWOOWBBBBBBBBB"),
    ("F2", "WWWWWWYYYORRORRORRGGGGGGGGGWWWYYYYYYOOROOROORBBBBBBBBB"),
    ("B", "RRRWWWWWWRRYRRYRRYGGGGGGGGGYYYYYYOOOWOOWOOWOOBBBBBBBBB"),
    ("B'", "OOOWWWWWWRRWRRWRRWGGGGGGGGGYYYYYYRRRYOOYOOYOOBBBBBBBBB"),
    ("B2", "YYYWWWWWWRRORRORROGGGGGGGGGYYYYYYWWWROOROOROOBBBBBBBBB"),
])
def test_single_move_from_solved(move, expected):
    assert FaceletCube().apply_move(Move.parse(move)).to_string() == expected

def test_solved_string():
    assert FaceletCube().to_string() == SOLVED_STRING
    assert FaceletCube.from_string(SOLVED_STRING).is_solved()
    assert FaceletCube().to_cubie() == CubieCube.solved()

def test_string_round_trip():
    cube_string = "OGOYWWWWYRBYRRRORRORBYGGWOBBWYBYYRWWWBBGOOGORGOGBBYGGY"
    assert FaceletCube.from_string(cube_string).to_string() == cube_string

def test_matrix_holds_colors():
    matrix = FaceletCube().get_matrix()
    assert matrix.shape == (6, 3, 3)
    assert matrix[0][1, 1] == Color.WHITE
    assert matrix[5][2, 2] == Color.BLUE

def test_cubie_round_trip():
    cube = CubieCube.random(60)
    assert FaceletCube.from_cubie(cube).to_cubie() == cube

@pytest.mark.parametrize("move", ALL_MOVES, ids=str)
def test_facelet_and_cubie_moves_agree(move):
    cube = CubieCube.solved().apply_moves(parse_moves("L F2 U' R B D2"))
    facelets = FaceletCube.from_cubie(cube)
    assert facelets.apply_move(move).to_cubie() == cube.apply_move(move)

@pytest.mark.parametrize("cube_string", [
    "",
    SOLVED_STRING[:-1],
    SOLVED_STRING + "W",
    "X" + SOLVED_STRING[1:],
    "R" + SOLVED_STRING[1:],
])
def test_from_string_rejects_malformed_strings(cube_string):
    with pytest.raises(InvalidFaceletException):
        FaceletCube.from_string(cube_string)

def test_to_cubie_rejects_impossible_stickers():
    # swapping two stickers of one corner mirrors it
    stickers = list(SOLVED_STRING)
    stickers[8], stickers[9] = stickers[9], stickers[8]
    with pytest.raises(InvalidFaceletException):
        FaceletCube.from_string("".join(stickers)).to_cubie()

def test_to_cubie_rejects_swapped_faces():
    # R and O faces exchanged: right sits at index 1 and left at index 4
    faces = [SOLVED_STRING[i:i + 9] for i in range(0, 54, 9)]
    faces[1], faces[4] = faces[4], faces[1]
    with pytest.raises(InvalidFaceletException):
        FaceletCube.from_string("".join(faces)).to_cubie()

def test_str_renders_every_sticker():
    rendered = str(FaceletCube())
    assert rendered.count('  ') >= 54
