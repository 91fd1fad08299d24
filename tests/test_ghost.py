from kongrun import terminal
from kongrun.board import Board
from kongrun.constants import MAX_X
from kongrun.ghost import Ghost, SpecialGhost
from kongrun.point import Point


def _floor(board, y, start=0, end=MAX_X - 1):
    for x in range(start, end + 1):
        board.set_char(x, y, "=")
    return board


def test_flip_direction_negates_dx_only():
    ghost = Ghost(Point(5, 5, "x"), Board())
    ghost.position.set_velocity(1, -1)
    ghost.flip_direction()
    assert (ghost.position.dx, ghost.position.dy) == (-1, -1)


def test_random_horizontal_direction():
    ghost = Ghost(Point(5, 5, "x"), Board())
    seen = set()
    for seed in range(30):
        terminal.seed_random(seed)
        ghost.set_random_horizontal_direction()
        seen.add((ghost.position.dx, ghost.position.dy))
    assert seen == {(-1, 0), (1, 0)}


def test_direction_change_is_rare():
    terminal.seed_random(1)
    ghost = Ghost(Point(5, 5, "x"), Board())
    hits = sum(ghost.wants_direction_change() for _ in range(4000))
    assert 40 < hits < 480


def test_ghost_walks_on_floor():
    terminal.seed_random(3)
    board = _floor(Board(), 10)
    ghost = Ghost(Point(40, 9, "x"), board)
    ghost.position.set_velocity(1, 0)
    for _ in range(20):
        before = ghost.position.x
        ghost.move()
        assert ghost.position.y == 9
        assert abs(ghost.position.x - before) == 1


def test_ghost_turns_at_screen_edge():
    board = _floor(Board(), 10)
    ghost = Ghost(Point(MAX_X - 1, 9, "x"), board)
    ghost.position.set_velocity(1, 0)
    ghost.move()
    assert ghost.position.dx == -1
    assert ghost.position.x == MAX_X - 2


def test_ghost_turns_at_floor_end():
    board = _floor(Board(), 10, 30, 50)
    ghost = Ghost(Point(50, 9, "x"), board)
    ghost.position.set_velocity(1, 0)
    ghost.move()
    assert ghost.position.dx == -1
    assert ghost.position.x == 49


def test_ghost_on_single_tile_gets_stuck():
    board = _floor(Board(), 10, 40, 40)
    ghost = Ghost(Point(40, 9, "x"), board)
    ghost.position.set_velocity(1, 0)
    ghost.move()
    ghost.move()
    assert ghost.stuck is True
    assert (ghost.position.x, ghost.position.y) == (40, 9)
    assert (ghost.position.dx, ghost.position.dy) == (0, 0)


def test_special_ghost_can_start_climb_up():
    board = _floor(Board(), 10)
    board.set_char(40, 9, "H")
    assert SpecialGhost(Point(40, 9, "X"), board).can_start_climb_up() is True
    assert SpecialGhost(Point(41, 9, "X"), board).can_start_climb_up() is False


def test_special_ghost_cannot_climb_up_from_top_row():
    board = _floor(Board(), 1)
    board.set_char(40, 0, "H")
    assert SpecialGhost(Point(40, 0, "X"), board).can_start_climb_up() is False


def test_special_ghost_can_start_climb_down():
    board = _floor(Board(), 10)
    board.set_char(40, 11, "H")
    assert SpecialGhost(Point(40, 9, "X"), board).can_start_climb_down() is True
    assert SpecialGhost(Point(41, 9, "X"), board).can_start_climb_down() is False


def test_climb_up_finishes_on_top_floor():
    board = Board()
    board.set_char(40, 4, "=")
    board.set_char(40, 5, "H")
    ghost = SpecialGhost(Point(40, 4, "X"), board)
    ghost.climbing = True
    ghost.position.set_velocity(0, -1)
    ghost.climb_up()
    assert ghost.position.y == 3
    assert (ghost.position.dx, ghost.position.dy) == (0, 0)
    assert ghost.climbing is False


def test_climb_down_finishes_on_bottom_floor():
    board = _floor(Board(), 10)
    board.set_char(40, 9, "H")
    ghost = SpecialGhost(Point(40, 9, "X"), board)
    ghost.climbing = True
    ghost.position.set_velocity(0, 1)
    ghost.climb_down()
    assert (ghost.position.dx, ghost.position.dy) == (0, 0)
    assert ghost.climbing is False


def test_wants_to_climb_frequency():
    terminal.seed_random(2)
    ghost = SpecialGhost(Point(5, 5, "X"), Board())
    hits = sum(ghost.wants_to_climb() for _ in range(4000))
    assert 320 < hits < 1000


def test_climbing_ghost_moves_up_ladder():
    terminal.seed_random(4)
    board = _floor(Board(), 10)
    board.set_char(40, 4, "=")
    for y in range(5, 10):
        board.set_char(40, y, "H")
    ghost = SpecialGhost(Point(40, 8, "X"), board)
    ghost.climbing = True
    ghost.position.set_velocity(0, -1)
    ghost.move()
    assert (ghost.position.x, ghost.position.y) == (40, 7)
    assert ghost.climbing is True


def test_special_ghost_without_ladders_stays_on_row():
    terminal.seed_random(5)
    board = _floor(Board(), 10)
    ghost = SpecialGhost(Point(40, 9, "X"), board)
    ghost.position.set_velocity(-1, 0)
    for _ in range(15):
        before = ghost.position.x
        ghost.move()
        assert ghost.position.y == 9
        assert abs(ghost.position.x - before) == 1
    assert ghost.climbing is False