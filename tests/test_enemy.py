import pytest

from kongrun.board import Board
from kongrun.constants import MAX_X, MAX_Y
from kongrun.enemy import Enemy
from kongrun.point import Point


class _Walker(Enemy):
    def move(self):
        self.position.move()


def _board_with_floor(y):
    board = Board()
    for x in range(MAX_X):
        board.set_char(x, y, "=")
    return board


def test_enemy_is_abstract():
    with pytest.raises(TypeError):
        Enemy(Point(1, 1), Board())


def test_new_enemy_is_active_and_copies_start():
    start = Point(5, 6, "x")
    enemy = _Walker(start, Board())
    enemy.move()
    assert enemy.active is True
    assert (start.x, start.y) == (5, 6)
    assert enemy.position.symbol == "x"


def test_next_and_prev_positions():
    enemy = _Walker(Point(10, 10, "x"), Board())
    enemy.position.set_velocity(1, 0)
    assert enemy.next_position() == Point(11, 10)
    assert enemy.prev_position() == Point(9, 10)


def test_next_move_out_of_right_edge():
    enemy = _Walker(Point(MAX_X - 1, 5, "x"), Board())
    enemy.position.set_velocity(1, 0)
    assert enemy.is_next_move_in_bounds() is False


def test_next_move_out_of_left_edge():
    enemy = _Walker(Point(0, 5, "x"), Board())
    enemy.position.set_velocity(-1, 0)
    assert enemy.is_next_move_in_bounds() is False


def test_next_move_below_last_row_counts_as_in_bounds():
    enemy = _Walker(Point(10, MAX_Y - 1, "x"), Board())
    enemy.position.set_velocity(0, 1)
    assert enemy.is_next_move_in_bounds() is True


def test_step_into_floor_is_invalid():
    board = Board()
    board.set_char(11, 5, "=")
    enemy = _Walker(Point(10, 5, "x"), board)
    enemy.position.set_velocity(1, 0)
    assert enemy.is_next_step_valid() is False
    enemy.position.set_velocity(-1, 0)
    assert enemy.is_next_step_valid() is True


def test_draw_writes_symbol(capsys):
    enemy = _Walker(Point(3, 4, "x"), Board())
    enemy.draw()
    assert capsys.readouterr().out.endswith("x")


def test_draw_background_writes_board_char(capsys):
    board = _board_with_floor(4)
    enemy = _Walker(Point(3, 4, "x"), board)
    enemy.draw_background()
    assert capsys.readouterr().out.endswith("=")


def test_hammer_kill_flashes_star_then_restores(capsys):
    board = Board()
    board.set_char(3, 4, "H")
    enemy = _Walker(Point(3, 4, "x"), board)
    enemy.draw_hammer_kill()
    out = capsys.readouterr().out
    assert "*" in out
    assert out.endswith("H")