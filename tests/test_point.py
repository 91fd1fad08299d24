import pytest

from kongrun.constants import Direction
from kongrun.point import Point


def test_equality_ignores_symbol_and_direction():
    a = Point(1, 2, "a", 1, 0)
    b = Point(1, 2, "b", 0, -1)
    assert a == b
    assert not (a != b)
    assert Point(1, 2) != Point(2, 1)


def test_equal_points_hash_equal():
    assert hash(Point(4, 5, "q")) == hash(Point(4, 5))


@pytest.mark.parametrize(
    "other, expected",
    [
        (Point(2, -2), True),
        (Point(-2, 2), True),
        (Point(3, 0), False),
        (Point(0, -3), False),
        (Point(0, 0), True),
    ],
)
def test_within_blast(other, expected):
    assert Point(0, 0).within_blast(other) is expected
    assert other.within_blast(Point(0, 0)) is expected


def test_move_follows_direction():
    p = Point(10, 10)
    p.set_direction(Direction.LEFT)
    p.move()
    p.move()
    assert (p.x, p.y) == (8, 10)


def test_next_move_does_not_change_position():
    p = Point(5, 6)
    p.set_velocity(1, -1)
    assert (p.next_x(), p.next_y()) == (6, 5)
    assert (p.x, p.y) == (5, 6)


def test_set_direction_matches_vector():
    p = Point()
    for direction in Direction:
        p.set_direction(direction)
        assert (p.dx, p.dy) == direction.vector()


def test_set_position():
    p = Point(1, 1, "@")
    p.set_position(7, 3)
    assert (p.x, p.y, p.symbol) == (7, 3, "@")


def test_draw_writes_symbol(capsys):
    Point(3, 4, "@").draw()
    out = capsys.readouterr().out
    assert out.endswith("@")


def test_erase_writes_blank(capsys):
    Point(3, 4, "@").erase()
    out = capsys.readouterr().out
    assert out.endswith(" ")
    assert "@" not in out