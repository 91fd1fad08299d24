"""Ghosts that wander along floors, and special ghosts that also climb ladders."""

from kongrun import terminal
from kongrun.constants import Direction
from kongrun.enemy import Enemy

CHANGE_DIR_PERCENT = 5
CLIMB_PERCENT = 15


class Ghost(Enemy):
    """A ghost walking back and forth on a floor, turning randomly now and then."""

    def __init__(self, position=None, board=None):
        super().__init__(position, board)
        # Set when the ghost stands on a one-tile platform and cannot move.
        self.stuck = False

    def set_random_horizontal_direction(self):
        if terminal.random_number(0, 1) == 0:
            self.position.set_direction(Direction.LEFT)
        else:
            self.position.set_direction(Direction.RIGHT)

    def flip_direction(self):
        self.position.set_velocity(-self.position.dx, self.position.dy)

    def wants_direction_change(self):
        """Return True with a 5% chance."""
        return terminal.random_number(1, 100) <= CHANGE_DIR_PERCENT

    def move(self):
        if self.stuck:
            return
        board = self.board
        if not self.is_next_step_valid():
            self.flip_direction()
        elif not board.is_next_move_floor_below(self.position):
            self.flip_direction()
            if not board.is_next_move_floor_below(self.position):
                self.position.set_direction(Direction.STAY)
                self.stuck = True
        elif self.wants_direction_change():
            self.flip_direction()
        self.position.move()


class SpecialGhost(Ghost):
    """A ghost that may also climb up and down ladders."""

    def __init__(self, position=None, board=None):
        super().__init__(position, board)
        self.climbing = False

    def wants_to_climb(self):
        """Return True with a 15% chance."""
        return terminal.random_number(1, 100) <= CLIMB_PERCENT

    def can_start_climb_up(self):
        p = self.position
        return self.board.is_floor_below(p) and self.board.is_on_ladder(p) and p.y != 0

    def can_start_climb_down(self):
        p = self.position
        return self.board.is_floor_below(p) and self.board.is_ladder_two_below(p)

    def climb_up(self):
        """Finish an upward climb when the floor at the top is reached."""
        p = self.position
        if self.board.is_on_floor(p) and self.board.is_ladder_below(p):
            p.y -= 1
            p.set_direction(Direction.STAY)
            self.climbing = False

    def climb_down(self):
        """Finish a downward climb when the floor at the bottom is reached."""
        p = self.position
        if self.board.is_on_ladder(p) and self.board.is_floor_below(p):
            p.set_direction(Direction.STAY)
            self.climbing = False

    def move(self):
        p = self.position
        board = self.board
        if self.can_start_climb_up() and not self.climbing and self.wants_to_climb():
            self.climbing = True
            p.set_direction(Direction.UP)
            self.stuck = False
        elif self.can_start_climb_down() and not self.climbing and self.wants_to_climb():
            self.climbing = True
            p.set_direction(Direction.DOWN)
            p.y += 1
            self.stuck = False

        if self.stuck:
            return

        if p.dx == 0 and p.dy == 0:
            self.set_random_horizontal_direction()
        elif self.climbing:
            if p.dy == -1:
                self.climb_up()
            else:
                self.climb_down()
            if not self.is_next_move_in_bounds():
                self.flip_direction()

        if not self.is_next_step_valid() and not self.climbing:
            self.flip_direction()
        elif not board.is_next_move_floor_below(p) and not self.climbing:
            self.flip_direction()
            if not board.is_next_move_floor_below(p):
                self.stuck = True
                p.set_direction(Direction.STAY)
        elif self.wants_direction_change():
            self.flip_direction()

        p.move()