"""Barrels thrown by Kong: they roll along floors, fall, and explode after long falls."""

from kongrun import terminal
from kongrun.board import FLOOR_LEFT, FLOOR_NORMAL, FLOOR_RIGHT
from kongrun.constants import BARREL_SYMBOL, MAX_Y, Direction
from kongrun.enemy import Enemy
from kongrun.point import Point

FALL_FLOORS_TO_DIE = 8
EXPLODE_SLEEP_MS = 70
PATH_RIGHT = 1
PATH_LEFT = 2
PATH_DOWN = 3

_INNER_RING = [(dx, dy) for dx in range(-1, 2) for dy in range(-1, 2) if dx or dy]
_OUTER_RING = [
    (dx, dy) for dx in range(-2, 3) for dy in range(-2, 3) if abs(dx) == 2 or abs(dy) == 2
]


class Barrel(Enemy):
    """A rolling barrel that starts next to Kong."""

    def __init__(self, board=None, start=None):
        start = start if start is not None else Point()
        super().__init__(Point(start.x, start.y, BARREL_SYMBOL), board)
        self.falling = False
        self.exploded = False
        self.fall_count = 0
        self.prev_dx = 0

    def initialize(self):
        """Pick a random starting path; return False if the start spot is unusable."""
        board = self.board
        path = terminal.random_number(PATH_RIGHT, PATH_DOWN)
        if path == PATH_RIGHT:
            self.set_right_path()
        elif path == PATH_LEFT:
            self.set_left_path()
        else:
            self.set_down_path()
            if board.in_y_bounds(self.position) and board.is_floor_below(self.position):
                self.position.set_direction(Direction.LEFT)
        p = self.position
        return board.in_x_bounds(p) and board.in_y_bounds(p) and not board.is_on_floor(p)

    def set_right_path(self):
        self.position.set_position(self.position.x + 1, self.position.y)
        self.position.set_direction(Direction.RIGHT)

    def set_left_path(self):
        self.position.set_position(self.position.x - 1, self.position.y)
        self.position.set_direction(Direction.LEFT)

    def set_down_path(self):
        # Heading left keeps the barrel moving if it lands straight on a '=' floor.
        self.position.set_position(self.position.x, self.position.y + 2)
        self.position.set_direction(Direction.LEFT)

    def change_direction(self, prev_dx):
        """Set the rolling direction from the floor tile underneath."""
        p = self.position
        if p.next_y() == MAX_Y:
            p.set_velocity(prev_dx, 0)
            return
        sign = self.board.sign_floor_below(p)
        if sign == FLOOR_RIGHT:
            p.set_direction(Direction.RIGHT)
        elif sign == FLOOR_LEFT:
            p.set_direction(Direction.LEFT)
        elif sign == FLOOR_NORMAL:
            p.set_velocity(prev_dx, 0)

    def move(self):
        """Roll or fall one step; a barrel leaving the screen becomes inactive."""
        if not self.is_next_step_valid():
            self.active = False
            return
        if self.is_unsupported() or self.falling:
            self.fall()
        else:
            self.change_direction(self.position.dx)
        if not self.exploded:
            self.position.move()

    def is_unsupported(self):
        """True if there is no floor right below the barrel."""
        return not self.board.is_floor_below(self.position)

    def fall(self):
        """Advance the fall; landing after too long a drop sets the explosion flag."""
        p = self.position
        self.fall_count += 1
        if p.dy != 1:
            self.falling = True
            self.prev_dx = p.dx
            p.set_direction(Direction.DOWN)
        if self.board.is_floor_below(p):
            if self.fall_count >= FALL_FLOORS_TO_DIE:
                self.exploded = True
            else:
                self.falling = False
                self.fall_count = 0
                self.change_direction(self.prev_dx)

    def explode_animation(self, mario_pos):
        """Draw the explosion in three expanding stages around the barrel."""
        cx, cy = self.position.x, self.position.y
        center = Point(cx, cy, "*")
        if self.board.can_draw_explosion(center):
            center.draw()
        terminal.sleep_ms(EXPLODE_SLEEP_MS)
        if self.board.can_draw_explosion(center):
            center.erase()
        for ring in (_INNER_RING, _OUTER_RING):
            cells = [Point(cx + dx, cy + dy, "*") for dx, dy in ring]
            drawable = [
                c for c in cells if self.board.can_draw_explosion(c) and c != mario_pos
            ]
            for cell in drawable:
                cell.draw()
            terminal.sleep_ms(EXPLODE_SLEEP_MS)
            for cell in drawable:
                cell.symbol = self.board.char_at(cell.x, cell.y)
                cell.draw()