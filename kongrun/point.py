"""A position on the screen with a movement direction and a display symbol."""

from dataclasses import dataclass

from kongrun import terminal
from kongrun.constants import Direction

EXPLODE_RADIUS = 2


@dataclass(eq=False)
class Point:
    """A screen position; two points are equal when their positions match."""

    x: int = 0
    y: int = 0
    symbol: str = " "
    dx: int = 0
    dy: int = 0

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def within_blast(self, other):
        """Return True if other lies within the explosion radius of this point."""
        return abs(self.x - other.x) <= EXPLODE_RADIUS and abs(self.y - other.y) <= EXPLODE_RADIUS

    def _draw_char(self, ch):
        terminal.gotoxy(self.x, self.y)
        terminal.write(ch)

    def draw(self):
        """Draw the symbol at the current position."""
        self._draw_char(self.symbol)

    def erase(self):
        """Blank out the current position."""
        self._draw_char(" ")

    def move(self):
        """Advance one step in the current direction."""
        self.x += self.dx
        self.y += self.dy

    def next_x(self):
        """Column after one step."""
        return self.x + self.dx

    def next_y(self):
        """Row after one step."""
        return self.y + self.dy

    def set_position(self, x, y):
        self.x = x
        self.y = y

    def set_velocity(self, dx, dy):
        self.dx = dx
        self.dy = dy

    def set_direction(self, direction):
        self.dx, self.dy = Direction(direction).vector()