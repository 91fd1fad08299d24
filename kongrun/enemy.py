"""Common behaviour of everything that moves on its own: barrels and ghosts."""

from abc import ABC, abstractmethod
from dataclasses import replace

from kongrun import terminal
from kongrun.constants import MAX_Y
from kongrun.point import Point

HAMMER_KILL_SLEEP_MS = 70


class Enemy(ABC):
    """An enemy with a position on a board and an active flag."""

    def __init__(self, position=None, board=None):
        self.position = replace(position) if position is not None else Point()
        self.board = board
        self.active = True

    @abstractmethod
    def move(self):
        """Advance the enemy by one game loop."""

    def draw(self):
        """Draw the enemy's symbol at its position."""
        terminal.gotoxy(self.position.x, self.position.y)
        terminal.write(self.position.symbol)

    def draw_background(self):
        """Restore the board character under the enemy."""
        prev = self.board.char_at(self.position.x, self.position.y)
        terminal.gotoxy(self.position.x, self.position.y)
        terminal.write(prev)

    def draw_hammer_kill(self):
        """Flash a star where the enemy was struck, then restore the background."""
        Point(self.position.x, self.position.y, "*").draw()
        terminal.sleep_ms(HAMMER_KILL_SLEEP_MS)
        self.draw_background()

    def is_next_move_in_bounds(self):
        """True if the next step stays on the screen (the row below the last counts)."""
        p = self.position
        nxt = Point(p.next_x(), p.next_y())
        return self.board.in_x_bounds(nxt) and (
            self.board.in_y_bounds(nxt) or p.next_y() == MAX_Y
        )

    def is_next_step_valid(self):
        """True if the next step is in bounds and does not walk into a floor tile."""
        p = self.position
        return self.is_next_move_in_bounds() and not self.board.is_on_floor(
            Point(p.next_x(), p.y)
        )

    def next_position(self):
        p = self.position
        return Point(p.x + p.dx, p.y + p.dy)

    def prev_position(self):
        p = self.position
        return Point(p.x - p.dx, p.y - p.dy)