"""The heads-up display: lives, score, hammer, immortality, loops and hammer key state."""

from kongrun import terminal
from kongrun.constants import HAMMER_SYMBOL
from kongrun.point import Point

FIRST_COL_LENGTH = 11
SECOND_COL_LENGTH = 8
SEPARATOR = "|"
SEPARATOR_OFFSET = 11
SECOND_COL_OFFSET = SEPARATOR_OFFSET + 1
HUD_HEIGHT = 3

LIFE_SYMBOL = "<3"
NO_HAMMER_PROMPT = "No Hammer"
HAMMER_PROMPT = "Hammer Time"
PLUS_PROMPT = "Immortal"


class HUD:
    """A two-column status display anchored at its top-left corner."""

    def __init__(self, top_left=None):
        top_left = top_left if top_left is not None else Point()
        x, y = top_left.x, top_left.y
        self.top_left = Point(x, y)
        self.life_pos = Point(x, y)
        self.score_pos = Point(x, y + 1)
        self.hammer_pos = Point(x, y + 2)
        self.plus_pos = Point(x + SECOND_COL_OFFSET, y)
        self.loops_pos = Point(x + SECOND_COL_OFFSET, y + 1)
        self.hammer_pressed_pos = Point(x + SECOND_COL_OFFSET, y + 2)

    @staticmethod
    def _write_at(pos, text):
        terminal.gotoxy(pos.x, pos.y)
        terminal.write(text)

    def clear_display(self, start, length):
        """Blank `length` cells starting at `start`."""
        if terminal.is_silent():
            return
        self._write_at(start, " " * length)

    def display_all(
        self,
        lives,
        score,
        holding_hammer,
        loops,
        hammer_pressed,
        plus_active,
        immortal_remaining=0,
    ):
        """Draw every part of the HUD."""
        if terminal.is_silent():
            return
        self.display_life(lives)
        self.display_score(score)
        self.display_hammer(holding_hammer)
        self.display_plus_state(plus_active, immortal_remaining)
        self.display_hammer_pressed(hammer_pressed)
        self.display_loops(loops)
        self.display_separators()

    def display_life(self, lives):
        if terminal.is_silent():
            return
        self.clear_display(self.life_pos, FIRST_COL_LENGTH)
        self._write_at(self.life_pos, " ".join([LIFE_SYMBOL] * max(lives, 0)))

    def display_score(self, score):
        if terminal.is_silent():
            return
        self.clear_display(self.score_pos, FIRST_COL_LENGTH)
        self._write_at(self.score_pos, f"Score: {score}")

    def display_hammer(self, holding_hammer):
        if terminal.is_silent():
            return
        self.clear_display(self.hammer_pos, FIRST_COL_LENGTH)
        self._write_at(self.hammer_pos, HAMMER_PROMPT if holding_hammer else NO_HAMMER_PROMPT)

    def display_hammer_pressed(self, pressed):
        if terminal.is_silent():
            return
        self._write_at(self.hammer_pressed_pos, HAMMER_SYMBOL if pressed else " ")

    def display_loops(self, loops):
        if terminal.is_silent():
            return
        self.clear_display(self.loops_pos, SECOND_COL_LENGTH)
        self._write_at(self.loops_pos, str(loops))

    def display_after_strike(self, lives):
        """Update lives and drop the hammer display after Mario is hit."""
        if terminal.is_silent():
            return
        self.display_life(lives)
        self.display_hammer(False)

    def display_plus_state(self, plus_active, immortal_remaining=0):
        """Show immortality; the last loops blink as a countdown."""
        if terminal.is_silent():
            return
        self.clear_display(self.plus_pos, SECOND_COL_LENGTH)
        if plus_active and immortal_remaining != 0:
            if immortal_remaining < 10 and immortal_remaining % 2 != 0:
                self._write_at(self.plus_pos, f"   {immortal_remaining}")
            else:
                self._write_at(self.plus_pos, PLUS_PROMPT)

    def display_separators(self):
        """Draw the column separator down the height of the HUD."""
        if terminal.is_silent():
            return
        for row in range(HUD_HEIGHT):
            self._write_at(
                Point(self.top_left.x + SEPARATOR_OFFSET, self.top_left.y + row), SEPARATOR
            )