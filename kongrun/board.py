"""The level grid: loading screen files and answering floor, ladder and bounds queries."""

from kongrun import terminal
from kongrun.constants import (
    GHOST_SYMBOL,
    HAMMER_SYMBOL,
    MARIO_SYMBOL,
    MAX_X,
    MAX_Y,
    PLUS_SYMBOL,
    SPECIAL_GHOST_SYMBOL,
)
from kongrun.point import Point

FLOOR_NORMAL = "="
FLOOR_LEFT = "<"
FLOOR_RIGHT = ">"
LADDER = "H"
KONG_SYMBOL = "&"
PAULINE_SYMBOL = "$"
HUD_EDGE_SYMBOL = "L"
BOUNDARY_SYMBOL = "Q"

# Symbols whose first occurrence records a start position and is then blanked.
_BLANK_FIRST = {MARIO_SYMBOL: "start_mario", HUD_EDGE_SYMBOL: "start_hud"}
# Symbols whose first occurrence records a start position and stays on the board.
_KEEP_FIRST = {
    KONG_SYMBOL: ("start_kong", " "),
    PAULINE_SYMBOL: ("start_pauline", " "),
    PLUS_SYMBOL: ("start_plus", PLUS_SYMBOL),
    HAMMER_SYMBOL: ("start_hammer", HAMMER_SYMBOL),
    "P": ("start_hammer", HAMMER_SYMBOL),
}
_REQUIRED = {"start_mario", "start_kong", "start_pauline", "start_hammer", "start_hud"}


def is_floor(ch):
    return ch in (FLOOR_NORMAL, FLOOR_RIGHT, FLOOR_LEFT)


def is_ladder(ch):
    return ch == LADDER


def _blank_row():
    return [" "] * MAX_X


class Board:
    """A MAX_X by MAX_Y character grid with the start positions read from a screen file."""

    def __init__(self):
        self._grid = [_blank_row() for _ in range(MAX_Y)]
        self.start_mario = Point()
        self.start_pauline = Point()
        self.start_kong = Point()
        self.start_hud = Point()
        self.start_hammer = Point()
        self.start_ghosts = []
        self.start_plus = Point(-1, -1)

    def load(self, filename):
        """Load a screen file; return True if it is a playable level."""
        self.start_plus = Point(-1, -1)
        self.start_ghosts = []
        try:
            with open(filename, encoding="latin-1") as fh:
                text = fh.read()
        except OSError:
            return False

        found = set()
        grid = []
        for y, line in enumerate(text.split("\n")[:MAX_Y]):
            line = line.split("\0", 1)[0][:MAX_X]
            row = [self._place(ch, x, y, found) for x, ch in enumerate(line)]
            row.extend(" " * (MAX_X - len(row)))
            grid.append(row)
        grid.extend(_blank_row() for _ in range(MAX_Y - len(grid)))
        self._grid = grid

        pauline_ok = self.is_floor_below(self.start_pauline)
        ghosts_ok = all(self.is_floor_below(g) for g in self.start_ghosts)
        return _REQUIRED <= found and pauline_ok and ghosts_ok

    def _place(self, ch, x, y, found):
        if ch in _BLANK_FIRST:
            attr = _BLANK_FIRST[ch]
            if attr not in found:
                setattr(self, attr, Point(x, y))
                found.add(attr)
            return " "
        if ch in _KEEP_FIRST:
            attr, symbol = _KEEP_FIRST[ch]
            if attr in found:
                return " "
            setattr(self, attr, Point(x, y, symbol))
            found.add(attr)
            return ch
        if ch in (GHOST_SYMBOL, SPECIAL_GHOST_SYMBOL):
            self.start_ghosts.append(Point(x, y, ch))
            return " "
        return ch if is_floor(ch) or is_ladder(ch) else " "

    def present(self):
        """Clear the console and draw the whole board."""
        if terminal.is_silent():
            return
        terminal.clear_screen()
        terminal.gotoxy(0, 0)
        terminal.write("\n".join("".join(row) for row in self._grid))

    def char_at(self, x, y):
        """Character at (x, y); cells outside the grid read as blank."""
        if 0 <= x < MAX_X and 0 <= y < MAX_Y:
            return self._grid[y][x]
        return " "

    def set_char(self, x, y, ch):
        self._grid[y][x] = ch

    def sign_floor_below(self, p):
        return self.char_at(p.x, p.y + 1)

    def is_on_floor(self, p):
        return is_floor(self.char_at(p.x, p.y))

    def is_floor_below(self, p):
        """True on a floor tile below, or on the bottom row which acts as ground."""
        return p.y + 1 == MAX_Y or is_floor(self.char_at(p.x, p.y + 1))

    def is_floor_above(self, p):
        return is_floor(self.char_at(p.x, p.y - 1))

    def is_next_move_floor(self, p):
        return p.next_y() == MAX_Y or is_floor(self.char_at(p.next_x(), p.next_y()))

    def is_next_move_floor_below(self, p):
        return p.y + 1 == MAX_Y or is_floor(self.char_at(p.next_x(), p.next_y() + 1))

    def is_on_ladder(self, p):
        return is_ladder(self.char_at(p.x, p.y))

    def is_ladder_below(self, p):
        return is_ladder(self.char_at(p.x, p.y + 1))

    def is_ladder_two_below(self, p):
        return p.y < MAX_Y - 2 and is_ladder(self.char_at(p.x, p.y + 2))

    def in_x_bounds(self, p):
        return 0 <= p.x <= MAX_X - 1

    def in_y_bounds(self, p):
        return 0 <= p.y < MAX_Y - 1 or (p.y == MAX_Y - 1 and not self.is_on_floor(p))

    def can_draw_explosion(self, p):
        return self.in_x_bounds(p) and self.in_y_bounds(p) and not self.is_on_floor(p)