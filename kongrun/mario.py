"""Mario: keyboard-driven movement with walking, jumping, climbing and falling."""

from kongrun import terminal
from kongrun.constants import HAMMER_SYMBOL, MARIO_SYMBOL, MAX_Y, Direction
from kongrun.point import Point

MOVEMENT_KEYS = "waxds"  # indexed by Direction
START_LIFE = 3
MAX_FALL_FLOORS = 5
STRIKE_FLASHES = 3
STRIKE_SLEEP_MS = 200

_KEY_UP = MOVEMENT_KEYS[Direction.UP]
_KEY_LEFT = MOVEMENT_KEYS[Direction.LEFT]
_KEY_DOWN = MOVEMENT_KEYS[Direction.DOWN]
_KEY_RIGHT = MOVEMENT_KEYS[Direction.RIGHT]
_KEY_STAY = MOVEMENT_KEYS[Direction.STAY]


class Mario:
    """The player character on a board."""

    def __init__(self, board=None, start=None):
        start = start if start is not None else Point()
        self.board = board
        self.position = Point(start.x, start.y, MARIO_SYMBOL)
        self.lives = START_LIFE
        self.prev_dx = 0
        self.falling = False
        self.jumping = False
        self.climbing = False
        self.holding_hammer = False
        self.jump_step = 0
        self.fall_count = 0

    def is_valid_key(self, key):
        """True for a movement key or the hammer key, in either case."""
        lowered = key.lower()
        return lowered in MOVEMENT_KEYS or lowered == HAMMER_SYMBOL

    def is_valid_movement_key(self, key):
        """True if the key may change Mario's direction in his current state."""
        p = self.position
        board = self.board
        on_plain_floor = board.is_floor_below(p) and not board.is_ladder_two_below(p)

        if on_plain_floor and p.y < MAX_Y - 2 and key == _KEY_DOWN:
            return False
        if key == _KEY_UP and p.next_y() <= 0:
            return False
        if key == _KEY_DOWN and p.next_y() >= MAX_Y - 1:
            return False
        if self.climbing:
            if key in (_KEY_RIGHT, _KEY_LEFT):
                return False
            if board.is_on_floor(p) and key == _KEY_STAY:
                return False
        if (self.jumping or self.falling) and key not in (_KEY_RIGHT, _KEY_LEFT):
            return False
        if (p.y >= MAX_Y - 2 or on_plain_floor) and key == _KEY_DOWN:
            return False
        return True

    def key_pressed(self, key):
        """Change direction according to a movement key, if the move is allowed."""
        index = MOVEMENT_KEYS.find(key.lower())
        if index < 0 or not key or not self.is_valid_movement_key(key):
            return
        self.prev_dx = self.position.dx
        self.position.set_direction(Direction(index))

    def check_next_step_valid(self):
        """True if the next step stays in bounds; otherwise cancel the offending motion."""
        p = self.position
        nxt = Point(p.next_x(), p.next_y())
        in_x = self.board.in_x_bounds(nxt)
        in_y = self.board.in_y_bounds(nxt)
        if in_x and in_y:
            return True
        if in_x:
            p.dy = 0
        elif in_y:
            p.dx = 0
        else:
            p.set_velocity(0, 0)
        self.climbing = False
        return False

    def move(self):
        """Advance Mario one game loop; return True if he died from a fall."""
        p = self.position
        board = self.board
        died = False
        if self.check_next_step_valid():
            if p.dy == -1:
                if (self.climbing or board.is_on_ladder(p)) and not self.jumping:
                    self.climb_up()
                else:
                    self.jump()
            else:
                if p.dy == 1 and not self.falling:
                    self.climb_down()
                if (not board.is_floor_below(p) and not self.climbing) or self.falling:
                    died = self.fall()
        elif self.falling:
            died = self.fall()
        elif self.jumping:
            self.falling = True
            self.jumping = False
            self.jump_step = 0
            died = self.fall()
        if not died:
            p.move()
        return died

    def climb_up(self):
        """Start or finish an upward climb."""
        p = self.position
        board = self.board
        if board.is_floor_below(p) and board.is_on_ladder(p):
            self.climbing = True
        if board.is_on_floor(p) and board.is_ladder_below(p):
            p.y -= 1
            p.set_direction(Direction.STAY)
            self.climbing = False

    def climb_down(self):
        """Start or finish a downward climb."""
        p = self.position
        board = self.board
        if board.is_floor_below(p) and board.is_ladder_two_below(p):
            self.climbing = True
        if board.is_on_ladder(p) and board.is_floor_below(p):
            p.set_direction(Direction.STAY)
            self.climbing = False

    def jump(self):
        """Take the next step of a two-step jump, then hand over to falling."""
        p = self.position
        board = self.board
        if self.jump_step == 0:
            p.set_velocity(self.prev_dx, -1)
            if board.is_next_move_floor(p):
                p.dy = 0
            else:
                self.jumping = True
                self.jump_step += 1
        elif self.jump_step == 1:
            if board.is_next_move_floor(p):
                self.fall()
            else:
                self.jump_step += 1
        elif self.jump_step == 2:
            self.fall()

    def fall(self):
        """Take one falling step; return True if landing ends a fatally long fall."""
        p = self.position
        if p.dy != 1:
            if self.jumping:
                self.jumping = False
                self.jump_step = 0
            self.falling = True
            p.set_velocity(p.dx, 1)
        if self.board.is_next_move_floor(p):
            self.falling = False
            p.dy = 0
            if self.fall_count >= MAX_FALL_FLOORS:
                return True
            self.fall_count = 0
        else:
            self.fall_count += 1
        return False

    def reset(self):
        """Return every movement state to its initial value."""
        self.climbing = False
        self.falling = False
        self.jumping = False
        self.holding_hammer = False
        self.fall_count = 0
        self.prev_dx = 0
        self.jump_step = 0
        self.position.set_direction(Direction.STAY)

    def handle_strike(self):
        """Lose a life and reset state after being hit."""
        self.position.set_direction(Direction.STAY)
        self.lives -= 1
        self.reset()
        if not terminal.is_silent():
            self.strike_animation()

    def strike_animation(self):
        """Blink Mario a few times, then restore the background."""
        for _ in range(STRIKE_FLASHES):
            self.position.erase()
            terminal.sleep_ms(STRIKE_SLEEP_MS)
            self.position.draw()
            terminal.sleep_ms(STRIKE_SLEEP_MS)
        self.draw_background()

    def draw(self):
        terminal.gotoxy(self.position.x, self.position.y)
        terminal.write(MARIO_SYMBOL)

    def draw_background(self):
        """Restore the board character under Mario."""
        prev = self.board.char_at(self.position.x, self.position.y)
        terminal.gotoxy(self.position.x, self.position.y)
        terminal.write(prev)

    def hold_hammer(self):
        self.holding_hammer = True

    def prev_position(self):
        p = self.position
        return Point(p.x - p.dx, p.y - p.dy)

    def next_position(self):
        p = self.position
        return Point(p.x + p.dx, p.y + p.dy)

    def reset_lives(self):
        self.lives = START_LIFE

    def set_start_position(self, point):
        self.position.set_position(point.x, point.y)