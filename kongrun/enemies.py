"""The collection of active enemies in a level: ghosts from the screen file and Kong's barrels."""

from itertools import combinations

from kongrun import terminal
from kongrun.barrel import Barrel
from kongrun.constants import GHOST_SYMBOL, SPECIAL_GHOST_SYMBOL
from kongrun.ghost import Ghost, SpecialGhost
from kongrun.point import Point

MAX_BARRELS_ACTIVE = 15

_GHOST_TYPES = {GHOST_SYMBOL: Ghost, SPECIAL_GHOST_SYMBOL: SpecialGhost}


class EnemyGroup:
    """All enemies of a level, with collision and hammer handling against Mario."""

    def __init__(self, board=None, start_kong=None, start_ghosts=()):
        self.board = board
        self.start_kong = start_kong if start_kong is not None else Point()
        self.start_ghosts = list(start_ghosts)
        self.enemies = []
        self.barrel_count = 0

    def reset(self):
        """Drop every enemy and place the ghosts back at their start positions."""
        self.barrel_count = 0
        if not terminal.is_silent():
            for enemy in self.enemies:
                enemy.draw_background()
        self.enemies = []
        for start in self.start_ghosts:
            ghost_type = _GHOST_TYPES.get(start.symbol)
            if ghost_type is None:
                continue
            ghost = ghost_type(start, self.board)
            ghost.set_random_horizontal_direction()
            self.enemies.append(ghost)

    def add_barrel(self):
        """Throw a new barrel from Kong unless too many are already rolling."""
        if self.barrel_count >= MAX_BARRELS_ACTIVE:
            return
        barrel = Barrel(self.board, self.start_kong)
        if barrel.initialize():
            self.enemies.append(barrel)
            self.barrel_count += 1

    def _active(self):
        return [enemy for enemy in self.enemies if enemy.active]

    def draw(self):
        """Draw every active enemy."""
        for enemy in self._active():
            enemy.draw()

    def draw_background(self):
        """Restore the board under every active enemy."""
        for enemy in self._active():
            enemy.draw_background()

    def move(self):
        """Turn ghosts about to collide, then move every active enemy one step."""
        self.flip_colliding_ghosts()
        for enemy in self.enemies:
            if enemy.active:
                enemy.move()

    def collides_with(self, point):
        """True if an active enemy stands on the given point."""
        return any(enemy.position == point for enemy in self._active())

    def swapped_with(self, point, prev_point):
        """True if Mario and an active enemy just passed through each other."""
        return any(
            enemy.prev_position() == point and prev_point == enemy.position
            for enemy in self._active()
        )

    def strike_with_hammer(self, mario_point):
        """Kill active enemies one or two cells ahead of Mario; return how many died."""
        killed = 0
        reach = {mario_point.x + mario_point.dx, mario_point.x + 2 * mario_point.dx}
        for enemy in self._active():
            if enemy.position.x in reach and enemy.position.y == mario_point.y:
                killed += 1
                enemy.active = False
                if not terminal.is_silent():
                    enemy.draw_hammer_kill()
        return killed

    def remove_inactive(self):
        """Discard inactive enemies, restoring the board where they stood."""
        kept = []
        for enemy in reversed(self.enemies):
            if enemy.active:
                kept.append(enemy)
                continue
            if isinstance(enemy, Barrel):
                self.barrel_count -= 1
            if not terminal.is_silent():
                enemy.draw_background()
        kept.reverse()
        self.enemies = kept

    def mario_in_explosion(self, mario_pos):
        """Detonate exploded barrels; return True if Mario is inside any blast."""
        died = False
        for enemy in self.enemies:
            if isinstance(enemy, Barrel) and enemy.exploded:
                if not terminal.is_silent():
                    enemy.explode_animation(mario_pos)
                enemy.active = False
                if enemy.position.within_blast(mario_pos):
                    died = True
        return died

    def flip_colliding_ghosts(self):
        """Reverse both ghosts of every pair that would meet or swap places next step."""
        for first, second in combinations(self.enemies, 2):
            if not (isinstance(first, Ghost) and first.active):
                continue
            if not (isinstance(second, Ghost) and second.active):
                continue
            first_next = first.next_position()
            second_next = second.next_position()
            meet = first_next == second_next
            swap = first_next == second.position and second_next == first.position
            if meet or swap:
                first.flip_direction()
                second.flip_direction()