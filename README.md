# kongrun

The pieces of a console platform game in which Mario climbs ladders, jumps
over rolling barrels, dodges ghosts and picks up a hammer on his way to
Pauline. The package loads level screens, moves Mario and the enemies one
game loop at a time, draws a status display, and reads and writes the step
and result files of a recorded session.

## Installing

```
pip install .
```

## What is in the package

| Module               | Contents |
|----------------------|----------|
| `kongrun.constants`  | screen size (`MAX_X`, `MAX_Y`), object symbols and the `Direction` enum |
| `kongrun.terminal`   | cursor movement, key polling, silent mode, seeded random numbers |
| `kongrun.point`      | `Point`: a position with a direction and a symbol |
| `kongrun.board`      | `Board`: loading a level screen and floor, ladder and bounds queries |
| `kongrun.mario`      | `Mario`: walking, jumping, climbing, falling, lives and the hammer |
| `kongrun.enemy`      | `Enemy`: the base class of everything that moves on its own |
| `kongrun.barrel`     | `Barrel`: rolls along floors, falls, explodes after a long fall |
| `kongrun.ghost`      | `Ghost` and the ladder-climbing `SpecialGhost` |
| `kongrun.enemies`    | `EnemyGroup`: all enemies of a level, collisions and hammer strikes |
| `kongrun.hud`        | `HUD`: lives, score, hammer, immortality countdown and loop counter |
| `kongrun.records`    | `Steps`, `Results` and `ResultState` for recorded sessions |

## Level files

A level is a text grid of at most 80 columns and 25 rows; longer lines are
cut and missing rows are blank. `Board.load` recognises:

| Symbol      | Meaning |
|-------------|---------|
| `@`         | Mario's start (`Board.start_mario`) |
| `$`         | Pauline (`Board.start_pauline`); must stand on a floor |
| `&`         | Donkey Kong, where barrels are thrown from (`Board.start_kong`) |
| `p` or `P`  | the hammer (`Board.start_hammer`) |
| `x`         | a ghost; must stand on a floor |
| `X`         | a climbing ghost; must stand on a floor |
| `+`         | immortality bonus (`Board.start_plus`, `(-1, -1)` when absent) |
| `L`         | top-left corner of the status display (`Board.start_hud`) |
| `=` `<` `>` | floors; `<` and `>` roll barrels left or right |
| `H`         | ladder |
| `Q`         | boundary, shown as blank |

Every other character is blank. The bottom row counts as ground. `load`
returns `False` when the file cannot be opened, when Mario, Pauline, Kong,
the hammer or the status corner is missing, or when Pauline or a ghost has no
floor below.

## Keys

`Mario.key_pressed` takes `w` (up / jump), `a` (left), `x` (down), `d`
(right) and `s` (stay); `Mario.is_valid_key` also accepts `p`, the hammer key.

## Example

```python
from kongrun import terminal
from kongrun.board import Board
from kongrun.enemies import EnemyGroup
from kongrun.mario import Mario

terminal.set_silent_mode()      # no drawing
terminal.seed_random(42)

board = Board()
if board.load("dkong_01.screen"):
    mario = Mario(board, board.start_mario)
    enemies = EnemyGroup(board, board.start_kong, board.start_ghosts)
    enemies.reset()
    enemies.add_barrel()

    mario.key_pressed("d")
    died_by_fall = mario.move()
    enemies.move()
    hit = enemies.collides_with(mario.position)
```

## Session records

`Steps.save` writes the random seed, the number of steps, then one
`<iteration> <keys>` line per step. `Results.save` writes the number of
events, one `<iteration> <state>` line per event (`0` strike, `1` finished),
then the score. `Steps.load` and `Results.load` read these files back; a
missing file gives an empty record.

## What it does not do

The package has no command to start, and no game loop: it does not run a
level from start to finish, show menus, pause or level-completed screens,
compute level scores, or record and replay whole sessions on its own. Those
have to be written on top of the classes above.