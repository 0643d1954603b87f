# solong

A small top-down puzzle game played on a grid read from a `.ber` map file.
Walk the player around, pick up every collectible, avoid the enemies and
step onto the exit once nothing is left to collect.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong path/to/level.ber
```

The command expects exactly one argument, and its name must end in `.ber`.
If the argument or the map is not valid, one line such as
`Error, invalid map` is printed and the command exits with status 1.

Textures are XPM files read from a `textures/` directory relative to the
current working directory. A texture that cannot be read is simply not
drawn; the grass texture is drawn under every tile.

Controls:

| Key             | Action       |
|-----------------|--------------|
| W / Up arrow    | move up      |
| A / Left arrow  | move left    |
| S / Down arrow  | move down    |
| D / Right arrow | move right   |
| Esc             | quit         |

Closing the window also ends the game. The game ends as well when the
player walks into an enemy, or steps onto the exit after taking every
collectible; stepping onto the exit earlier does nothing.

The move counter (`Movements:<n>`) is drawn near the top-left corner of the
window with pygame's default font. It counts only steps that moved the
player, and shows `MAX` once it reaches the largest signed 32-bit value.
The wall trees are animated, with a dog visiting every second cycle.

## Map format

A map is a rectangle of these characters, one row per line:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |
| `N`  | enemy        |

A valid map

* does not end with a newline after its last row,
* has rows of equal length (the last row sets the width),
* is fully enclosed by walls,
* uses no other characters (else `Error, invalid characteres`),
* holds exactly one `P`, exactly one `E` and at least one `C`,
* lets the player reach every collectible, and a cell next to the exit,
  without crossing walls, enemies or the exit itself.

Example:

```
1111111
1P0C0E1
1000N01
1111111
```

## Using it as a library

The pieces the game is built from can also be used on their own:

```python
from solong.gamemap import GameMap, load_map, validate_map
from solong.game import Direction, Game, GameOver
from solong.xpm import load_xpm
from solong.printf import format_printf

rows = load_map("level.ber")
start = validate_map(rows)          # (row, column) of the player

game = Game.from_map(GameMap.from_file("level.ber"))
try:
    game.move(Direction.RIGHT)
except GameOver as over:
    print(over.reason)              # "win", "caught" or "quit"

image = load_xpm("textures/Grass.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))
print(format_printf("%d moves, %x in hex", 42, 255))
```

Errors about arguments, files and maps derive from
`solong.errors.SoLongError`.

## Running the tests

```
pip install .[test]
pytest
```