# pagaf

pagaf is a small city map builder. You place residential, commercial, industrial, road and park tiles on a 50 × 50 grid. Wave function collapse rules decide which placements are allowed:

- residential and industrial tiles may not sit next to each other;
- two parks may not sit next to each other.

Each placement can be undone and redone. You play the game by typing commands.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Running

```
pagaf
```

The game reads one command per line from standard input. It prints the result of each command to standard output and prints problems as `error: ...` to standard error. It stops when you quit or when the input ends. The game starts in the `MAIN_MENU` state.

### Commands

| Command | Where | What it does |
|---|---|---|
| `state` | anywhere | prints the current state (`MAIN_MENU`, `LOAD_GAME`, `SETTINGS`, `IN_GAME`) |
| `click <label>` | anywhere | presses a button on the current screen (see below) |
| `volume <0..1>` | settings | sets the music volume |
| `brightness <0..1>` | settings | sets the brightness |
| `quality <low\|medium\|high>` | settings | sets the graphics quality |
| `tiles` | in game | lists the building panel and marks the selected tile with `*` |
| `select <tile>` | in game | selects a tile (`residential`, `commercial`, `industrial`, `road`, `park`); selecting the same tile again clears the selection |
| `place <x> <z>` | in game | places the selected tile at the cell nearest to the point (x, z), then clears the selection |
| `undo` / `redo` | in game | reverts or reapplies the latest placement |
| `tile <x> <y>` | anywhere | prints the tile type at a cell |
| `highlights` | in game | counts the free cells where the selected tile is still possible, split into valid and invalid spots |
| `move <keys> <seconds>` | in game | moves the camera as if the comma-separated keys (`left,right,up,down,a,d,w,s,q,e`) were held for that many seconds |

The buttons on each screen are:

- main menu: `Start Game`, `Settings`, `Quit`
- settings: `Back`
- load-game screen: `Load Game`, `New Game`, `Back`
- in game: `Pause` or `Resume`, `Settings`, `Main menu`, `Quit`

Example session:

```
click Start Game
click New Game
select residential
place 3 3
select industrial
place 3 4
undo
tile 3 3
```

## Using it as a library

You can use the tile rules without the game:

```python
from pagaf.tiles import TileType
from pagaf.wfc import WFCGrid

grid = WFCGrid(3, 3)
grid.can_place_tile(1, 1, TileType.RESIDENTIAL)   # True
grid.place_tile(1, 1, TileType.RESIDENTIAL)
grid.can_place_tile(1, 0, TileType.INDUSTRIAL)    # False: next to residential
grid.get_possible_tiles(1, 0)                     # tile types still allowed there
```

Modules:

- `pagaf.tiles`: `TileType`, `Tile`, `TileMap`, `TileAssets` and `load_tiles`
- `pagaf.wfc`: the adjacency rules (`build_rules`, `neighbour`, `Direction`), `WFCCell`, `WFCGrid`, `WFCState` and `WFCError`
- `pagaf.undo_redo`: `Action`, `ActionKind` and the `UndoRedo` history
- `pagaf.placement`: `setup_grid`, `place_tile`, `cursor_to_cell`, `placement_highlights`, `SelectedTile` and `Highlight`
- `pagaf.menus`: `main_menu`, `settings_menu`, `load_game_menu`, `game_menu`, `tile_icon`, `toggle_selection`, `update_volume`, `AvailableTiles` and `MenuResult`
- `pagaf.scene`: `Transform`, `World`, `Key`, `GamePause`, `setup_game` and `camera_movement`
- `pagaf.config`: `GameState`, `GameSettings` and `GraphicsQuality`
- `pagaf.app`: `Game` (with `run_command`) and the `main` entry point

## What it does not do

- The game has no window and does not draw anything. Entities such as the camera, the light, grid cells and placed tiles are kept as records in a `World`.
- It plays no sound. The volume setting is stored on an in-memory music record.
- It has no mouse input. The `place` command takes coordinates instead.
- It cannot save or load games. `Load Game` and `New Game` both start the same fresh session.

## Tests

```
pytest
```