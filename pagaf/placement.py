"""Grid setup, cursor picking, tile placement and placement highlights."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pagaf.scene import Transform, Vec3, World
from pagaf.tiles import TileAssets, TileMap, TileType
from pagaf.undo_redo import Action, ActionKind, UndoRedo
from pagaf.wfc import WFCState

GRID_TILE = "grid_tile"
GRID_SIZE = 50
TILE_SIZE = 1.0


@dataclass
class SelectedTile:
    """The tile type the player is about to place; EMPTY when none."""

    tile: TileType = TileType.EMPTY


@dataclass(frozen=True)
class Highlight:
    """A grid cell marked as a valid or invalid spot for the selected tile."""

    x: int
    y: int
    valid: bool


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def setup_grid(world: World) -> TileMap:
    """Spawn the ground plane cells and return a fresh, empty tile map."""
    for x in range(GRID_SIZE):
        for z in range(GRID_SIZE):
            world.spawn(
                GRID_TILE,
                Transform(translation=(x * TILE_SIZE, 0.0, z * TILE_SIZE)),
            )
    return TileMap()


def cursor_to_cell(tile_map: TileMap, point: Vec3) -> tuple[int, int] | None:
    """Map a point on the ground plane to its (x, z) cell, or None if off the map."""
    x = _round_half_away(point[0])
    z = _round_half_away(point[2])
    if 0 <= x < tile_map.width and 0 <= z < tile_map.height:
        return (x, z)
    return None


def place_tile(
    world: World,
    tile_map: TileMap,
    wfc_state: WFCState,
    tile_assets: TileAssets,
    selected_tile: SelectedTile,
    undo_redo: UndoRedo,
    x: int,
    z: int,
) -> bool:
    """Place the selected tile at (x, z); True when placement succeeded."""
    tile = selected_tile.tile
    if tile is TileType.EMPTY:
        return False
    if not (0 <= x < tile_map.width and 0 <= z < tile_map.height):
        return False
    grid = wfc_state.grid
    if not grid.can_place_tile(x, z, tile):
        return False
    if not grid.place_tile(x, z, tile):
        return False

    entity = world.spawn(
        tile_assets.handle(tile),
        Transform(translation=(float(x), 0.0, float(z)), scale=tile.scale()),
    )
    tile_map.tiles[z][x].tile_type = tile
    tile_map.entities[z][x] = entity
    undo_redo.add_action(Action(ActionKind.PLACE_TILE, x, z, tile))
    return True


def placement_highlights(
    wfc_state: WFCState, selected_tile: SelectedTile
) -> list[Highlight]:
    """Cells where the selected tile is still possible, marked valid or not."""
    tile = selected_tile.tile
    if tile is TileType.EMPTY:
        return []
    grid = wfc_state.grid
    highlights = []
    for y in range(grid.height):
        for x in range(grid.width):
            cell = grid.cells[grid.idx(x, y)]
            if not cell.collapsed and cell.possible[tile.index()]:
                highlights.append(Highlight(x, y, grid.can_place_tile(x, y, tile)))
    return highlights