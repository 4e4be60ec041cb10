"""Undo and redo history for tile placement."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from pagaf.scene import Transform, World
from pagaf.tiles import TileAssets, TileMap, TileType


class ActionKind(Enum):
    """What an action did to a cell."""

    PLACE_TILE = auto()
    REMOVE_TILE = auto()


@dataclass(frozen=True)
class Action:
    """A change to one cell: the kind, its position and the tile involved."""

    kind: ActionKind
    x: int
    y: int
    tile_type: TileType


def _despawn_at(tilemap: TileMap, world: World, x: int, y: int) -> None:
    entity = tilemap.entities[y][x]
    tilemap.entities[y][x] = None
    if entity is not None:
        world.despawn(entity)


@dataclass
class UndoRedo:
    """Two stacks of actions: done ones and undone ones."""

    history: list[Action] = field(default_factory=list)
    redo_stack: list[Action] = field(default_factory=list)

    def add_action(self, action: Action) -> None:
        """Record a new action; this discards anything that could be redone."""
        self.history.append(action)
        self.redo_stack.clear()

    def undo(self, tilemap: TileMap, world: World) -> Action | None:
        """Revert the latest action and return it, or None if there is none."""
        if not self.history:
            return None
        action = self.history.pop()
        self.redo_stack.append(action)
        if action.kind is ActionKind.PLACE_TILE:
            _despawn_at(tilemap, world, action.x, action.y)
            tilemap.tiles[action.y][action.x].tile_type = TileType.EMPTY
        else:
            tilemap.tiles[action.y][action.x].tile_type = action.tile_type
        return action

    def redo(
        self, tilemap: TileMap, world: World, tile_assets: TileAssets
    ) -> Action | None:
        """Reapply the latest undone action and return it, or None."""
        if not self.redo_stack:
            return None
        action = self.redo_stack.pop()
        self.history.append(action)
        x, y = action.x, action.y
        if action.kind is ActionKind.PLACE_TILE:
            tilemap.tiles[y][x].tile_type = action.tile_type
            transform = Transform(
                translation=(float(x), 0.0, float(y)),
                scale=action.tile_type.scale(),
            )
            tilemap.entities[y][x] = world.spawn(
                tile_assets.handle(action.tile_type), transform
            )
        else:
            _despawn_at(tilemap, world, x, y)
            tilemap.tiles[y][x].tile_type = TileType.EMPTY
        return action