"""Tile types, the tile map and loaded tile assets."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from enum import IntEnum

DEFAULT_MAP_SIZE = 50


class TileType(IntEnum):
    """Kinds of tile that can occupy a map cell."""

    EMPTY = 0
    RESIDENTIAL = 1
    COMMERCIAL = 2
    INDUSTRIAL = 3
    ROAD = 4
    PARK = 5

    def index(self) -> int:
        """Index used in vectors and for file names."""
        return int(self)

    def scene_path(self) -> str | None:
        """Path of the scene model for this tile, or None for an empty tile."""
        if self is TileType.EMPTY:
            return None
        return f"models/tiles/tile_{self.index()}/tile.glb#Scene0"

    @classmethod
    def from_index(cls, index: int) -> TileType | None:
        """The tile type with this index, or None if there is none."""
        try:
            return cls(index)
        except ValueError:
            return None

    def scale(self) -> tuple[float, float, float]:
        """Uniform scale applied to this tile's model."""
        factor = _SCALES[self]
        return (factor, factor, factor)


_SCALES = {
    TileType.RESIDENTIAL: 0.1,
    TileType.COMMERCIAL: 0.05,
    TileType.INDUSTRIAL: 0.2,
    TileType.ROAD: 0.25,
    TileType.PARK: 0.14,
    TileType.EMPTY: 1.0,
}

ALL_TILES = (
    TileType.RESIDENTIAL,
    TileType.COMMERCIAL,
    TileType.INDUSTRIAL,
    TileType.ROAD,
    TileType.PARK,
)


@dataclass
class Tile:
    """A map cell: its type and grid position."""

    tile_type: TileType
    position: tuple[int, int]


@dataclass
class TileMap:
    """Grid of tiles plus the scene entity shown on each cell."""

    width: int = DEFAULT_MAP_SIZE
    height: int = DEFAULT_MAP_SIZE
    tiles: list[list[Tile]] = field(init=False)
    entities: list[list[int | None]] = field(init=False)

    def __post_init__(self) -> None:
        self.tiles = [
            [Tile(TileType.EMPTY, (x, y)) for x in range(self.width)]
            for y in range(self.height)
        ]
        self.entities = [[None] * self.width for _ in range(self.height)]

    def tile_type_at(self, x: int, y: int) -> TileType:
        """Type of the tile at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.tiles[y][x].tile_type


@dataclass
class TileAssets:
    """Scene handles for each tile type, indexed by tile index."""

    tiles: list[Hashable | None]

    def handle(self, tile_type: TileType) -> Hashable | None:
        """Scene handle for a tile type; None for the empty tile."""
        return self.tiles[tile_type.index()]


def load_tiles(loader: Callable[[str], Hashable] | None = None) -> TileAssets:
    """Load a scene handle for every placeable tile.

    The loader maps a scene path to a handle; without one the path itself
    serves as the handle.
    """
    tiles: list[Hashable | None] = [None] * (TileType.PARK.index() + 1)
    for tile_type in ALL_TILES:
        path = tile_type.scene_path()
        if path is not None:
            tiles[tile_type.index()] = loader(path) if loader else path
    return TileAssets(tiles)