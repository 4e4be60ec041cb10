"""Wave-function-collapse grid that enforces tile adjacency rules."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum

from pagaf.tiles import DEFAULT_MAP_SIZE, TileType

TILE_COUNT = TileType.PARK.index() + 1
WEIGHTS = (0.0, 3.0, 2.0, 1.0, 2.5, 1.5)
_PLACEABLE = range(1, TILE_COUNT)


class Direction(IntEnum):
    """Neighbour directions on the grid."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


def build_rules() -> list[list[list[bool]]]:
    """Adjacency table: rules[direction][tile][neighbour] is True when allowed."""
    rules = [
        [[True] * TILE_COUNT for _ in range(TILE_COUNT)] for _ in Direction
    ]
    res = TileType.RESIDENTIAL.index()
    ind = TileType.INDUSTRIAL.index()
    park = TileType.PARK.index()
    for table in rules:
        table[res][ind] = False
        table[ind][res] = False
        table[park][park] = False
    return rules


RULES = build_rules()


class WFCError(Exception):
    """Raised when the grid reaches a state it cannot resolve."""


def neighbour(
    width: int, height: int, x: int, y: int, direction: Direction
) -> tuple[int, int] | None:
    """Coordinates of the neighbour in a direction, or None at the edge."""
    if direction == Direction.NORTH and y > 0:
        return (x, y - 1)
    if direction == Direction.SOUTH and y + 1 < height:
        return (x, y + 1)
    if direction == Direction.EAST and x + 1 < width:
        return (x + 1, y)
    if direction == Direction.WEST and x > 0:
        return (x - 1, y)
    return None


@dataclass
class WFCCell:
    """The set of tiles a cell may still become."""

    possible: list[bool]
    count: int
    collapsed: bool = False

    @classmethod
    def full(cls) -> WFCCell:
        """A cell where every placeable tile is still possible."""
        return cls([index != 0 for index in range(TILE_COUNT)], TILE_COUNT - 1)

    def set_to(self, tile_index: int) -> None:
        """Collapse the cell to a single tile."""
        self.possible = [index == tile_index for index in range(TILE_COUNT)]
        self.count = 1
        self.collapsed = True

    def entropy(self) -> int:
        return self.count


class WFCGrid:
    """A grid of cells constrained by the adjacency rules."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells = [WFCCell.full() for _ in range(width * height)]

    def idx(self, x: int, y: int) -> int:
        """Flat index of cell (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return y * self.width + x

    def lowest_entropy(self, rng: random.Random | None = None) -> tuple[int, int] | None:
        """A random undecided cell among those with the fewest options."""
        best: int | None = None
        candidates: list[tuple[int, int]] = []
        for index, cell in enumerate(self.cells):
            if cell.collapsed or cell.count <= 1:
                continue
            position = (index % self.width, index // self.width)
            if best is None or cell.count < best:
                best = cell.count
                candidates = [position]
            elif cell.count == best:
                candidates.append(position)
        if not candidates:
            return None
        return (rng or random).choice(candidates)

    def collapse(self, x: int, y: int, rng: random.Random | None = None) -> None:
        """Collapse a cell to one of its possible tiles, chosen by weight."""
        cell = self.cells[self.idx(x, y)]
        choices = [i for i in _PLACEABLE if cell.possible[i]]
        if not choices:
            raise WFCError(f"cell ({x}, {y}) has no possible tile")
        weights = [WEIGHTS[i] for i in choices]
        pick = (rng or random).choices(choices, weights=weights)[0]
        cell.set_to(pick)

    def propagate(self, sx: int, sy: int) -> bool:
        """Narrow neighbours from (sx, sy); False on a contradiction."""
        queue = deque([(sx, sy)])
        while queue:
            x, y = queue.popleft()
            source = self.cells[self.idx(x, y)]
            for direction in Direction:
                position = neighbour(self.width, self.height, x, y, direction)
                if position is None:
                    continue
                target = self.cells[self.idx(*position)]
                rules = RULES[direction]
                changed = False
                for t in _PLACEABLE:
                    if not target.possible[t]:
                        continue
                    if not any(source.possible[s] and rules[s][t] for s in _PLACEABLE):
                        target.possible[t] = False
                        target.count -= 1
                        changed = True
                if target.count == 0:
                    return False
                if changed:
                    queue.append(position)
        return True

    def place_tile(self, x: int, y: int, tile_type: TileType) -> bool:
        """Fix a cell to a tile and propagate; False if taken or contradictory."""
        cell = self.cells[self.idx(x, y)]
        if cell.collapsed:
            return False
        cell.set_to(int(tile_type))
        return self.propagate(x, y)

    def can_place_tile(self, x: int, y: int, tile_type: TileType) -> bool:
        """Whether a tile fits at (x, y) given its decided neighbours."""
        if self.cells[self.idx(x, y)].collapsed:
            return False
        tile = int(tile_type)
        for direction in Direction:
            position = neighbour(self.width, self.height, x, y, direction)
            if position is None:
                continue
            other = self.cells[self.idx(*position)]
            if other.collapsed and not any(
                other.possible[t] and RULES[direction][tile][t] for t in _PLACEABLE
            ):
                return False
        return True

    def get_possible_tiles(self, x: int, y: int) -> list[TileType]:
        """Tiles still possible at an undecided cell; empty once decided."""
        cell = self.cells[self.idx(x, y)]
        if cell.collapsed:
            return []
        return [TileType(i) for i in _PLACEABLE if cell.possible[i]]


def _default_grid() -> WFCGrid:
    return WFCGrid(DEFAULT_MAP_SIZE, DEFAULT_MAP_SIZE)


@dataclass
class WFCState:
    """Holds the constraint grid used while building."""

    grid: WFCGrid = field(default_factory=_default_grid)