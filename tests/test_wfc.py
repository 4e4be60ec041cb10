import random

import pytest

from pagaf.tiles import DEFAULT_MAP_SIZE, TileType
from pagaf.wfc import (
    RULES,
    TILE_COUNT,
    Direction,
    WFCCell,
    WFCError,
    WFCGrid,
    WFCState,
    build_rules,
    neighbour,
)


def test_wfc_cell_new():
    cell = WFCCell.full()
    assert cell.count == TILE_COUNT - 1
    assert not cell.collapsed
    assert cell.entropy() == cell.count
    assert cell.possible[TileType.EMPTY] is False


def test_neighbour_boundaries():
    assert neighbour(3, 3, 0, 0, Direction.NORTH) is None
    assert neighbour(3, 3, 2, 2, Direction.SOUTH) is None
    assert neighbour(3, 3, 1, 1, Direction.EAST) is not None
    assert neighbour(3, 3, 1, 1, Direction.EAST) == (2, 1)
    assert neighbour(3, 3, 0, 1, Direction.WEST) is None


def test_can_place_tile():
    grid = WFCGrid(3, 3)
    assert grid.can_place_tile(1, 1, TileType.RESIDENTIAL)
    grid.place_tile(1, 1, TileType.RESIDENTIAL)
    assert not grid.can_place_tile(1, 1, TileType.INDUSTRIAL)


def test_can_place_next_to_collapsed():
    grid = WFCGrid(3, 3)
    assert grid.place_tile(1, 1, TileType.RESIDENTIAL)
    assert not grid.can_place_tile(1, 0, TileType.INDUSTRIAL)
    assert grid.can_place_tile(1, 0, TileType.COMMERCIAL)
    assert grid.can_place_tile(0, 0, TileType.INDUSTRIAL)


def test_build_rules():
    rules = build_rules()
    assert rules == RULES
    res, ind, park = TileType.RESIDENTIAL, TileType.INDUSTRIAL, TileType.PARK
    for direction in Direction:
        assert rules[direction][res][ind] is False
        assert rules[direction][ind][res] is False
        assert rules[direction][park][park] is False
        assert rules[direction][res][TileType.COMMERCIAL] is True
        assert rules[direction][TileType.ROAD][TileType.ROAD] is True


def test_cell_set_to():
    cell = WFCCell.full()
    cell.set_to(TileType.ROAD)
    assert cell.collapsed
    assert cell.count == 1
    assert [i for i, p in enumerate(cell.possible) if p] == [TileType.ROAD]


def test_place_tile_twice_fails():
    grid = WFCGrid(3, 3)
    assert grid.place_tile(0, 0, TileType.ROAD)
    assert not grid.place_tile(0, 0, TileType.PARK)


def test_propagation_removes_forbidden_neighbours():
    grid = WFCGrid(3, 3)
    grid.place_tile(1, 1, TileType.RESIDENTIAL)
    for x, y in [(1, 0), (1, 2), (0, 1), (2, 1)]:
        possible = grid.get_possible_tiles(x, y)
        assert TileType.INDUSTRIAL not in possible
        assert TileType.RESIDENTIAL in possible
    assert TileType.INDUSTRIAL in grid.get_possible_tiles(0, 0)


def test_get_possible_tiles_collapsed_is_empty():
    grid = WFCGrid(2, 2)
    grid.place_tile(0, 0, TileType.PARK)
    assert grid.get_possible_tiles(0, 0) == []
    assert TileType.PARK not in grid.get_possible_tiles(1, 0)


def test_contradiction_reported():
    grid = WFCGrid(2, 1)
    grid.cells[1] = WFCCell(
        [i == TileType.PARK for i in range(TILE_COUNT)], 1, collapsed=False
    )
    assert grid.place_tile(0, 0, TileType.PARK) is False


def test_lowest_entropy_picks_neighbour():
    grid = WFCGrid(3, 3)
    grid.place_tile(1, 1, TileType.RESIDENTIAL)
    rng = random.Random(7)
    for _ in range(10):
        assert grid.lowest_entropy(rng) in {(1, 0), (1, 2), (0, 1), (2, 1)}


def test_lowest_entropy_none_when_all_decided():
    grid = WFCGrid(1, 1)
    grid.place_tile(0, 0, TileType.ROAD)
    assert grid.lowest_entropy(random.Random(1)) is None


def test_collapse_picks_a_possible_tile():
    rng = random.Random(3)
    for _ in range(20):
        grid = WFCGrid(3, 3)
        grid.place_tile(1, 1, TileType.RESIDENTIAL)
        before = grid.get_possible_tiles(1, 0)
        grid.collapse(1, 0, rng)
        cell = grid.cells[grid.idx(1, 0)]
        assert cell.collapsed
        chosen = [TileType(i) for i, p in enumerate(cell.possible) if p]
        assert len(chosen) == 1
        assert chosen[0] in before


def test_collapse_without_options_raises():
    grid = WFCGrid(1, 1)
    grid.cells[0] = WFCCell([False] * TILE_COUNT, 0)
    with pytest.raises(WFCError):
        grid.collapse(0, 0, random.Random(0))


def test_idx_bounds():
    grid = WFCGrid(4, 3)
    assert grid.idx(3, 2) == len(grid.cells) - 1
    with pytest.raises(IndexError):
        grid.idx(4, 0)
    with pytest.raises(IndexError):
        grid.idx(0, 3)


def test_state_default_grid():
    state = WFCState()
    assert state.grid.width == DEFAULT_MAP_SIZE
    assert state.grid.height == DEFAULT_MAP_SIZE
    assert len(state.grid.cells) == DEFAULT_MAP_SIZE * DEFAULT_MAP_SIZE