from dataclasses import dataclass

import pytest

from pagaf.config import GameSettings, GameState
from pagaf.menus import (
    AvailableTiles,
    MenuResult,
    game_menu,
    load_game_menu,
    main_menu,
    settings_menu,
    tile_icon,
    toggle_selection,
    update_volume,
)
from pagaf.placement import SelectedTile
from pagaf.scene import GamePause
from pagaf.tiles import ALL_TILES, TileType


@dataclass
class FakeSink:
    volume: float = 1.0


def test_available_tiles_default_order():
    assert AvailableTiles().tiles == list(ALL_TILES)


@pytest.mark.parametrize(
    "tile, icon",
    [
        (TileType.RESIDENTIAL, "🏠"),
        (TileType.COMMERCIAL, "🏢"),
        (TileType.INDUSTRIAL, "🏭"),
        (TileType.ROAD, "🚏"),
        (TileType.PARK, "🌳"),
        (TileType.EMPTY, "❓"),
    ],
)
def test_tile_icon(tile, icon):
    assert tile_icon(tile) == icon


def test_toggle_selection_selects_then_clears():
    selected = SelectedTile()
    assert toggle_selection(selected, TileType.ROAD) is TileType.ROAD
    assert selected.tile is TileType.ROAD
    assert toggle_selection(selected, TileType.ROAD) is TileType.EMPTY
    assert selected.tile is TileType.EMPTY


def test_toggle_selection_switches_tile():
    selected = SelectedTile(TileType.PARK)
    assert toggle_selection(selected, TileType.COMMERCIAL) is TileType.COMMERCIAL


@pytest.mark.parametrize(
    "button, result",
    [
        ("Start Game", MenuResult(GameState.LOAD_GAME)),
        ("Settings", MenuResult(GameState.SETTINGS)),
        ("Quit", MenuResult(quit=True)),
    ],
)
def test_main_menu(button, result):
    assert main_menu(button) == result


def test_settings_menu_back():
    assert settings_menu("Back") == MenuResult(GameState.MAIN_MENU)


@pytest.mark.parametrize(
    "button, state",
    [
        ("Load Game", GameState.IN_GAME),
        ("New Game", GameState.IN_GAME),
        ("Back", GameState.MAIN_MENU),
    ],
)
def test_load_game_menu(button, state):
    assert load_game_menu(button).next_state is state


@pytest.mark.parametrize("menu", [main_menu, settings_menu, load_game_menu])
def test_unknown_button_raises(menu):
    with pytest.raises(ValueError):
        menu("Nope")


def test_game_menu_pause_and_resume():
    pause = GamePause()
    assert game_menu("Pause", pause) == MenuResult()
    assert pause.paused
    with pytest.raises(ValueError):
        game_menu("Pause", pause)
    game_menu("Resume", pause)
    assert not pause.paused


def test_game_menu_navigation():
    pause = GamePause()
    assert game_menu("Settings", pause).next_state is GameState.SETTINGS
    assert game_menu("Main menu", pause).next_state is GameState.MAIN_MENU
    assert game_menu("Quit", pause).quit


def test_update_volume_applies_setting():
    sink = FakeSink()
    settings = GameSettings(volume=0.25)
    assert update_volume(settings, sink)
    assert sink.volume == settings.volume


def test_update_volume_without_sink():
    assert update_volume(GameSettings(), None) is False