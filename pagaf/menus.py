"""Menu screens, the in-game panel and audio volume handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from pagaf.config import GameSettings, GameState
from pagaf.scene import GamePause
from pagaf.tiles import ALL_TILES, TileType

TITLE = "PAGAF: Futuristic map builder"

_ICONS = {
    TileType.RESIDENTIAL: "🏠",
    TileType.COMMERCIAL: "🏢",
    TileType.INDUSTRIAL: "🏭",
    TileType.ROAD: "🚏",
    TileType.PARK: "🌳",
}
_UNKNOWN_ICON = "❓"


class _Sink(Protocol):
    volume: float


class _Selection(Protocol):
    tile: TileType


@dataclass
class AvailableTiles:
    """Tile types offered in the building panel."""

    tiles: list[TileType] = field(default_factory=lambda: list(ALL_TILES))


@dataclass(frozen=True)
class MenuResult:
    """What a button press asks for: a new screen, or leaving the game."""

    next_state: GameState | None = None
    quit: bool = False


def tile_icon(tile: TileType) -> str:
    """Icon shown for a tile type in the building panel."""
    return _ICONS.get(tile, _UNKNOWN_ICON)


def toggle_selection(selected: _Selection, tile: TileType) -> TileType:
    """Select a tile, or clear the selection if it was already chosen."""
    selected.tile = TileType.EMPTY if selected.tile == tile else tile
    return selected.tile


def _unknown(button: str) -> ValueError:
    return ValueError(f"no button labelled {button!r} on this screen")


def main_menu(button: str) -> MenuResult:
    """Handle a press on the main menu."""
    if button == "Start Game":
        return MenuResult(GameState.LOAD_GAME)
    if button == "Settings":
        return MenuResult(GameState.SETTINGS)
    if button == "Quit":
        return MenuResult(quit=True)
    raise _unknown(button)


def settings_menu(button: str) -> MenuResult:
    """Handle a press on the settings screen."""
    if button == "Back":
        return MenuResult(GameState.MAIN_MENU)
    raise _unknown(button)


def load_game_menu(button: str) -> MenuResult:
    """Handle a press on the welcome screen."""
    if button in ("Load Game", "New Game"):
        return MenuResult(GameState.IN_GAME)
    if button == "Back":
        return MenuResult(GameState.MAIN_MENU)
    raise _unknown(button)


def game_menu(button: str, pause: GamePause) -> MenuResult:
    """Handle a press on the in-game menu window."""
    pause_label = "Resume" if pause.paused else "Pause"
    if button == pause_label:
        pause.paused = not pause.paused
        return MenuResult()
    if button == "Settings":
        return MenuResult(GameState.SETTINGS)
    if button == "Main menu":
        return MenuResult(GameState.MAIN_MENU)
    if button == "Quit":
        return MenuResult(quit=True)
    raise _unknown(button)


def update_volume(settings: GameSettings, sink: _Sink | None) -> bool:
    """Apply the configured volume to the music sink; False when there is none."""
    if sink is None:
        return False
    sink.volume = settings.volume
    return True