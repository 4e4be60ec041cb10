"""The game session and its text command interface."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Hashable
from dataclasses import dataclass

from pagaf.config import (
    BACKGROUND_MUSIC,
    INITIAL_STATE,
    GameSettings,
    GameState,
    GraphicsQuality,
)
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
from pagaf.placement import (
    SelectedTile,
    cursor_to_cell,
    place_tile,
    placement_highlights,
    setup_grid,
)
from pagaf.scene import CAMERA, GamePause, Key, World, camera_movement, setup_game
from pagaf.tiles import TileType, load_tiles
from pagaf.undo_redo import UndoRedo
from pagaf.wfc import WFCState

_KEYS = {
    "left": Key.ARROW_LEFT,
    "right": Key.ARROW_RIGHT,
    "up": Key.ARROW_UP,
    "down": Key.ARROW_DOWN,
    "a": Key.KEY_A,
    "d": Key.KEY_D,
    "w": Key.KEY_W,
    "s": Key.KEY_S,
    "q": Key.KEY_Q,
    "e": Key.KEY_E,
}


@dataclass
class _Music:
    track: str = BACKGROUND_MUSIC
    volume: float = 1.0


def _parse_unit(text: str) -> float:
    value = float(text)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"value {value} is outside 0..1")
    return value


class Game:
    """A running game session driven by text commands."""

    def __init__(self, loader: Callable[[str], Hashable] | None = None) -> None:
        self.state = INITIAL_STATE
        self.settings = GameSettings()
        self.pause = GamePause()
        self.available_tiles = AvailableTiles()
        self.selected = SelectedTile()
        self.undo_redo = UndoRedo()
        self.wfc_state = WFCState()
        self.world = World()
        self.tile_assets = load_tiles(loader)
        self.tile_map = setup_grid(self.world)
        self.music = _Music()
        update_volume(self.settings, self.music)
        self.running = True

    def _enter(self, state: GameState) -> None:
        self.state = state
        if state is GameState.IN_GAME:
            setup_game(self.world)

    def _require(self, state: GameState) -> None:
        if self.state is not state:
            raise ValueError(f"command only available in {state.name}")

    def _click(self, label: str) -> str:
        if self.state is GameState.MAIN_MENU:
            result = main_menu(label)
        elif self.state is GameState.SETTINGS:
            result = settings_menu(label)
        elif self.state is GameState.LOAD_GAME:
            result = load_game_menu(label)
        else:
            result = game_menu(label, self.pause)
        return self._apply(result)

    def _apply(self, result: MenuResult) -> str:
        if result.quit:
            self.running = False
            return "bye"
        if result.next_state is not None:
            self._enter(result.next_state)
            return self.state.name
        return "paused" if self.pause.paused else "resumed"

    def _set_volume(self, arg: str) -> str:
        self._require(GameState.SETTINGS)
        self.settings.volume = _parse_unit(arg)
        update_volume(self.settings, self.music)
        return f"volume {self.settings.volume}"

    def _set_brightness(self, arg: str) -> str:
        self._require(GameState.SETTINGS)
        self.settings.brightness = _parse_unit(arg)
        return f"brightness {self.settings.brightness}"

    def _set_quality(self, arg: str) -> str:
        self._require(GameState.SETTINGS)
        self.settings.graphics_quality = GraphicsQuality(arg.strip().capitalize())
        return f"quality {self.settings.graphics_quality.value}"

    def _tile_type(self, name: str) -> TileType:
        try:
            tile = TileType[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown tile {name!r}") from None
        if tile not in self.available_tiles.tiles:
            raise ValueError(f"tile {name!r} is not available")
        return tile

    def _select(self, arg: str) -> str:
        self._require(GameState.IN_GAME)
        tile = toggle_selection(self.selected, self._tile_type(arg))
        if tile is TileType.EMPTY:
            return "selection cleared"
        return f"selected {tile.name}"

    def _tiles(self, arg: str) -> str:
        self._require(GameState.IN_GAME)
        return "\n".join(
            f"{'*' if tile == self.selected.tile else ' '} {tile_icon(tile)} {tile.name}"
            for tile in self.available_tiles.tiles
        )

    def _place(self, arg: str) -> str:
        self._require(GameState.IN_GAME)
        x_text, z_text = arg.split()
        cell = cursor_to_cell(self.tile_map, (float(x_text), 0.0, float(z_text)))
        if cell is None:
            return "outside the map"
        tile = self.selected.tile
        if tile is TileType.EMPTY:
            return "no tile selected"
        x, z = cell
        placed = place_tile(
            self.world,
            self.tile_map,
            self.wfc_state,
            self.tile_assets,
            self.selected,
            self.undo_redo,
            x,
            z,
        )
        if not placed:
            return f"cannot place {tile.name} at ({x}, {z})"
        self.selected.tile = TileType.EMPTY
        return f"placed {tile.name} at ({x}, {z})"

    def _undo(self, arg: str) -> str:
        self._require(GameState.IN_GAME)
        action = self.undo_redo.undo(self.tile_map, self.world)
        if action is None:
            return "nothing to undo"
        return f"undid {action.kind.name} at ({action.x}, {action.y})"

    def _redo(self, arg: str) -> str:
        self._require(GameState.IN_GAME)
        action = self.undo_redo.redo(self.tile_map, self.world, self.tile_assets)
        if action is None:
            return "nothing to redo"
        return f"redid {action.kind.name} at ({action.x}, {action.y})"

    def _tile(self, arg: str) -> str:
        x_text, y_text = arg.split()
        return self.tile_map.tile_type_at(int(x_text), int(y_text)).name

    def _highlights(self, arg: str) -> str:
        self._require(GameState.IN_GAME)
        highlights = placement_highlights(self.wfc_state, self.selected)
        valid = sum(h.valid for h in highlights)
        return f"{valid} valid, {len(highlights) - valid} invalid"

    def _move(self, arg: str) -> str:
        self._require(GameState.IN_GAME)
        keys_text, delta_text = arg.split()
        try:
            keys = [_KEYS[name] for name in keys_text.lower().split(",") if name]
        except KeyError as exc:
            raise ValueError(f"unknown key {exc.args[0]!r}") from None
        cameras = self.world.entities_of(CAMERA)
        if len(cameras) != 1:
            return "no camera"
        _, transform = self.world.get(cameras[0])
        camera_movement(transform, keys, float(delta_text))
        x, y, z = transform.translation
        return f"camera at ({x:.2f}, {y:.2f}, {z:.2f})"

    def run_command(self, line: str) -> str:
        """Run one command line and return the text it produces."""
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return ""
        name, arg = parts[0].lower(), (parts[1] if len(parts) > 1 else "")
        handlers: dict[str, Callable[[str], str]] = {
            "state": lambda _: self.state.name,
            "click": self._click,
            "volume": self._set_volume,
            "brightness": self._set_brightness,
            "quality": self._set_quality,
            "select": self._select,
            "tiles": self._tiles,
            "place": self._place,
            "undo": self._undo,
            "redo": self._redo,
            "tile": self._tile,
            "highlights": self._highlights,
            "move": self._move,
        }
        handler = handlers.get(name)
        if handler is None:
            raise ValueError(f"unknown command {name!r}")
        return handler(arg)


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and run them until quit or end of input."""
    parser = argparse.ArgumentParser(
        prog="pagaf", description="Futuristic map builder driven by text commands."
    )
    parser.parse_args(argv)
    game = Game()
    for line in sys.stdin:
        try:
            output = game.run_command(line)
        except (ValueError, IndexError, KeyError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            continue
        if output:
            print(output)
        if not game.running:
            break
    return 0