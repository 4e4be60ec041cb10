"""Game states and user-adjustable settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

BACKGROUND_MUSIC = "sounds/background.ogg"


class GameState(Enum):
    """Top-level screens the game can be in."""

    MAIN_MENU = auto()
    LOAD_GAME = auto()
    SETTINGS = auto()
    IN_GAME = auto()


INITIAL_STATE = GameState.MAIN_MENU


class GraphicsQuality(Enum):
    """Rendering quality presets."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass
class GameSettings:
    """Audio and video settings chosen by the player."""

    volume: float = 0.5
    graphics_quality: GraphicsQuality = GraphicsQuality.MEDIUM
    brightness: float = 0.7