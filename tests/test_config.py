from pagaf.config import (
    BACKGROUND_MUSIC,
    INITIAL_STATE,
    GameSettings,
    GameState,
    GraphicsQuality,
)


def test_initial_state_is_main_menu():
    assert GameState(INITIAL_STATE.value) is GameState.MAIN_MENU


def test_game_states_are_distinct():
    states = [GameState(state.value) for state in GameState]
    assert len(set(states)) == len(states)
    assert GameState.IN_GAME in states
    assert GameState.LOAD_GAME in states
    assert GameState.SETTINGS in states


def test_default_settings():
    settings = GameSettings()
    assert settings.volume == 0.5
    assert settings.brightness == 0.7
    assert settings.graphics_quality is GraphicsQuality.MEDIUM


def test_settings_are_independent():
    first = GameSettings()
    second = GameSettings()
    first.volume = 0.0
    first.graphics_quality = GraphicsQuality.HIGH
    assert second.volume == GameSettings().volume
    assert second.graphics_quality is GraphicsQuality.MEDIUM


def test_quality_order():
    qualities = [GraphicsQuality(quality.value) for quality in GraphicsQuality]
    assert qualities == [
        GraphicsQuality.LOW,
        GraphicsQuality.MEDIUM,
        GraphicsQuality.HIGH,
    ]
    assert GameSettings().graphics_quality is qualities[1]


def test_background_music_path():
    assert BACKGROUND_MUSIC.startswith("sounds/")
    assert BACKGROUND_MUSIC.endswith(".ogg")