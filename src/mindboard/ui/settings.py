"""User-configurable UI settings and how they are applied to the window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mindboard.ui.styles.theme import BOARD_THEMES, BoardTheme


@dataclass
class AppSettings:
    """All user-configurable settings. Kept in memory only."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True

    # Sound
    sound_enabled: bool = True
    sound_volume: int = 80  # 0–100


def apply_settings(host: Any) -> None:
    """Push ``host._settings`` into the board scene, sound player and HUD."""
    s = host._settings

    scene = host._board_view.board_scene
    scene.set_theme(BOARD_THEMES.get(s.board_theme, BoardTheme.default()))
    scene.set_show_coordinates(s.show_coordinates)

    host._sound_player.set_enabled(s.sound_enabled)
    host._sound_player.set_volume(s.sound_volume)
    host._hud.set_muted(not s.sound_enabled)
