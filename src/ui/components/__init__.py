"""UI components for the craps simulator."""

from src.ui.components.dice import render_dice
from src.ui.components.game_controls import render_game_controls
from src.ui.components.game_display import render_game_display

__all__ = [
    "render_dice",
    "render_game_controls",
    "render_game_display",
]
