"""Casino theme for the craps simulator."""

from src.ui.themes.animations import load_css, render_outcome_banner

__all__ = ["load_css", "render_outcome_banner"]
