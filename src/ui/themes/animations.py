"""CSS injection and HTML banner helpers for the casino theme."""

from pathlib import Path

import streamlit as st

from src.engine.base import GameOutcome, GameResult, format_amount


def load_css() -> None:
    """Inject the casino CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "craps.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_outcome_banner(result: GameResult) -> None:
    """Render the win / loss / break-even banner for a finished run."""
    if result.outcome == GameOutcome.WON:
        css_class, text = "banner-win", f"You won ${format_amount(result.total_won)}!"
    elif result.outcome == GameOutcome.LOST:
        css_class, text = "banner-lose", f"You lost ${format_amount(result.total_lost)}."
    else:
        css_class, text = "banner-even", "You broke even."
    st.markdown(
        f'<div class="outcome-banner {css_class}">{text}</div>',
        unsafe_allow_html=True,
    )
