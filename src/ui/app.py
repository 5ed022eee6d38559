"""Craps Simulator — Streamlit Application Entrypoint."""

from __future__ import annotations

import logging

import streamlit as st

logger = logging.getLogger(__name__)


_RULES = """\
**Goal:** Grow your bankroll over a series of rounds.

**Come-out roll:**
- **7 or 11** = Natural, you win
- **2, 3 or 12** = Craps, you lose
- Anything else sets the **point**

**Point:**
- Keep rolling until the point repeats (win) or a **7** shows (lose)

**Payout:** A win pays back twice the bet. Each round costs one bet, and
play stops early if the bankroll can no longer cover it.
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        st.markdown("### Craps Rules")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Craps Simulator",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    from src.config.settings import configure_logging, get_settings
    from src.engine.dice import DiceSource
    from src.engine.errors import CrapsError
    from src.engine.game import play_game
    from src.storage.settings_store import SettingsStore
    from src.ui.components.dice import render_dice
    from src.ui.components.game_controls import render_game_controls
    from src.ui.components.game_display import render_game_display
    from src.ui.themes import load_css, render_outcome_banner

    settings = get_settings()
    configure_logging(settings)
    load_css()

    store = SettingsStore(settings.settings_file)

    # Session state defaults
    ss = st.session_state
    if "game_result" not in ss:
        ss["game_result"] = None
    if "dice" not in ss:
        ss["dice"] = DiceSource(seed=settings.dice_seed)

    controls_col, display_col = st.columns([1, 2])

    with controls_col:
        initial = store.load() or settings.default_params()
        params = render_game_controls(initial, store)

    if params is not None:
        logger.info(
            "Starting game: bankroll=%s bet=%s plays=%s",
            params.bankroll, params.bet, params.number_of_plays,
        )
        try:
            ss["game_result"] = play_game(params, ss["dice"])
        except CrapsError as exc:
            with controls_col:
                st.error(str(exc))

    result = ss["game_result"]
    with display_col:
        if result is not None:
            render_outcome_banner(result)
            last_roll = result.rounds[-1].rolls[-1] if result.rounds else None
            render_dice(last_roll)
        render_game_display(result)

    _render_sidebar_rules()


if __name__ == "__main__":
    main()
