"""Game display component — bankroll status, game log and results summary."""

from __future__ import annotations

import html

import streamlit as st

from src.engine.base import GameLogEntry, GameOutcome, GameResult, format_amount
from src.ui.components.dice import dice_pair_html


def _log_entry_html(entry: GameLogEntry) -> str:
    dice = dice_pair_html(entry.roll) if entry.roll is not None else ""
    return (
        f'<div class="log-entry log-{entry.type.value}">'
        f"{dice}"
        f'<span class="log-message">{html.escape(entry.message)}</span>'
        "</div>"
    )


def render_game_log(result: GameResult) -> None:
    """Render every log entry in order, with dice faces for roll entries."""
    parts = ['<div class="game-log" role="log" aria-label="Game log">']
    parts.extend(_log_entry_html(entry) for entry in result.log)
    parts.append("</div>")
    st.markdown("".join(parts), unsafe_allow_html=True)


def render_results_summary(result: GameResult) -> None:
    """Render the final results panel."""
    st.markdown("#### Final Results")
    rows = [
        ("Initial Bankroll", f"${format_amount(result.initial_bankroll)}"),
        ("Final Bankroll", f"${format_amount(result.final_bankroll)}"),
        ("Games Played", str(result.games_played)),
        ("Rounds Won / Lost", f"{result.rounds_won} / {result.rounds_lost}"),
    ]
    if result.outcome == GameOutcome.WON:
        rows.append(("Total Won", f"+${format_amount(result.total_won)}"))
    elif result.outcome == GameOutcome.LOST:
        rows.append(("Total Lost", f"-${format_amount(result.total_lost)}"))
    else:
        rows.append(("Result", "Broke Even"))

    for label, value in rows:
        st.markdown(f"**{label}:** {value}")


def render_game_display(result: GameResult | None) -> None:
    """Render the display panel for the latest run (or an empty-state prompt)."""
    if result is None:
        st.info(
            'Set your bankroll, bet, and number of plays, then click '
            '"Start Game" to begin!'
        )
        return

    st.metric(
        "Current Bankroll",
        f"${format_amount(result.final_bankroll)}",
        delta=format_amount(result.net),
    )
    render_game_log(result)
    st.divider()
    render_results_summary(result)
