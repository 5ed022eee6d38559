"""Dice component — HTML pip faces for a pair of dice."""

from __future__ import annotations

import streamlit as st

from src.engine.base import DiceRoll

# Pip positions on a 3x3 grid, (row, column), 1-based
_PIPS: dict[int, tuple[tuple[int, int], ...]] = {
    1: ((2, 2),),
    2: ((1, 1), (3, 3)),
    3: ((1, 1), (2, 2), (3, 3)),
    4: ((1, 1), (1, 3), (3, 1), (3, 3)),
    5: ((1, 1), (1, 3), (2, 2), (3, 1), (3, 3)),
    6: ((1, 1), (1, 3), (2, 1), (2, 3), (3, 1), (3, 3)),
}


def die_html(value: int) -> str:
    """HTML for a single die face."""
    dots = "".join(
        f'<span class="pip" style="grid-row:{row};grid-column:{col};"></span>'
        for row, col in _PIPS[value]
    )
    return f'<div class="die" title="{value}">{dots}</div>'


def dice_pair_html(roll: DiceRoll) -> str:
    """HTML for both dice of a roll, side by side."""
    return (
        '<div class="dice-pair">'
        f"{die_html(roll.die1)}{die_html(roll.die2)}"
        "</div>"
    )


def render_dice(roll: DiceRoll | None) -> None:
    """Render a roll as two dice faces, or a placeholder before the first roll."""
    if roll is None:
        st.markdown(
            '<div class="dice-pair empty">'
            '<span style="color:var(--text-secondary);font-style:italic;">'
            "No dice thrown yet."
            "</span></div>",
            unsafe_allow_html=True,
        )
        return
    st.markdown(dice_pair_html(roll), unsafe_allow_html=True)
