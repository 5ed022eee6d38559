"""Game controls component — presets, parameter inputs and the start button."""

from __future__ import annotations

import streamlit as st

from src.engine.base import GameParams
from src.engine.validators import (
    MAX_BANKROLL,
    MAX_PLAYS,
    MIN_BANKROLL,
    MIN_BET,
    MIN_PLAYS,
    validate_game_params,
)
from src.storage.settings_store import SettingsStore
from src.ui.presets import PRESET_LABELS, PRESETS, params_from_form, params_to_form

_FIELDS = ("bankroll", "bet", "number_of_plays")


def _init_form(initial: GameParams) -> None:
    """Seed the input widgets' session-state keys once per session."""
    ss = st.session_state
    if "_form_initialized" in ss:
        return
    for name, text in params_to_form(initial).items():
        ss[f"input_{name}"] = text
    ss["_form_initialized"] = True


def _apply_preset(key: str) -> None:
    """Button callback: overwrite the inputs with a preset."""
    for name, text in params_to_form(PRESETS[key]).items():
        st.session_state[f"input_{name}"] = text


def render_game_controls(
    initial: GameParams,
    store: SettingsStore,
) -> GameParams | None:
    """Render the parameter form.

    Args:
        initial: Values to pre-fill on first render (saved or default settings).
        store: Where the last valid settings are remembered.

    Returns:
        The validated GameParams when the player pressed Start, else ``None``.
    """
    _init_form(initial)
    ss = st.session_state

    st.subheader("Craps Game")

    cols = st.columns(len(PRESETS))
    for col, key in zip(cols, PRESETS):
        with col:
            st.button(
                PRESET_LABELS[key],
                key=f"preset_{key}",
                on_click=_apply_preset,
                args=(key,),
                use_container_width=True,
            )

    labels = {
        "bankroll": f"Bankroll (${MIN_BANKROLL} - ${MAX_BANKROLL:,})",
        "bet": f"Bet (${MIN_BET} - Current Bankroll)",
        "number_of_plays": f"Number of Plays ({MIN_PLAYS} - {MAX_PLAYS})",
    }
    for name in _FIELDS:
        st.text_input(labels[name], key=f"input_{name}")

    params = params_from_form(*(ss[f"input_{name}"] for name in _FIELDS))
    validation = validate_game_params(params)

    # Live validation, one message per offending field
    for name in _FIELDS:
        if name in validation.errors:
            st.error(validation.errors[name])

    started = st.button(
        "Start Game",
        type="primary",
        disabled=not validation.is_valid,
        use_container_width=True,
    )
    if not started:
        return None

    store.save(params)
    return params
