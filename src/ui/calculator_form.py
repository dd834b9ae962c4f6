# src/ui/calculator_form.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import streamlit as st

from src.config import settings
from src.config.env import APP_ENV, ENV_DEV

Number = Union[int, float]

# st.number_input bounds per field. Values still go through parse_input.
FIELD_RULES = {
    "reward_amount": {
        "min_value": 0.0,
        "step": settings.AMOUNT_STEP,
        "format": "%.4f",
    },
    "frequency_minutes": {"min_value": 1, "step": 1},
    "holdings": {"min_value": 0, "step": 1},
}


@dataclass
class RawCalculatorInputs:
    """Form values as entered; None for a field left empty."""

    reward_amount: Optional[Number]
    frequency_minutes: Optional[Number]
    holdings: Optional[Number]


def form_defaults(app_env: str = APP_ENV) -> dict:
    """Initial field values. Amount and holdings start empty outside dev."""
    is_dev = app_env == ENV_DEV
    return {
        "reward_amount": settings.DEV_DEFAULT_REWARD_AMOUNT if is_dev else None,
        "frequency_minutes": settings.DEFAULT_FREQUENCY_MINUTES,
        "holdings": settings.DEV_DEFAULT_HOLDINGS if is_dev else None,
    }


def render_calculator_form() -> RawCalculatorInputs | None:
    """Render the calculator form.

    Returns
    -------
    RawCalculatorInputs | None
        The entered values when the form was submitted on this run, else None.
    """
    defaults = form_defaults()
    token = settings.EARNED_TOKEN_LABEL
    holding = settings.HOLDING_TOKEN_SYMBOL

    with st.form("calculator_form"):
        reward_amount = st.number_input(
            f"{token} amount per reward",
            value=defaults["reward_amount"],
            placeholder="e.g. 3.5",
            help=f"Decimal amount, up to {settings.AMOUNT_STEP} precision, min 0.",
            **FIELD_RULES["reward_amount"],
        )

        frequency_minutes = st.number_input(
            "Frequency (in minutes)",
            value=defaults["frequency_minutes"],
            placeholder="e.g. 11",
            **FIELD_RULES["frequency_minutes"],
        )
        st.caption(
            "Example: if you receive rewards every 15 minutes, enter **15**."
        )

        holdings = st.number_input(
            f"{holding} holdings",
            value=defaults["holdings"],
            placeholder="e.g. 500000",
            **FIELD_RULES["holdings"],
        )
        st.caption(f"Total {holding} you have in this farm (used to compute APR).")

        submitted = st.form_submit_button("Calculate", type="primary")

    if not submitted:
        return None

    return RawCalculatorInputs(
        reward_amount=reward_amount,
        frequency_minutes=frequency_minutes,
        holdings=holdings,
    )
