# src/ui/layout.py
from __future__ import annotations

import logging

import streamlit as st

from src.config import settings
from src.core.price_feed import PriceFeed
from src.core.projection import InputValidationError, parse_input, project
from src.ui.calculator_form import render_calculator_form
from src.ui.price_pills import render_price_pills
from src.ui.results import render_results

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# Session-scoped live prices
# ---------------------------------------------------------
def get_price_feed() -> PriceFeed:
    """
    One PriceFeed per browser session, started on first render.

    Prices are fetched once and then only read; a page reload starts a new
    session and therefore a new fetch.
    """
    feed = st.session_state.get("price_feed")
    if feed is None:
        feed = PriceFeed()
        feed.start()
        st.session_state["price_feed"] = feed
    return feed


# ---------------------------------------------------------
# Footer
# ---------------------------------------------------------
def credit_line() -> str:
    """Markdown credit shown under the footer badge."""
    developer = f"[{settings.DEVELOPER_HANDLE}]({settings.DEVELOPER_URL})"
    referral_text = settings.REFERRAL_URL.split("//", 1)[1]
    referral = f"[{referral_text}]({settings.REFERRAL_URL})"
    return (
        f"Developed with love ❤️ by {developer}"
        f" · Join {settings.HOLDING_TOKEN_SYMBOL} with my referral: {referral}"
        " · Buy me a coffee ☕ if this helped you!"
    )


# ---------------------------------------------------------
# Main page
# ---------------------------------------------------------
def render_dashboard() -> None:
    st.title("My Send Rewards")
    st.caption(
        f"Calculate how many **{settings.EARNED_TOKEN_NAME}** you generate "
        "based on your reward frequency."
    )

    feed = get_price_feed()
    render_price_pills(feed)

    st.markdown("---")
    raw = render_calculator_form()

    if raw is not None:
        # Recomputed wholesale on every submission
        try:
            inputs = parse_input(raw.reward_amount, raw.frequency_minutes, raw.holdings)
        except InputValidationError as e:
            logger.debug("Calculation skipped: %s", e)
            st.session_state["projection_result"] = None
        else:
            st.session_state["projection_result"] = project(inputs, feed.snapshot())

    render_results(st.session_state.get("projection_result"))

    st.markdown("---")
    st.caption(
        f"{settings.HOLDING_TOKEN_SYMBOL} · Canton Rewards. Prices from DexScreener "
        "and CoinGecko, fetched once when the page opens."
    )
    st.caption(credit_line())
