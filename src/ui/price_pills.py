# src/ui/price_pills.py
from __future__ import annotations

from typing import Optional

import streamlit as st

from src.config import settings
from src.core.price_feed import PriceFeed, PriceState
from src.ui.formatting import format_usd


def pill_text(feed: PriceFeed, price: float | None) -> str:
    state = feed.state_of(price)
    if state is PriceState.AVAILABLE:
        return format_usd(price)
    if state is PriceState.LOADING:
        return "Loading..."
    return "--"


def refresh_interval(feed: PriceFeed) -> Optional[float]:
    """Fragment timer: poll only while the fetch is pending."""
    return settings.PRICE_PILL_REFRESH_S if feed.is_loading else None


def fetch_settled_since(started_loading: bool, feed: PriceFeed) -> bool:
    """True once a fetch that was pending when the page rendered has finished."""
    return started_loading and not feed.is_loading


def render_price_pills(feed: PriceFeed) -> None:
    """
    Live price pills for both tokens plus the advisory line, if any.

    While the one-shot fetch is still running the pills re-render on a short
    timer so they flip from "Loading..." without waiting for user input. The
    timer is fixed when the fragment is registered, so once the fetch settles
    the whole app reruns to register it again without one.
    """
    started_loading = feed.is_loading

    @st.fragment(run_every=refresh_interval(feed))
    def _pills() -> None:
        snapshot = feed.snapshot()
        col_send, col_cc = st.columns(2)
        with col_send:
            st.metric(
                f"{settings.HOLDING_TOKEN_SYMBOL} PRICE",
                pill_text(feed, snapshot.reward_token_price_usd),
            )
        with col_cc:
            st.metric(
                f"{settings.EARNED_TOKEN_SYMBOL} PRICE",
                pill_text(feed, snapshot.held_token_price_usd),
            )

        result = feed.result()
        if result is not None:
            error = feed.error()
            if error:
                st.caption(f":orange[{error}]")
            st.caption(
                f"Prices fetched at {result.as_of_utc:%Y-%m-%d %H:%M} UTC "
                "(once per session)"
            )
            if fetch_settled_since(started_loading, feed):
                st.rerun(scope="app")

    _pills()
