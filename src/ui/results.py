# src/ui/results.py

from __future__ import annotations

import streamlit as st

from src.config import settings
from src.core.projection import ProjectionResult, projection_to_dataframe
from src.ui.formatting import format_number, format_percent, format_usd


def _result_card(label: str, native: float, usd: float | None) -> None:
    st.metric(
        label,
        f"{format_number(native)} {settings.EARNED_TOKEN_SYMBOL}",
    )
    if usd is not None:
        st.caption(f"≈ {format_usd(usd)}")


def render_results(result: ProjectionResult | None) -> None:
    """
    Show the projection, or a placeholder when nothing has been calculated.
    - USD sub-values appear only when the CC price is known.
    - The APR card appears only when the APR group was derived.
    """
    st.markdown("### Results")

    if result is None:
        st.info("Enter your data and click **Calculate**.")
        return

    col_hour, col_day, col_month, col_year = st.columns(4)
    with col_hour:
        _result_card("Per hour", result.per_hour, result.usd_per_hour)
    with col_day:
        _result_card("Per day", result.per_day, result.usd_per_day)
    with col_month:
        _result_card(
            f"Per month ({settings.DAYS_PER_MONTH} days)",
            result.per_month,
            result.usd_per_month,
        )
    with col_year:
        _result_card(
            f"Per year ({settings.DAYS_PER_YEAR} days)",
            result.per_year,
            result.usd_per_year,
        )

    if result.apr is not None:
        st.metric(
            "Estimated APR (USD)",
            f"{format_percent(result.apr.apr_percent)}%",
            help=(
                "Projected USD earned per year divided by the current USD value "
                f"of your {settings.HOLDING_TOKEN_SYMBOL} holdings."
            ),
        )
        st.caption(f"Position value ≈ {format_usd(result.apr.position_value_usd)}")

    with st.expander("Projection table", expanded=False):
        st.dataframe(
            projection_to_dataframe(result),
            hide_index=True,
            use_container_width=True,
        )
