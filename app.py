import streamlit as st

from src.config import settings
from src.config.logging_setup import configure_logging
from src.ui.layout import render_dashboard


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    st.set_page_config(
        page_title="My Send Rewards",
        layout="centered",
    )
    render_dashboard()


if __name__ == "__main__":
    main()
