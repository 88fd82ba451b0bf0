import logging

import streamlit as st

from ciderplan.config.env import LOG_LEVEL
from ciderplan.ui.layout import render_dashboard

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def main() -> None:
    st.set_page_config(
        page_title="Cidery Cost & Financial Planner",
        layout="wide",
    )
    render_dashboard()


if __name__ == "__main__":
    main()
