"""Main Application Entry Point.

Run with `streamlit run app.py`.
"""

import os
import sys

import streamlit as st

# Add project root to path (for running from root)
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from simulocatif.core.logging import get_logger
from simulocatif.core.settings import get_settings
from simulocatif.ui.components.sidebar import render_parameter_form
from simulocatif.ui.pages.main import render_main_page
from simulocatif.ui.state import SessionManager


def main() -> None:
    """Main application entry point."""
    # Streamlit configuration (must be first Streamlit call)
    st.set_page_config(
        page_title="Simulateur d'investissement locatif",
        page_icon="🏢",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    log = get_logger(__name__)

    SessionManager.initialize()
    if SessionManager.consume_welcome():
        log.info("app_started")
        if get_settings().show_welcome_toast:
            st.toast("Bienvenue dans le simulateur d'investissement locatif")

    if st.sidebar.button("↺ Réinitialiser"):
        SessionManager.reset_params()
        st.rerun()

    params = render_parameter_form(SessionManager.get_params())
    SessionManager.set_params(params)

    render_main_page(params)


if __name__ == "__main__":
    main()
