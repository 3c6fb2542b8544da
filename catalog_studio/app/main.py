"""
Catalog Studio - Streamlit entry point.

    streamlit run catalog_studio/app/main.py
"""
import os, sys
import streamlit as st

# streamlit only puts this file's directory on sys.path; the project root is two levels above it
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from catalog_studio.utils import errors, logging as app_logging  # noqa: E402
from catalog_studio.app import routing, state  # noqa: E402
from catalog_studio.components import header, notification, sidebar  # noqa: E402
from catalog_studio.utils.typing import Page  # noqa: E402
from catalog_studio.views import about, catalog, home  # noqa: E402

def configure_page() -> None:
    st.set_page_config(
        page_title="Catalog Studio",
        page_icon="🗂️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

@errors.ui_error_boundary
def main() -> None:
    app_logging.init()
    configure_page()
    state.initialize(routing.current_signal())
    header.render()
    sidebar.render()
    notification.render()

    page = routing.sync_view()
    if page in (Page.PRODUCTS, Page.PLUGINS):
        catalog.render()
    elif page == Page.ABOUT:
        about.render()
    else:
        home.render()

if __name__ == "__main__":
    main()
