import streamlit as st
from catalog_studio.app import state

def render() -> None:
    settings = state.get_settings()
    st.header("ℹ️ About")
    st.markdown(
        """
        **Catalog Studio** is a browser for the product and plugin catalogs
        served by a generation server.

        - Search matches names, descriptions and codes; best matches first.
        - Licensee and assignee names are stored locally and reused.
        - Generated codes can be copied from the result panel.
        """
    )
    st.caption(f"Settings directory: {settings.config_dir}")
