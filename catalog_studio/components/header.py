import streamlit as st
from catalog_studio.app import state

def render() -> None:
    settings = state.get_settings()
    st.markdown(
        """
        <style>
        .cs-banner{border-left:6px solid #2d5a87;padding:8px 16px;margin:4px 0 12px;background:rgba(45,90,135,.08)}
        .cs-banner h1{margin:0;font-size:1.8rem}
        .cs-banner p{margin:0;opacity:.7}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.markdown(
        f'<div class="cs-banner"><h1>🗂️ Catalog Studio</h1><p>{settings.server_url}</p></div>',
        unsafe_allow_html=True,
    )
