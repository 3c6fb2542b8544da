import streamlit as st
from catalog_studio.app import routing, state
from catalog_studio.utils.errors import ui_error_boundary
from catalog_studio.utils.typing import Page

LABELS = {
    Page.HOME: "🏠 Home",
    Page.PRODUCTS: "📦 Products",
    Page.PLUGINS: "🧩 Plugins",
    Page.ABOUT: "ℹ️ About",
}
PAGES = list(LABELS)

def render() -> None:
    with st.sidebar:
        st.header("Navigation")
        current = state.get_controller().state.page
        sel = st.radio("View", PAGES, index=PAGES.index(current), format_func=LABELS.get)
        if sel != current:
            routing.set_view(sel)
            st.rerun()

        st.divider()
        render_configuration()

@ui_error_boundary
def render_configuration() -> None:
    """Licensee / assignee names used for every generation request."""
    controller = state.get_controller()
    prefs = controller.preferences

    st.header("Configuration")
    if controller.state.needs_configuration:
        st.warning("Set a licensee and an assignee name before generating.")

    with st.form("preferences_form", clear_on_submit=False):
        licensee = st.text_input("Licensee name", value=prefs.licensee_name)
        assignee = st.text_input("Assignee name", value=prefs.assignee_name)
        saved = st.form_submit_button("💾 Save", use_container_width=True)
    if saved:
        if controller.save_preferences(licensee, assignee):
            st.rerun()
        else:
            st.error("Both names are required.")

    if prefs.is_configured and st.button("🧹 Clear saved names", use_container_width=True):
        controller.clear_preferences()
        st.rerun()
