import streamlit as st
from catalog_studio.app import routing, state
from catalog_studio.utils.errors import ui_error_boundary
from catalog_studio.utils.typing import Category, Page

@ui_error_boundary
def render() -> None:
    controller = state.get_controller()
    settings = state.get_settings()

    st.header("🏠 Home")
    st.markdown("Search the catalog, pick an entry and generate a code for it.")

    st.subheader("Server")
    st.code(settings.server_url, language=None)

    col1, col2, col3 = st.columns(3)
    with col1:
        products = controller.store.cached(Category.PRODUCTS)
        st.metric("Products", len(products) if products is not None else "–")
    with col2:
        plugins = controller.store.cached(Category.PLUGINS)
        st.metric("Plugins", len(plugins) if plugins is not None else "–")
    with col3:
        st.metric("Configured", "🟢 Yes" if controller.preferences.is_configured else "🔴 No")

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Browse products", use_container_width=True):
            routing.set_view(Page.PRODUCTS)
            st.rerun()
    with c2:
        if st.button("Browse plugins", use_container_width=True):
            routing.set_view(Page.PLUGINS)
            st.rerun()
