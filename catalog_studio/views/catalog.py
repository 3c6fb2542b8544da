import streamlit as st
from catalog_studio.app import runtime, state
from catalog_studio.components import generation_panel, item_grid, result_panel
from catalog_studio.utils.errors import ui_error_boundary

TITLES = {
    "products": "📦 Products",
    "plugins": "🧩 Plugins",
}

@ui_error_boundary
def render() -> None:
    controller = state.get_controller()
    category = controller.active_category
    if category is None:
        return

    title_col, reload_col = st.columns([5, 1])
    with title_col:
        st.header(TITLES[category.value])
    with reload_col:
        # a failed fetch leaves the catalog uncached; this retries it
        if controller.store.cached(category) is None and st.button("🔄 Retry", use_container_width=True):
            runtime.run(controller.refresh())
            st.rerun()

    result_panel.render()
    generation_panel.render()

    item_grid.render_search(category)
    item_grid.render_grid(category, controller.state.ranked)
