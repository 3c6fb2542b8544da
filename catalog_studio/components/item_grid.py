import streamlit as st
from typing import List
from catalog_studio.app import state
from catalog_studio.utils.errors import ui_error_boundary
from catalog_studio.utils.typing import Category, Item

COLUMNS = 4

@ui_error_boundary
def render_search(category: Category) -> None:
    """Search box; every change re-ranks the active catalog."""
    controller = state.get_controller()
    key = f"search_{category.value}_{controller.state.view_token}"
    query = st.text_input(
        f"Search {category.value}",
        value=controller.state.query,
        placeholder="Search by name, description or code...",
        key=key,
    )
    if query != controller.state.query:
        controller.set_query(query)

@ui_error_boundary
def render_grid(category: Category, items: List[Item]) -> None:
    controller = state.get_controller()
    icons = state.get_icons()
    total = len(controller.category_items())

    if controller.state.loading:
        st.info(f"Loading {category.value}...")
        return
    if not total:
        st.info(f"No {category.value} available.")
        return
    if not items:
        st.info(f"No {category.value} match: '{controller.state.query}'")
        return
    if controller.state.query:
        st.caption(f"📊 Showing {len(items)} of {total} {category.value}")

    cols = st.columns(COLUMNS)
    for i, item in enumerate(items):
        with cols[i % COLUMNS]:
            with st.container(border=True):
                st.image(icons.icon_for(category, item), width=48)
                st.markdown(f"**{item.name}**")
                if item.code:
                    st.caption(item.code)
                if item.description:
                    st.caption(item.description[:140])
                if st.button("Select", key=f"select_{category.value}_{i}_{item.key}", use_container_width=True):
                    controller.select_item(item)
                    st.rerun()
