import streamlit as st
from catalog_studio.app import runtime, state
from catalog_studio.utils.typing import Page

QUERY_PARAM = "view"

def current_signal() -> str:
    return st.query_params.get(QUERY_PARAM, "")

def sync_view() -> Page:
    """Follow the ``?view=`` parameter, e.g. after browser back/forward."""
    controller = state.get_controller()
    runtime.run(controller.navigate(current_signal()))
    return controller.state.page

def set_view(page: Page) -> None:
    st.query_params[QUERY_PARAM] = page.value
    runtime.run(state.get_controller().navigate(page.value))
