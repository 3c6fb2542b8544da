import streamlit as st
from catalog_studio.app import state
from catalog_studio.services.notifications import ERROR

def render() -> None:
    """Show the notification currently visible, if any."""
    note = state.get_controller().notifier.current
    if note is None:
        return
    if note.kind == ERROR:
        st.error(note.message, icon="⚠️")
    else:
        st.success(note.message, icon="✅")
